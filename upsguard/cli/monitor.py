import logging
import sys

import click
from rich.console import Console
from rich.markup import escape

from upsguard.config import MonitorConfig, settings
from upsguard.monitor.engine import EXIT_ABNORMAL, PowerStateEngine
from upsguard.shutdown.executor import RemoteShutdowner
from upsguard.state.store import StateStore
from upsguard.status.parser import StatusParseError
from upsguard.status.provider import StatusProvider, StatusProviderError
from upsguard.wol.signaler import WakeSignaler

from .utils import get_monitor_config, handle_async_command

console = Console()
logger = logging.getLogger(__name__)


def build_engine(config: MonitorConfig) -> PowerStateEngine:
    """Wire the engine to the real status command, state file, SSH and network."""
    return PowerStateEngine(
        config=config,
        provider=StatusProvider(settings.STATUS_COMMAND, settings.STATUS_TIMEOUT),
        store=StateStore(settings.STATE_FILE),
        shutdowner=RemoteShutdowner(),
        signaler=WakeSignaler(
            settings.WOL_BROADCAST_ADDRESS, settings.WOL_PORT, settings.WOL_TIMEOUT
        ),
    )


@click.command()
@click.pass_context
@handle_async_command
async def check(ctx) -> None:
    """Runs one monitoring pass and exits with its status code."""
    config = get_monitor_config(ctx)
    engine = build_engine(config)
    try:
        result = await engine.run()
    except (StatusProviderError, StatusParseError) as e:
        logger.error(f"UPS status check failed: {e}")
        sys.exit(EXIT_ABNORMAL)

    if result.shutdown_result is not None:
        logger.info(f"Shutdown result: {result.shutdown_result.to_dict()}")
    logger.info(f"UPS status check finished: {result.outcome.value} (exit {result.exit_code})")
    sys.exit(result.exit_code)


@click.command()
@click.pass_context
@handle_async_command
async def status(ctx) -> None:
    """Shows the current UPS reading and persisted power state."""
    config = get_monitor_config(ctx)
    engine = build_engine(config)
    reading = await engine.read_battery()
    stored = engine.store.load()

    console.print("[bold blue]UPS Status[/bold blue]")
    status_data = {
        "ups": config.ups.name,
        "low_battery_threshold": f"{config.ups.low_battery_threshold}%",
        "stored_state": stored.value if stored else "unknown",
    }
    if reading is None:
        status_data["reading"] = "[yellow]UPS not found[/yellow]"
    else:
        status_data["battery_level"] = f"{reading.battery_level}%"
        status_data["power_source"] = (
            "[green]AC[/green]" if reading.ac_attached else "[red]Battery[/red]"
        )
        status_data["present"] = "yes" if reading.present else "no"

    for key, value in status_data.items():
        console.print(f"[cyan]{key.replace('_', ' ').title()}[/cyan]: {value}")


@click.command()
@click.pass_context
@handle_async_command
async def wake(ctx) -> None:
    """Sends a Wake-on-LAN packet to the NAS."""
    config = get_monitor_config(ctx)
    console.print(f"[bold blue]Waking NAS at {config.nas.mac_address}[/bold blue]")
    signaler = WakeSignaler(settings.WOL_BROADCAST_ADDRESS, settings.WOL_PORT, settings.WOL_TIMEOUT)
    result = await signaler.wake(config.nas.mac_address)
    if result.success:
        console.print(f"[green]✅ Magic packet sent ({result.bytes_sent} bytes)[/green]")
    else:
        console.print(f"[red]❌ Wake failed: {escape(str(result.error_message))}[/red]")
        sys.exit(1)


@click.command()
@click.option('--dry-run', is_flag=True, help="Show the shutdown command without running it.")
@click.pass_context
@handle_async_command
async def shutdown(ctx, dry_run: bool) -> None:
    """Shuts the NAS down over SSH now."""
    config = get_monitor_config(ctx)
    console.print("[bold blue]NAS Shutdown[/bold blue]")
    console.print(f"Host: {config.nas.username}@{config.nas.host}:{config.nas.port}")
    console.print(f"Dry run: {'Yes' if dry_run else 'No'}")
    result = await RemoteShutdowner().shutdown(config, dry_run=dry_run)
    if result.success:
        console.print(f"[green]✅ {result.command}[/green]")
    else:
        console.print(f"[red]❌ Shutdown {result.status.value}: {escape(str(result.error_message))}[/red]")
        sys.exit(1)
