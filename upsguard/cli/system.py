import click
from rich.console import Console

from upsguard.config import settings

from .utils import get_monitor_config

console = Console()


@click.group(name='config')
def config_cli():
    """Configuration commands."""
    pass


@config_cli.command()
@click.pass_context
def validate(ctx) -> None:
    """Validates the configuration file."""
    console.print("[bold blue]Validating Configuration[/bold blue]")
    config = get_monitor_config(ctx)
    config_data = {
        "nas_host": f"{config.nas.username}@{config.nas.host}:{config.nas.port}",
        "ssh_key": config.nas.ssh_key_path,
        "mac_address": config.nas.mac_address,
        "shutdown_command": config.nas.shutdown_command,
        "ups_name": config.ups.name,
        "low_battery_threshold": f"{config.ups.low_battery_threshold}%",
        "state_file": settings.STATE_FILE,
        "status_command": settings.STATUS_COMMAND,
    }
    for key, value in config_data.items():
        console.print(f"[cyan]{key.replace('_', ' ').title()}[/cyan]: {value}")
    console.print("[green]✅ Configuration is valid[/green]")
