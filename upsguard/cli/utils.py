import asyncio
import functools
import sys

import click
from rich.console import Console
from rich.markup import escape

from upsguard.config import ConfigError, MonitorConfig, load_config

console = Console()


def handle_async_command(async_func):
    """Decorator to handle async CLI commands."""
    @functools.wraps(async_func)
    def wrapper(*args, **kwargs):
        try:
            return asyncio.run(async_func(*args, **kwargs))
        except KeyboardInterrupt:
            console.print("\n[yellow]Operation cancelled by user[/yellow]")
            sys.exit(1)
        except Exception as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            sys.exit(1)
    return wrapper


def get_monitor_config(ctx: click.Context) -> MonitorConfig:
    """Load the configuration file named on the command line, exiting on errors."""
    obj = ctx.find_object(dict) or {}
    try:
        return load_config(obj.get('CONFIG_PATH'))
    except ConfigError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        sys.exit(1)
