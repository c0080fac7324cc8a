import click

from upsguard import __version__
from upsguard.utils.logging import setup_logging

from .monitor import check, shutdown, status, wake
from .system import config_cli


@click.group()
@click.version_option(__version__, prog_name='upsguard')
@click.option('--verbose', '-v', is_flag=True, help='Enables verbose mode.')
@click.option('--quiet', '-q', is_flag=True, help='Enables quiet mode.')
@click.option('--config', '-c', 'config_path', type=click.Path(dir_okay=False),
              help='Path to the monitor configuration file.')
@click.option('--log-file', type=click.Path(dir_okay=False), help='Also append log output to this file.')
@click.pass_context
def app(ctx, verbose, quiet, config_path, log_file):
    """
    upsguard UPS monitor: shuts the NAS down on low battery and wakes it on mains return.
    """
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet
    ctx.obj['CONFIG_PATH'] = config_path

    level = None
    if verbose:
        level = 'DEBUG'
    elif quiet:
        level = 'ERROR'
    setup_logging(level=level, log_file=log_file)


app.add_command(check)
app.add_command(status)
app.add_command(wake)
app.add_command(shutdown)
app.add_command(config_cli, name='config')


def main():
    app(obj={})


if __name__ == '__main__':
    main()
