import click
from .cli_logger import logger
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the project directory holding libfinder.toml.")
@click.option("--verbose", "-v", is_flag=True, help="Show every directory probed.")
@click.pass_context
def cli(ctx, path, verbose):
    """libfinder: locate native libraries and export them as build targets."""
    ctx.obj = {"path": path}
    logger.set_verbose(verbose)

cli.add_command(find)
cli.add_command(list_packages)
cli.add_command(doctor)
cli.add_command(config)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    try:
        cli()
    except Exception as e:
        click.echo(f"An unexpected error occurred: {e}", err=True)
        click.echo("Please report this issue to the libfinder developers.", err=True)
