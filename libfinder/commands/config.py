import click
import os
import sys
import json
import toml
from .. import config as config_module
from ..cli_logger import logger

NO_CONFIG_MESSAGE = "Error: No libfinder.toml found. Use 'libfinder config set <key> <value>' to create one."


def parse_value(value):
    """Interpret arrays, tables and booleans as TOML literals; everything else stays a string."""
    if not value.startswith(("[", "{")) and value not in ("true", "false"):
        return value
    try:
        return toml.loads(f"value = {value}")["value"]
    except toml.TomlDecodeError:
        return value


@click.group()
@click.pass_context
def config(ctx):
    """View or edit the libfinder.toml configuration file."""
    pass

@config.command()
@click.pass_context
def view(ctx):
    """View the contents of the libfinder.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(NO_CONFIG_MESSAGE)
        return
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    try:
        with open(config_file_path, 'r') as f:
            click.echo(f.read())
    except IOError as e:
        logger.error(f"Error reading libfinder.toml at {config_file_path}: {e}")
        logger.info("Please check file permissions.")

@config.command()
@click.pass_context
def edit(ctx):
    """Edit the libfinder.toml file in your default editor."""
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    if not os.path.exists(config_file_path):
        logger.error(NO_CONFIG_MESSAGE)
        return
    try:
        click.edit(filename=config_file_path)
    except click.ClickException as e:
        logger.error(f"Click error editing libfinder.toml: {e}")
        logger.info("This might indicate an issue with your editor configuration or environment variables.")
    except Exception as e:
        logger.error(f"An unexpected error occurred while editing libfinder.toml: {e}")
        logger.info("Please ensure your default editor is configured correctly and has necessary permissions.")
        logger.exception(*sys.exc_info())

@config.command(name="list")
@click.pass_context
def list_config(ctx):
    """List all configuration keys and values."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(NO_CONFIG_MESSAGE)
        return
    click.echo(json.dumps(conf, indent=4))

@config.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """Get a value from the libfinder.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(NO_CONFIG_MESSAGE)
        return

    keys = key.split('.')
    value = conf
    try:
        for k in keys:
            value = value[k]
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in libfinder.toml")
        return
    if isinstance(value, (dict, list)):
        click.echo(json.dumps(value, indent=4))
    else:
        click.echo(value)

@config.command(name="set")
@click.argument('key')
@click.argument('value')
@click.pass_context
def set_value(ctx, key, value):
    """Set a value in the libfinder.toml file, creating it if needed."""
    conf = config_module.load_config(path=ctx.obj["path"])

    keys = key.split('.')
    d = conf
    try:
        for k in keys[:-1]:
            d = d.setdefault(k, {})
        d[keys[-1]] = parse_value(value)
    except (AttributeError, TypeError):
        logger.error(f"Error: Cannot set '{key}': a parent key is not a table.")
        return

    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Set '{key}' to '{value}'")

@config.command()
@click.argument('key')
@click.pass_context
def unset(ctx, key):
    """Remove a key from the libfinder.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(NO_CONFIG_MESSAGE)
        return

    keys = key.split('.')
    d = conf
    try:
        for k in keys[:-1]:
            d = d[k]
        del d[keys[-1]]
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in libfinder.toml")
        return
    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Unset '{key}'")
