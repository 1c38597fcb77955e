import click
from .. import config
from ..cli_logger import logger
from ..packages import BUILTIN_PACKAGES, list_package_definitions
from ..utils.component_resolver import map_component_name

@click.command(name="list-packages")
@click.pass_context
def list_packages(ctx):
    """List the packages libfinder knows how to find."""
    conf = config.load_config(path=ctx.obj["path"])
    try:
        definitions = list_package_definitions(conf)
    except KeyError as e:
        logger.error(f"Error: Invalid package configuration for {e}.")
        logger.info("Custom packages need at least 'header' and 'library'.")
        return

    for definition in definitions:
        origin = "built-in" if definition.name in BUILTIN_PACKAGES else "configured"
        logger.info(f"{definition.name} ({origin}):")
        logger.step_info(f"  header: {definition.header}", indent=2)
        logger.step_info(f"  library: {definition.library}", indent=2)
        if definition.version_header:
            logger.step_info(f"  version header: {definition.version_header} ({definition.version_macro_prefix}_*)", indent=2)
        if definition.component_mapping:
            logger.step_info("  components:", indent=2)
            for component in definition.component_mapping:
                libname = map_component_name(component, definition.component_mapping, definition.component_prefix)
                logger.step_info(f"    - {component} -> {libname}", indent=2)
        if definition.component_prefix:
            logger.step_info(f"  other components: {definition.component_prefix}<name>", indent=2)
