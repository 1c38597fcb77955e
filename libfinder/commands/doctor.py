import click
from .. import config
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..finder import find_package
from ..packages import get_package_definition, TENSORRT
from ..utils import handle_standard_args


def check_packages(conf):
    """Run find_package for every configured package. Returns True when all are satisfied."""
    names = list(config.get_package_sections(conf)) or [TENSORRT.name]
    all_ok = True
    for name in names:
        try:
            definition = get_package_definition(name, conf)
        except KeyError as e:
            logger.warning(f"Skipping invalid package configuration {e}.")
            all_ok = False
            continue
        result = find_package(name, conf=conf)
        ok, message = handle_standard_args(result, version=definition.version,
                                           required_components=definition.required_components)
        if ok:
            logger.success(message)
        else:
            logger.warning(message)
            all_ok = False
        for component, handle in result.components.items():
            if not handle.found:
                logger.warning(f"  Optional component '{component}' of {name} was not found.")
    return all_ok


@click.command()
@click.pass_context
@handle_exceptions
def doctor(ctx):
    """Check that every configured package can be found."""
    logger.info("Running environment check...")
    conf = config.load_config(path=ctx.obj["path"])
    if check_packages(conf):
        logger.success("Environment check completed successfully.")
    else:
        logger.error("Environment check found issues. Please review the warnings above.")
        ctx.exit(1)
