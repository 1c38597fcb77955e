import click
from .. import config
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..exporters import FORMATTERS
from ..finder import find_package
from ..packages import get_package_definition
from ..utils import handle_standard_args


def report_components(result):
    for name, handle in result.components.items():
        if handle.found:
            logger.step_info(f"  - {name}: {handle.library_path}")
        else:
            logger.step_info(f"  - {name}: not found")


@click.command()
@click.argument("name", default="TensorRT")
@click.option("--component", "-c", "components", multiple=True, help="Optional component to look for.")
@click.option("--require", "-r", "required", multiple=True, help="Component that must be found.")
@click.option("--include-dir", "-I", "include_dirs", multiple=True, help="Extra directory to search for headers.")
@click.option("--library-dir", "-L", "library_dirs", multiple=True, help="Extra directory to search for libraries.")
@click.option("--version", "version", default=None, help="Minimum version required.")
@click.option("--exact", is_flag=True, help="Require exactly the given version.")
@click.option("--required", "fail_if_missing", is_flag=True, help="Exit with an error when the package is not satisfied.")
@click.option("--format", "output_format", type=click.Choice(["text", "json", "cmake", "flags"]), default="text",
              help="Output format.")
@click.pass_context
@handle_exceptions
def find(ctx, name, components, required, include_dirs, library_dirs, version, exact, fail_if_missing, output_format):
    """Locate a native library, its version and its components."""
    conf = config.load_config(path=ctx.obj["path"])
    try:
        definition = get_package_definition(name, conf)
    except KeyError as e:
        logger.error(f"Error: Unknown package {e}. Run 'libfinder list-packages' to see the known packages.")
        ctx.exit(1)

    if components or required:
        requested = list(components) + list(required)
        required_components = list(required)
    else:
        requested = None
        required_components = list(definition.required_components)
    version = version or definition.version

    result = find_package(name, components=requested, conf=conf,
                          include_dirs=include_dirs, library_dirs=library_dirs)
    ok, message = handle_standard_args(result, version=version, exact=exact,
                                       required_components=required_components)

    if output_format == "text":
        if ok:
            logger.success(message)
            logger.step_info(f"  include dirs: {' '.join(sorted(result.include_dirs))}")
            logger.step_info(f"  libraries: {' '.join(sorted(result.libraries))}")
        report_components(result)
    else:
        click.echo(FORMATTERS[output_format](result), nl=output_format != "cmake")

    if not ok:
        logger.error(message)
        if fail_if_missing:
            ctx.exit(1)
