import sys

from .cli_logger import logger
from .packages import candidate_dirs, get_package_definition
from .utils import (
    assemble,
    extract_version,
    find_library,
    find_path,
    locate_version_header,
    resolve_components,
    VersionInfo,
)


def find_package(name, components=None, conf=None, include_dirs=(), library_dirs=(), environ=None,
                 platform=sys.platform):
    """
    Locates a native library and its optional components.

    Runs the header and library lookups, then reads the version header and resolves the
    requested components when an include directory was found. A missing library is
    reported through ``found=False`` on the returned result, never raised.
    """
    definition = get_package_definition(name, conf)
    if components is None:
        components = definition.components + definition.required_components
    search_includes, search_libraries = candidate_dirs(definition, include_dirs, library_dirs, environ)

    logger.debug(f"Looking for {definition.name} header '{definition.header}' in: {', '.join(search_includes)}")
    include_result = find_path(search_includes, definition.header)
    logger.debug(f"Looking for {definition.name} library '{definition.library}' in: {', '.join(search_libraries)}")
    library_result = find_library(search_libraries, definition.library, platform=platform)

    version = VersionInfo()
    handles = {}
    if include_result.found:
        if definition.version_header and definition.version_macro_prefix:
            header_path = locate_version_header(include_result.path, definition.version_header)
            version = extract_version(header_path, definition.version_macro_prefix)
        handles = resolve_components(
            components,
            search_libraries,
            include_result.path,
            mapping=definition.component_mapping,
            prefix=definition.component_prefix,
            platform=platform,
        )
    elif components:
        logger.debug(f"Skipping components of {definition.name}: no include directory")

    return assemble(definition.name, include_result.path, library_result.path, version, handles)
