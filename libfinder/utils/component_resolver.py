import sys
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional

from ..cli_logger import logger
from .path_resolver import find_library


@dataclass(frozen=True)
class ComponentSpec:
    logical_name: str
    physical_lib_name: str


@dataclass(frozen=True)
class ComponentHandle:
    name: str
    found: bool
    library_path: Optional[str]
    include_path: str
    is_registered_target: bool


def map_component_name(name: str, mapping: Mapping[str, str], prefix: str = "") -> str:
    """
    Maps a logical component name to the library it lives in.

    Names in ``mapping`` win; anything else is assumed to follow the ``<prefix><name>``
    convention. A component with an irregular library name needs a mapping entry, it is
    not guessed.
    """
    if name in mapping:
        return mapping[name]
    return f"{prefix}{name}"


def build_component_specs(requested_names: Iterable[str], mapping: Mapping[str, str], prefix: str = ""):
    # dict.fromkeys drops duplicates but keeps the caller's order
    return [
        ComponentSpec(logical_name=name, physical_lib_name=map_component_name(name, mapping, prefix))
        for name in dict.fromkeys(requested_names)
    ]


def resolve_components(
    requested_names: Iterable[str],
    library_dirs: Iterable[str],
    include_dir: Optional[str],
    mapping: Optional[Mapping[str, str]] = None,
    prefix: str = "",
    platform: str = sys.platform,
) -> Dict[str, ComponentHandle]:
    """
    Looks up every requested component in ``library_dirs``.

    Components are only attempted once the primary include directory is known, since every
    component shares it. Missing components are recorded with ``found=False``.
    """
    if not include_dir:
        return {}

    library_dirs = list(library_dirs)
    handles = {}
    for component in build_component_specs(requested_names, mapping or {}, prefix):
        logger.debug(f"Looking for component '{component.logical_name}' (library '{component.physical_lib_name}')")
        result = find_library(library_dirs, component.physical_lib_name, platform=platform)
        handles[component.logical_name] = ComponentHandle(
            name=component.logical_name,
            found=result.found,
            library_path=result.path,
            include_path=include_dir,
            is_registered_target=result.found,
        )
        if not result.found:
            logger.debug(f"  component '{component.logical_name}' not found")
    return handles
