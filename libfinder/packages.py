import os
from dataclasses import dataclass, field, replace
from typing import Dict, Mapping, Optional, Tuple

from . import config as config_module
from .cli_logger import logger


@dataclass(frozen=True)
class PackageDefinition:
    """Where a native library lives and how its pieces are named."""

    name: str
    header: str
    library: str
    version_header: Optional[str] = None
    version_macro_prefix: Optional[str] = None
    include_dirs: Tuple[str, ...] = ()
    library_dirs: Tuple[str, ...] = ()
    component_mapping: Mapping[str, str] = field(default_factory=dict)
    component_prefix: str = ""
    components: Tuple[str, ...] = ()
    required_components: Tuple[str, ...] = ()
    version: Optional[str] = None


TENSORRT = PackageDefinition(
    name="TensorRT",
    header="NvInfer.h",
    library="nvinfer",
    version_header="NvInferVersion.h",
    version_macro_prefix="NV_TENSORRT",
    include_dirs=(
        "/usr/include",
        "/usr/include/x86_64-linux-gnu",
        "/usr/local/include",
        "/usr/local/include/x86_64-linux-gnu",
    ),
    library_dirs=(
        "/usr/lib",
        "/usr/lib/x86_64-linux-gnu",
        "/usr/local/lib",
        "/usr/local/lib/x86_64-linux-gnu",
    ),
    component_mapping={
        "infer_plugin": "nvinfer_plugin",
        "onnxparser": "nvonnxparser",
    },
    component_prefix="nv",
)

BUILTIN_PACKAGES: Dict[str, PackageDefinition] = {
    TENSORRT.name: TENSORRT,
}

_LIST_KEYS = ("include_dirs", "library_dirs", "components", "required_components")
_STRING_KEYS = ("header", "library", "version_header", "version_macro_prefix", "component_prefix", "version")


def _as_tuple(value):
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(item) for item in value)


def merge_package_config(name, section, base=None):
    """
    Lays a ``[packages.<name>]`` config table over a built-in definition.

    Configured directories are searched before the built-in hints and mapping entries
    override the built-in table. Without a built-in definition the table has to name at
    least ``header`` and ``library``.
    """
    if base is None:
        missing = [key for key in ("header", "library") if not section.get(key)]
        if missing:
            raise KeyError(f"{name} (configuration is missing {', '.join(missing)})")
        base = PackageDefinition(name=name, header=section["header"], library=section["library"])

    changes = {}
    for key in _STRING_KEYS:
        if section.get(key) is not None:
            changes[key] = str(section[key])
    for key in ("include_dirs", "library_dirs"):
        if key in section:
            changes[key] = _as_tuple(section[key]) + getattr(base, key)
    for key in ("components", "required_components"):
        if key in section:
            changes[key] = _as_tuple(section[key])

    mapping = section.get("component_mapping")
    if mapping:
        if isinstance(mapping, dict):
            changes["component_mapping"] = {**base.component_mapping, **{k: str(v) for k, v in mapping.items()}}
        else:
            logger.warning(f"Ignoring component_mapping for {name}: expected a table.")

    return replace(base, **changes)


def get_package_definition(name, conf=None):
    """Return the definition for ``name``; raises KeyError for unknown packages."""
    section = config_module.get_package_section(conf or {}, name)
    base = BUILTIN_PACKAGES.get(name)
    if base is None and not section:
        raise KeyError(name)
    if not section:
        return base
    return merge_package_config(name, section, base)


def list_package_definitions(conf=None):
    names = list(BUILTIN_PACKAGES)
    for name in config_module.get_package_sections(conf or {}):
        if name not in names:
            names.append(name)
    return [get_package_definition(name, conf) for name in names]


def root_hints(name, environ=None):
    """
    Directories under ``<Name>_ROOT`` / ``<NAME>_ROOT``, as (include_dirs, library_dirs).
    """
    environ = os.environ if environ is None else environ
    include_dirs, library_dirs = [], []
    for var in dict.fromkeys((f"{name}_ROOT", f"{name.upper()}_ROOT")):
        root = environ.get(var)
        if not root:
            continue
        logger.debug(f"Using {var}={root}")
        include_dirs.append(os.path.join(root, "include"))
        library_dirs.extend([os.path.join(root, "lib"), os.path.join(root, "lib64")])
    return include_dirs, library_dirs


def candidate_dirs(definition, include_dirs=(), library_dirs=(), environ=None):
    """Ordered search paths: caller directories, then <Name>_ROOT, then configured hints."""
    root_include, root_library = root_hints(definition.name, environ)
    includes = list(include_dirs) + root_include + list(definition.include_dirs)
    libraries = list(library_dirs) + root_library + list(definition.library_dirs)
    return includes, libraries
