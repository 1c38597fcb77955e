from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

from .component_resolver import ComponentHandle
from .version_extractor import VersionInfo


@dataclass(frozen=True)
class TargetDescriptor:
    """An imported target, e.g. ``TensorRT::TensorRT`` or ``TensorRT::onnxparser``."""

    name: str
    imported_location: Optional[str]
    interface_include_dirs: FrozenSet[str] = frozenset()
    # Empty tuple when there is nothing to link, never ("",)
    interface_link_libraries: Tuple[str, ...] = ()
    version: str = ""


@dataclass(frozen=True)
class ResolutionResult:
    name: str
    found: bool
    version: VersionInfo
    include_dir: Optional[str]
    library: Optional[str]
    include_dirs: FrozenSet[str]
    libraries: FrozenSet[str]
    components: Mapping[str, ComponentHandle]
    primary_target: TargetDescriptor
    component_targets: Tuple[TargetDescriptor, ...] = ()
    missing: Tuple[str, ...] = field(default=())

    @property
    def version_string(self):
        return str(self.version)

    @property
    def targets(self) -> Dict[str, TargetDescriptor]:
        """Registered targets: the primary one (when found) followed by the components."""
        targets = {}
        if self.found:
            targets[self.primary_target.name] = self.primary_target
        for target in self.component_targets:
            targets[target.name] = target
        return targets


def target_name(package_name, component=None):
    return f"{package_name}::{component or package_name}"


def assemble(
    name: str,
    include_dir: Optional[str],
    library: Optional[str],
    version: Optional[VersionInfo],
    components: Mapping[str, ComponentHandle],
) -> ResolutionResult:
    version = version or VersionInfo()
    include_set = frozenset([include_dir]) if include_dir else frozenset()

    component_targets = tuple(
        TargetDescriptor(
            name=target_name(name, handle.name),
            imported_location=handle.library_path,
            interface_include_dirs=frozenset([handle.include_path]),
        )
        for handle in components.values()
        if handle.found and handle.is_registered_target
    )

    primary_target = TargetDescriptor(
        name=target_name(name),
        imported_location=library,
        interface_include_dirs=include_set,
        interface_link_libraries=tuple(target.name for target in component_targets),
        version=str(version),
    )

    missing = []
    if not library:
        missing.append(f"{name}_LIBRARY")
    if not include_dir:
        missing.append(f"{name}_INCLUDE_DIR")
    found = not missing

    return ResolutionResult(
        name=name,
        found=found,
        version=version,
        include_dir=include_dir,
        library=library,
        include_dirs=include_set if found else frozenset(),
        libraries=frozenset([library]) if found else frozenset(),
        components=dict(components),
        primary_target=primary_target,
        component_targets=component_targets,
        missing=tuple(missing),
    )
