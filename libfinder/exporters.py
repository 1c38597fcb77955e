import json


def _target_dict(target):
    return {
        "name": target.name,
        "imported_location": target.imported_location,
        "interface_include_dirs": sorted(target.interface_include_dirs),
        "interface_link_libraries": list(target.interface_link_libraries),
        "version": target.version,
    }


def to_dict(result):
    return {
        "name": result.name,
        "found": result.found,
        "version": str(result.version),
        "include_dirs": sorted(result.include_dirs),
        "libraries": sorted(result.libraries),
        "missing": list(result.missing),
        "components": {
            name: {
                "found": handle.found,
                "library_path": handle.library_path,
                "include_path": handle.include_path,
                "is_registered_target": handle.is_registered_target,
            }
            for name, handle in result.components.items()
        },
        "targets": {name: _target_dict(target) for name, target in result.targets.items()},
    }


def to_json(result, indent=4):
    return json.dumps(to_dict(result), indent=indent)


def _cmake_quote(value):
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _cmake_list(values):
    return _cmake_quote(";".join(values))


def _cmake_target(target):
    lines = [
        f"if(NOT TARGET {target.name})",
        f"  add_library({target.name} UNKNOWN IMPORTED)",
        "endif()",
        f"set_target_properties({target.name} PROPERTIES",
        f"  IMPORTED_LOCATION {_cmake_quote(target.imported_location)}",
        f"  INTERFACE_INCLUDE_DIRECTORIES {_cmake_list(sorted(target.interface_include_dirs))}",
    ]
    # An empty INTERFACE_LINK_LIBRARIES must be left out, not set to ""
    if target.interface_link_libraries:
        lines.append(f"  INTERFACE_LINK_LIBRARIES {_cmake_list(target.interface_link_libraries)}")
    lines.append(")")
    if target.version:
        lines.append(f"set_property(TARGET {target.name} PROPERTY VERSION {_cmake_quote(target.version)})")
    return lines


def to_cmake(result):
    """Renders the result as a CMake script that can be include()d by a project."""
    name = result.name
    lines = [
        f"# Generated by libfinder for {name}",
        f"set({name}_FOUND {'TRUE' if result.found else 'FALSE'})",
        f"set({name}_VERSION {_cmake_quote(result.version)})",
        f"set({name}_INCLUDE_DIRS {_cmake_list(sorted(result.include_dirs))})",
        f"set({name}_LIBRARIES {_cmake_list(sorted(result.libraries))})",
    ]
    for component, handle in result.components.items():
        lines.append(f"set({name}_{component}_FOUND {'TRUE' if handle.found else 'FALSE'})")

    # Component targets first so the primary target can link to them
    for target in result.component_targets:
        lines.extend(_cmake_target(target))
    if result.found:
        lines.extend(_cmake_target(result.primary_target))
    return "\n".join(lines) + "\n"


def to_flags(result):
    """Compiler and linker arguments: -I<dir> for each include dir, then library paths."""
    flags = [f"-I{include_dir}" for include_dir in sorted(result.include_dirs)]
    if result.found:
        flags.append(result.library)
    flags.extend(target.imported_location for target in result.component_targets)
    return " ".join(flags)


FORMATTERS = {
    "json": to_json,
    "cmake": to_cmake,
    "flags": to_flags,
}
