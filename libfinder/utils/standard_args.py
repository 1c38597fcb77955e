from typing import Iterable, Optional, Tuple

from packaging.version import InvalidVersion, Version

from .result_assembler import ResolutionResult


def _check_version(result: ResolutionResult, version: str, exact: bool) -> Optional[str]:
    """Returns a failure message, or None when the found version is acceptable."""
    relation = "exactly" if exact else "at least"
    if not result.version:
        return (f"Could NOT find {result.name}: version could not be determined, "
                f"required is {relation} \"{version}\"")
    try:
        wanted = Version(version)
    except InvalidVersion:
        return f"Could NOT find {result.name}: invalid version requirement \"{version}\""

    found = Version(str(result.version))
    if exact:
        # "8.6" exactly matches 8.6.1.6, like CMake's prefix comparison
        wanted_parts = wanted.release
        ok = found.release[:len(wanted_parts)] == wanted_parts
    else:
        ok = found >= wanted
    if ok:
        return None
    return (f"Could NOT find {result.name}: Found unsuitable version \"{result.version}\", "
            f"but required is {relation} \"{version}\"")


def handle_standard_args(
    result: ResolutionResult,
    version: Optional[str] = None,
    exact: bool = False,
    required_components: Iterable[str] = (),
) -> Tuple[bool, str]:
    """
    Decides whether a resolution satisfies the caller and builds the message to show.

    The result itself is left untouched; ``result.found`` only reflects the primary
    header and library.
    """
    if not result.found:
        return False, f"Could NOT find {result.name} (missing: {' '.join(result.missing)})"

    if version:
        failure = _check_version(result, version, exact)
        if failure:
            return False, failure

    missing_components = [
        name for name in dict.fromkeys(required_components)
        if not (name in result.components and result.components[name].found)
    ]
    if missing_components:
        return False, f"Could NOT find {result.name} (missing: {' '.join(missing_components)})"

    message = f"Found {result.name}: {result.library}"
    if result.version:
        message += f" (found version \"{result.version}\")"
    found_components = [name for name, handle in result.components.items() if handle.found]
    if result.components:
        message += f" found components: {' '.join(found_components) or '<none>'}"
    return True, message
