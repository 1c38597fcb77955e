import os
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..cli_logger import logger

_LIBRARY_SUFFIXES = (".so", ".a", ".dylib", ".lib", ".dll")


@dataclass(frozen=True)
class DiscoveryResult:
    """Outcome of a single lookup. ``path`` is None when nothing was found."""

    found: bool
    path: Optional[str] = None

    @classmethod
    def missing(cls) -> "DiscoveryResult":
        return cls(found=False, path=None)


def find_first_existing(candidate_dirs: Iterable[str], filename: str) -> DiscoveryResult:
    """
    Returns the first ``<dir>/<filename>`` that exists, probing ``candidate_dirs`` in order.
    """
    for directory in candidate_dirs:
        if not directory:
            continue
        candidate = os.path.join(directory, filename)
        if os.path.exists(candidate):
            logger.debug(f"  found {filename} in {directory}")
            return DiscoveryResult(found=True, path=candidate)
    return DiscoveryResult.missing()


def find_path(candidate_dirs: Iterable[str], filename: str) -> DiscoveryResult:
    """Like find_first_existing, but reports the directory holding the file."""
    result = find_first_existing(candidate_dirs, filename)
    if not result.found:
        logger.debug(f"  {filename} not found in any include directory")
        return result
    return DiscoveryResult(found=True, path=os.path.dirname(result.path))


def library_filenames(name: str, platform: str = sys.platform) -> List[str]:
    """
    Expands a library base name (``nvinfer``) into the file names the linker would accept,
    most preferred first.
    """
    if name.endswith(_LIBRARY_SUFFIXES) or ".so." in name:
        return [name]
    if platform.startswith("win"):
        return [f"{name}.lib", f"lib{name}.lib"]
    if platform == "darwin":
        return [f"lib{name}.dylib", f"lib{name}.a"]
    return [f"lib{name}.so", f"lib{name}.a"]


def find_library(candidate_dirs: Iterable[str], name: str, platform: str = sys.platform) -> DiscoveryResult:
    filenames = library_filenames(name, platform)
    # Directory order takes priority over file name order
    for directory in candidate_dirs:
        for filename in filenames:
            result = find_first_existing([directory], filename)
            if result.found:
                return result
    logger.debug(f"  library '{name}' not found in any library directory")
    return DiscoveryResult.missing()
