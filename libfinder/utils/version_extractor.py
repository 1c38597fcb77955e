import os
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from ..cli_logger import logger

VERSION_FIELDS = ("MAJOR", "MINOR", "PATCH", "BUILD")


@dataclass(frozen=True)
class VersionInfo:
    """
    Up to four version numbers in MAJOR.MINOR.PATCH.BUILD order.

    Fields missing from the header are left out rather than zero-filled, so a header that
    only defines MAJOR and MINOR gives ``"10.3"``.
    """

    fields: Tuple[int, ...] = ()

    def __str__(self):
        return ".".join(str(field) for field in self.fields)

    def __bool__(self):
        return bool(self.fields)


def _field_pattern(macro_prefix, field):
    return re.compile(
        rf"^[ \t]*#define[ \t]+{re.escape(macro_prefix)}_{field}[ \t]+([0-9]+)[^\n]*$",
        re.MULTILINE,
    )


def parse_version_text(text: str, macro_prefix: str) -> VersionInfo:
    fields = []
    for field in VERSION_FIELDS:
        # search() keeps only the first definition of each macro
        match = _field_pattern(macro_prefix, field).search(text)
        if match:
            fields.append(int(match.group(1)))
    return VersionInfo(tuple(fields))


def locate_version_header(include_dir: Optional[str], filename: Optional[str]) -> Optional[str]:
    if not include_dir or not filename:
        return None
    header_path = os.path.join(include_dir, filename)
    if not os.path.isfile(header_path):
        logger.debug(f"  version header {header_path} does not exist")
        return None
    return header_path


def extract_version(header_path: Optional[str], macro_prefix: str) -> VersionInfo:
    """Reads a version header and returns whatever version fields it defines."""
    if not header_path or not os.path.isfile(header_path):
        return VersionInfo()
    try:
        with open(header_path, "r", encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError as e:
        logger.warning(f"Could not read version header {header_path}: {e}")
        return VersionInfo()

    version = parse_version_text(text, macro_prefix)
    if version:
        logger.debug(f"  parsed version {version} from {header_path}")
    else:
        logger.debug(f"  no {macro_prefix}_* version macros in {header_path}")
    return version
