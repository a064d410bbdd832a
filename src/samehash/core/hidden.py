"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/hidden.py
Hidden-entry detection and the eligibility filter applied before traversal.

The platform backend is picked once at import time:
- Windows: FILE_ATTRIBUTE_HIDDEN bit of st_file_attributes
- macOS/BSD: UF_HIDDEN bit of st_flags, or a dot-prefixed name
- Other POSIX: dot-prefixed name
"""

import os
import stat
import sys
import logging
from typing import Optional

from samehash.core.models import FileEntry

logger = logging.getLogger(__name__)

FILE_ATTRIBUTE_HIDDEN = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2)
UF_HIDDEN = getattr(stat, "UF_HIDDEN", 0x8000)


def _has_dot_prefix(path: str) -> bool:
    name = os.path.basename(os.path.normpath(path))
    return name.startswith(".") and name not in (".", "..")


def _stat_or_none(path: str) -> Optional[os.stat_result]:
    try:
        return os.lstat(path)
    except OSError as e:
        logger.debug(f"Could not stat {path} for hidden check: {e}")
        return None


def is_hidden_windows(path: str, stat_result: Optional[os.stat_result] = None) -> bool:
    """Hidden when the native FILE_ATTRIBUTE_HIDDEN bit is set."""
    st = stat_result if stat_result is not None else _stat_or_none(path)
    if st is None:
        return False
    return bool(getattr(st, "st_file_attributes", 0) & FILE_ATTRIBUTE_HIDDEN)


def is_hidden_bsd(path: str, stat_result: Optional[os.stat_result] = None) -> bool:
    """Hidden when the UF_HIDDEN flag is set or the name starts with a dot."""
    if _has_dot_prefix(path):
        return True
    st = stat_result if stat_result is not None else _stat_or_none(path)
    if st is None:
        return False
    return bool(getattr(st, "st_flags", 0) & UF_HIDDEN)


def is_hidden_posix(path: str, stat_result: Optional[os.stat_result] = None) -> bool:
    """Hidden when the name starts with a dot."""
    return _has_dot_prefix(path)


if sys.platform == "win32":
    is_hidden = is_hidden_windows
elif sys.platform == "darwin" or "bsd" in sys.platform:
    is_hidden = is_hidden_bsd
else:
    is_hidden = is_hidden_posix


def is_eligible(entry: FileEntry, include_hidden: bool) -> bool:
    """An entry is skipped only when it is hidden and hidden entries are not included."""
    return include_hidden or not entry.hidden
