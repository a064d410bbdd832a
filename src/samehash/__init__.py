"""
SameHash — duplicate file finder based on content hashes.

Core features:
- Breadth-first directory traversal with an explicit work queue (no recursion limit)
- Streaming SHA-256 / BLAKE2b / xxHash64 fingerprints with bounded memory
- Hidden-entry filtering using native attributes or dot-prefix naming
- Report-only: files are never moved, merged or deleted
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("samehash")
except PackageNotFoundError:
    import tomllib
    from pathlib import Path

    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from samehash.commands import DuplicateSearchCommand
from samehash.core import (
    RunConfig, DuplicateIndex, Orchestrator, HashAlgorithmName, ScanStats,
    InvalidConfigurationError, FileReadError)
from samehash.utils.convert_utils import ConvertUtils

__all__ = [
    "DuplicateSearchCommand",
    "RunConfig",
    "DuplicateIndex",
    "Orchestrator",
    "HashAlgorithmName",
    "ScanStats",
    "InvalidConfigurationError",
    "FileReadError",
    "ConvertUtils",
    "__version__",
]
