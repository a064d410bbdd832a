"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for directory traversal and duplicate detection.
"""

import os
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Callable, Dict, Union

from samehash.core.errors import InvalidConfigurationError, EntryError, TraversalError
from samehash.utils.convert_utils import ConvertUtils

# Hex-encoded digest of file content
ContentFingerprint = str

DEFAULT_CHUNK_SIZE = 64 * 1024


# =============================
# Enums
# =============================

class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"


class HashAlgorithmName(Enum):
    """
    Digest function used to fingerprint file content.
    """
    SHA256 = "sha256"
    BLAKE2B = "blake2b"
    XXH64 = "xxh64"

    @property
    def display_name(self) -> str:
        """Human-readable name for console output."""
        mapping = {
            HashAlgorithmName.SHA256: "SHA-256",
            HashAlgorithmName.BLAKE2B: "BLAKE2b",
            HashAlgorithmName.XXH64: "xxHash64",
        }
        return mapping.get(self, self.value)

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            HashAlgorithmName.SHA256:
                "Cryptographic, 64 hex chars (default)",
            HashAlgorithmName.BLAKE2B:
                "Cryptographic, 128 hex chars, faster than SHA-256 on 64-bit CPUs",
            HashAlgorithmName.XXH64:
                "Non-cryptographic, 16 hex chars (fastest, weaker collision guarantees)",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileEntry:
    """
    A single child of a listed directory.
    Produced by the walker, consumed immediately.
    """
    path: str
    kind: EntryKind
    hidden: bool = False

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def __repr__(self):
        return f"<FileEntry path={self.path}, kind={self.kind.value}, hidden={self.hidden}>"


@dataclass
class WalkResult:
    """Outcome of listing exactly one directory."""
    files: List[Tuple[str, ContentFingerprint]] = field(default_factory=list)
    subdirs: List[str] = field(default_factory=list)
    errors: List[EntryError] = field(default_factory=list)
    bytes_hashed: int = 0

    def __repr__(self):
        return (f"<WalkResult files={len(self.files)}, subdirs={len(self.subdirs)}, "
                f"errors={len(self.errors)}>")


@dataclass(frozen=True)
class RunConfig:
    """
    Immutable run configuration with built-in validation.
    Resolved once at startup and only read afterwards.
    """
    root: str
    recurse: bool = False
    include_hidden: bool = False
    follow_symlinks: bool = False
    algorithm: HashAlgorithmName = HashAlgorithmName.SHA256
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root or not str(self.root).strip():
            raise InvalidConfigurationError("Root directory cannot be empty")

        if isinstance(self.algorithm, str):
            try:
                object.__setattr__(self, "algorithm", HashAlgorithmName(self.algorithm.lower()))
            except ValueError:
                valid = ", ".join(a.value for a in HashAlgorithmName)
                raise InvalidConfigurationError(
                    f"Unknown hash algorithm: '{self.algorithm}'. Valid options: {valid}"
                ) from None

        if not isinstance(self.chunk_size, int) or self.chunk_size <= 0:
            raise InvalidConfigurationError("Chunk size must be a positive number of bytes")

        # Index paths are absolute; symlinks in the root itself are kept as given
        object.__setattr__(self, "root", os.path.abspath(os.fspath(self.root)))

    @staticmethod
    def from_human_readable(
            root: str,
            recurse: bool = False,
            include_hidden: bool = False,
            follow_symlinks: bool = False,
            algorithm: str = HashAlgorithmName.SHA256.value,
            chunk_size_str: str = "64K",
    ) -> 'RunConfig':
        """
        Factory method to create a config from human-readable inputs.
        Used by the CLI to convert raw argument strings.
        """
        try:
            chunk_size = ConvertUtils.human_to_bytes(chunk_size_str)
        except ValueError as e:
            raise InvalidConfigurationError(f"Invalid chunk size: {e}") from e

        return RunConfig(
            root=root,
            recurse=recurse,
            include_hidden=include_hidden,
            follow_symlinks=follow_symlinks,
            algorithm=algorithm,
            chunk_size=chunk_size,
        )


class ScanStats:
    """
    Statistics collected during a traversal run.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.directories_walked: int = 0
        self.files_hashed: int = 0
        self.bytes_hashed: int = 0
        self.traversal_errors: List[TraversalError] = []
        self.entry_errors: List[EntryError] = []
        self._start: float = 0.0
        self._listeners: List[Callable[[str, Dict[str, Union[int, float]]], None]] = []

    @property
    def directories_failed(self) -> int:
        return len(self.traversal_errors)

    @property
    def files_skipped(self) -> int:
        return len(self.entry_errors)

    def add_listener(self, listener: Callable[[str, Dict[str, Union[int, float]]], None]):
        """Adds a listener notified after every processed directory."""
        self._listeners.append(listener)

    def start(self) -> None:
        self._start = time.perf_counter()

    def stop(self) -> None:
        self.total_time = time.perf_counter() - self._start

    def record_walk(self, directory: str, result: WalkResult) -> None:
        self.directories_walked += 1
        self.files_hashed += len(result.files)
        self.bytes_hashed += result.bytes_hashed
        self.entry_errors.extend(result.errors)
        self._notify(directory)

    def record_failure(self, error: TraversalError) -> None:
        self.traversal_errors.append(error)
        self._notify(error.path)

    def as_dict(self) -> Dict[str, Union[int, float]]:
        return {
            "directories": self.directories_walked,
            "failed": self.directories_failed,
            "files": self.files_hashed,
            "skipped": self.files_skipped,
            "bytes": self.bytes_hashed,
        }

    def _notify(self, directory: str) -> None:
        snapshot = self.as_dict()
        for listener in self._listeners:
            listener(directory, snapshot)

    def print_summary(self) -> str:
        lines = [
            "📊 Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            f"📁 Directories walked: {self.directories_walked}",
            f"🚫 Directories failed: {self.directories_failed}",
            f"🔍 Files hashed: {self.files_hashed} ({ConvertUtils.bytes_to_human(self.bytes_hashed)})",
            f"⚠️ Files skipped: {self.files_skipped}",
        ]
        return "\n".join(lines)
