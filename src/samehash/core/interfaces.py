"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the traversal engine.
These protocols enforce structural typing using Python's `typing.Protocol` so that
hashing backends, hidden-attribute probes and walkers can be swapped in tests.

Key Components:
---------------
- Digest: Incremental digest accumulator (hashlib / xxhash objects satisfy it).
- HashAlgorithm: Factory for fresh Digest objects.
- Hasher: Computes the content fingerprint of one file.
- HiddenProbe: Platform capability answering "is this entry hidden".
- DirectoryWalker: Lists exactly one directory.
"""

import os
from typing import Protocol, Optional

from samehash.core.models import ContentFingerprint, WalkResult


class Digest(Protocol):
    """Interface of an incremental digest object."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in SHA-256, BLAKE2b or xxHash without affecting
    the streaming logic of the hasher.
    """
    name: str

    def new(self) -> Digest:
        """Returns a fresh digest accumulator."""
        ...


class Hasher(Protocol):
    """Interface for fingerprinting file content."""
    bytes_read: int

    def hash(self, path: str) -> ContentFingerprint: ...


class HiddenProbe(Protocol):
    """Interface for the platform hidden-attribute query."""
    def __call__(self, path: str, stat_result: Optional[os.stat_result] = None) -> bool: ...


class DirectoryWalker(Protocol):
    """
    Interface for listing a single directory.

    Methods:
        walk: Returns discovered files (with fingerprints) and subdirectories.
    """
    def walk(self, directory: str) -> WalkResult:
        """
        List the immediate children of one directory.

        Args:
            directory: Directory to list.

        Returns:
            WalkResult with hashed files, subdirectories and per-entry errors.

        Raises:
            OSError: If the directory itself cannot be opened.
        """
        ...
