"""
Core traversal engine — hasher, hidden-entry filter, walker, index and orchestrator.

This package contains the whole duplicate-detection foundation of samehash:
- HasherImpl + Sha256/Blake2b/XXHash algorithms: chunked streaming content hashing
- is_hidden / is_eligible: platform hidden-attribute probe and filter predicate
- DirectoryWalkerImpl: lists one directory, hashes files, returns subdirectories
- DuplicateIndex: fingerprint → ordered path list aggregation
- Orchestrator: breadth-first FIFO traversal with per-directory error isolation
- Models: RunConfig, FileEntry, WalkResult, ScanStats

All components are pure Python and single-threaded.
"""

from .errors import (
    SameHashError, InvalidConfigurationError, FileReadError, EntryError, TraversalError)
from .models import (
    RunConfig, FileEntry, EntryKind, WalkResult, ScanStats, HashAlgorithmName,
    ContentFingerprint, DEFAULT_CHUNK_SIZE)
from .hasher import (
    HasherImpl, Sha256AlgorithmImpl, Blake2bAlgorithmImpl, XXHashAlgorithmImpl, get_algorithm)
from .hidden import is_hidden, is_eligible
from .walker import DirectoryWalkerImpl
from .index import DuplicateIndex
from .orchestrator import Orchestrator, run

__all__ = [
    "SameHashError",
    "InvalidConfigurationError",
    "FileReadError",
    "EntryError",
    "TraversalError",
    "RunConfig",
    "FileEntry",
    "EntryKind",
    "WalkResult",
    "ScanStats",
    "HashAlgorithmName",
    "ContentFingerprint",
    "DEFAULT_CHUNK_SIZE",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "Blake2bAlgorithmImpl",
    "XXHashAlgorithmImpl",
    "get_algorithm",
    "is_hidden",
    "is_eligible",
    "DirectoryWalkerImpl",
    "DuplicateIndex",
    "Orchestrator",
    "run",
]
