"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/index.py
Aggregates (path, fingerprint) pairs into duplicate groups.
"""

from collections import defaultdict
from typing import Dict, List

from samehash.core.models import ContentFingerprint


class DuplicateIndex:
    """
    Mapping from content fingerprint to the paths that produced it.
    Keys keep first-discovery order, each list keeps insertion order.
    """

    def __init__(self):
        self._groups: Dict[ContentFingerprint, List[str]] = defaultdict(list)

    def record(self, path: str, fingerprint: ContentFingerprint) -> None:
        """Append `path` to the list for `fingerprint`, creating it if absent."""
        self._groups[fingerprint].append(path)

    def finalize(self) -> Dict[ContentFingerprint, List[str]]:
        """Returns a copy of the accumulated mapping for reporting."""
        return {fingerprint: list(paths) for fingerprint, paths in self._groups.items()}

    def duplicate_groups(self) -> Dict[ContentFingerprint, List[str]]:
        """Only the fingerprints shared by two or more paths."""
        return {
            fingerprint: list(paths)
            for fingerprint, paths in self._groups.items()
            if len(paths) > 1
        }

    @property
    def unique_count(self) -> int:
        return len(self._groups)

    @property
    def file_count(self) -> int:
        return sum(len(paths) for paths in self._groups.values())

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, fingerprint: object) -> bool:
        return fingerprint in self._groups

    def __getitem__(self, fingerprint: ContentFingerprint) -> List[str]:
        if fingerprint not in self._groups:
            raise KeyError(fingerprint)
        return list(self._groups[fingerprint])

    def __repr__(self):
        return f"<DuplicateIndex unique={self.unique_count}, files={self.file_count}>"
