"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/walker.py
Lists exactly one directory and classifies its children.
Features:
- Non-recursive: subdirectories are returned, never entered
- Applies the hidden-entry filter before classification
- Hashes regular files through the injected Hasher
- Per-entry failures are collected and skipped, the listing goes on
"""

import os
import stat
import logging
from typing import List, Optional

from samehash.core.errors import EntryError, FileReadError
from samehash.core.hidden import is_hidden, is_eligible
from samehash.core.interfaces import Hasher, HiddenProbe, DirectoryWalker
from samehash.core.models import FileEntry, EntryKind, WalkResult
from samehash.core.hasher import HasherImpl

logger = logging.getLogger(__name__)


class DirectoryWalkerImpl(DirectoryWalker):
    """
    Walks a single directory level.

    Attributes:
        hasher: Computes fingerprints of discovered files
        include_hidden: When False, hidden files and directories are skipped
        follow_symlinks: When False, symbolic links are skipped entirely
        hidden_probe: Platform capability deciding whether an entry is hidden
    """

    def __init__(
        self,
        hasher: Optional[Hasher] = None,
        include_hidden: bool = False,
        follow_symlinks: bool = False,
        hidden_probe: Optional[HiddenProbe] = None
    ):
        self.hasher = hasher or HasherImpl()
        self.include_hidden = include_hidden
        self.follow_symlinks = follow_symlinks
        self.hidden_probe = hidden_probe or is_hidden

    def walk(self, directory: str) -> WalkResult:
        """
        Lists the immediate children of `directory`, sorted by name.

        Raises:
            OSError: If the directory itself cannot be opened or listed.
        """
        with os.scandir(directory) as it:
            children = sorted(it, key=lambda e: e.name)

        result = WalkResult()
        for child in children:
            entry = self._resolve_entry(child, result.errors)
            if entry is None:
                continue

            if not is_eligible(entry, self.include_hidden):
                logger.debug(f"Skipping hidden entry: {entry.path}")
                continue

            if entry.is_dir:
                result.subdirs.append(entry.path)
                continue

            fingerprint = self._hash_file(entry.path, result)
            if fingerprint is not None:
                result.files.append((entry.path, fingerprint))

        logger.debug(
            f"Walked {directory}: {len(result.files)} files, "
            f"{len(result.subdirs)} subdirectories, {len(result.errors)} skipped"
        )
        return result

    def _resolve_entry(self, child: os.DirEntry, errors: List[EntryError]) -> Optional[FileEntry]:
        """
        Reads metadata of one child and builds a FileEntry.
        Returns None when the child must be skipped.
        """
        path = child.path
        try:
            link_stat = child.stat(follow_symlinks=False)
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            errors.append(EntryError(path, str(e)))
            return None

        target_stat = link_stat
        if stat.S_ISLNK(link_stat.st_mode):
            if not self.follow_symlinks:
                logger.debug(f"Skipping symbolic link: {path}")
                return None
            try:
                target_stat = child.stat(follow_symlinks=True)
            except OSError as e:
                logger.debug(f"Skipping broken symbolic link {path}: {e}")
                errors.append(EntryError(path, str(e)))
                return None

        if stat.S_ISDIR(target_stat.st_mode):
            kind = EntryKind.DIRECTORY
        elif stat.S_ISREG(target_stat.st_mode):
            kind = EntryKind.FILE
        else:
            # FIFOs, sockets and device nodes would block or never end
            logger.debug(f"Skipping special file: {path}")
            return None

        return FileEntry(path=path, kind=kind, hidden=self.hidden_probe(path, link_stat))

    def _hash_file(self, path: str, result: WalkResult) -> Optional[str]:
        before = self.hasher.bytes_read
        try:
            fingerprint = self.hasher.hash(path)
        except FileReadError as e:
            logger.warning(f"Skipping unreadable file {path}: {e.cause}")
            result.errors.append(EntryError(path, str(e.cause)))
            return None
        result.bytes_hashed += self.hasher.bytes_read - before
        return fingerprint
