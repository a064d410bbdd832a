"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/orchestrator.py
Breadth-first traversal driver.

The root is always walked once. Subdirectories found by the walker are pushed
to the back of a FIFO queue only when recursion is enabled, so the traversal
depth is bounded by the queue, not by the call stack. A directory that cannot
be listed is logged and skipped; the run never aborts because of it.
"""

import os
import logging
from collections import deque
from typing import Deque, Optional, Callable, Set, Tuple

from samehash.core.errors import TraversalError
from samehash.core.hasher import HasherImpl, get_algorithm
from samehash.core.index import DuplicateIndex
from samehash.core.interfaces import DirectoryWalker
from samehash.core.models import RunConfig, ScanStats
from samehash.core.walker import DirectoryWalkerImpl

logger = logging.getLogger(__name__)


class Orchestrator:
    """
    Drives a DirectoryWalker over a work queue and fills a DuplicateIndex.
    A walker may be injected; otherwise one is built from the run config.
    """

    def __init__(self, walker: Optional[DirectoryWalker] = None):
        self._walker = walker

    @staticmethod
    def build_walker(config: RunConfig) -> DirectoryWalker:
        hasher = HasherImpl(get_algorithm(config.algorithm), chunk_size=config.chunk_size)
        return DirectoryWalkerImpl(
            hasher=hasher,
            include_hidden=config.include_hidden,
            follow_symlinks=config.follow_symlinks,
        )

    def run(
        self,
        config: RunConfig,
        stats: Optional[ScanStats] = None,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> DuplicateIndex:
        """
        Traverse from `config.root` and return the populated index.
        Directory-level errors are logged, recorded in `stats` and skipped.
        """
        walker = self._walker or self.build_walker(config)
        stats = stats if stats is not None else ScanStats()
        index = DuplicateIndex()
        queue: Deque[str] = deque([config.root])
        visited: Set[Tuple[int, int]] = set()
        processed = 0

        logger.debug(f"Starting traversal of {config.root} (recurse={config.recurse}, "
                     f"include_hidden={config.include_hidden}, algorithm={config.algorithm.value})")
        stats.start()

        while queue:
            directory = queue.popleft()

            if config.follow_symlinks and self._already_visited(directory, visited):
                logger.debug(f"Skipping already visited directory: {directory}")
                continue

            try:
                result = walker.walk(directory)
            except OSError as e:
                error = TraversalError(directory, self._describe(e))
                logger.error(str(error))
                stats.record_failure(error)
            else:
                for path, fingerprint in result.files:
                    index.record(path, fingerprint)
                if config.recurse:
                    queue.extend(result.subdirs)
                stats.record_walk(directory, result)

            processed += 1
            if progress_callback:
                progress_callback("Walking", processed, processed + len(queue))

        stats.stop()
        logger.debug(f"Traversal finished: {index.unique_count} unique fingerprints, "
                     f"{index.file_count} files in {stats.total_time:.3f}s")
        return index

    @staticmethod
    def _already_visited(directory: str, visited: Set[Tuple[int, int]]) -> bool:
        try:
            st = os.stat(directory)
        except OSError:
            # Let the walker report the failure
            return False
        key = (st.st_dev, st.st_ino)
        if key in visited:
            return True
        visited.add(key)
        return False

    @staticmethod
    def _describe(error: OSError) -> str:
        if error.strerror:
            return f"{error.strerror} (os error {error.errno})"
        return str(error)


def run(config: RunConfig) -> DuplicateIndex:
    """Convenience wrapper: traverse with a default walker."""
    return Orchestrator().run(config)
