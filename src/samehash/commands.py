"""
Unified command orchestrator for duplicate search.
This is the SINGLE entry point used by the CLI and by library callers.
"""
import logging
from typing import Dict, List, Optional, Callable, Tuple

from samehash.core.models import RunConfig, ScanStats, ContentFingerprint
from samehash.core.orchestrator import Orchestrator

logger = logging.getLogger(__name__)


class DuplicateSearchCommand:
    """
    Runs the traversal and hands back the finalized index:
    1. Build a walker for the run configuration
    2. Traverse breadth-first from the root
    3. Return the fingerprint → paths mapping with run statistics

    Usage:
        config = RunConfig(root="/data", recurse=True)
        command = DuplicateSearchCommand()
        mapping, stats = command.execute(
            config,
            progress_callback=cli_progress_printer,
        )
    """

    def __init__(self, orchestrator: Optional[Orchestrator] = None):
        self._orchestrator = orchestrator or Orchestrator()
        self._mapping: Dict[ContentFingerprint, List[str]] = {}

    def execute(
            self,
            config: RunConfig,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[Dict[ContentFingerprint, List[str]], ScanStats]:
        """
        Execute the duplicate search with the given configuration.

        Args:
            config: Validated run configuration
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Tuple of (fingerprint → ordered paths, statistics)
        """
        stats = ScanStats()
        index = self._orchestrator.run(config, stats=stats, progress_callback=progress_callback)
        self._mapping = index.finalize()

        if stats.directories_failed:
            logger.debug(f"{stats.directories_failed} directories could not be walked")

        return self._mapping, stats

    def get_duplicate_groups(self) -> Dict[ContentFingerprint, List[str]]:
        """Duplicate groups of the last execution."""
        return {fp: list(paths) for fp, paths in self._mapping.items() if len(paths) > 1}
