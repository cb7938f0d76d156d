"""Maps action tokens to file operations."""

import logging
from typing import Dict, List

from .exif import ExifStripper
from .hashing import HashRenamer
from .results import OperationReport

logger = logging.getLogger(__name__)


class Dispatcher:
    """Runs one action over a list of paths and reports each outcome."""

    def __init__(self, processors: Dict, notifier=None):
        self.processors = {action.lower(): processor for action, processor in processors.items()}
        self.notifier = notifier

    @classmethod
    def from_config(cls, config, notifier=None) -> 'Dispatcher':
        stripper = ExifStripper(jpeg_quality=config.settings.jpeg_quality)
        renamer = HashRenamer()
        return cls({stripper.action: stripper, renamer.action: renamer}, notifier)

    @property
    def actions(self) -> List[str]:
        return sorted(self.processors)

    def dispatch(self, action: str, paths: List[str]) -> List[OperationReport]:
        """
        Apply the action named by the token to each path.

        Unknown tokens are ignored without notifying the user.
        """
        processor = self.processors.get(action.lower())
        if processor is None:
            logger.debug(f"Ignoring unknown action {action!r}")
            return []

        reports = []
        for path in paths:
            report = processor.process(path)
            reports.append(report)
            self._notify(report)
        return reports

    def _notify(self, report: OperationReport):
        if self.notifier is None:
            return
        if report.message:
            self.notifier.info("Operation Complete", report.message)
        if report.has_failures:
            self.notifier.error("Error", report.failure_summary())
