"""Message boxes reporting operation outcomes to the user."""

import logging

from PyQt6.QtWidgets import QMessageBox

logger = logging.getLogger(__name__)


class DialogNotifier:
    """Shows modal message boxes; with dialogs disabled, messages only go to the log."""

    def __init__(self, enabled: bool = True, parent=None):
        self.enabled = enabled
        self.parent = parent

    def info(self, title: str, text: str):
        logger.info(f"{title}: {text}")
        if self.enabled:
            QMessageBox.information(self.parent, title, text)

    def error(self, title: str, text: str):
        logger.error(f"{title}: {text}")
        if self.enabled:
            QMessageBox.critical(self.parent, title, text)
