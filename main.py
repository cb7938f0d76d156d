#!/usr/bin/env python3
"""
NoEXIF - Explorer context-menu tool

Adds "Remove EXIF Data" and "Rename to Hash Value" to the Windows shell
context menu for files and directories. Run without arguments to register
the menu entries; Explorer then invokes this program with an action name and
the selected path.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from PyQt6.QtWidgets import QApplication

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from core import AppConfig, AppSettings, Application, WindowsIntegration
from core.settings import get_settings_dir, SETTINGS_FILENAME, LOG_FILENAME
from ui import DialogNotifier

logger = logging.getLogger(__name__)


def setup_logging(settings: AppSettings, log_dir: Path):
    """Log to a rotating file next to the settings, and to stderr when attached."""
    log_dir.mkdir(parents=True, exist_ok=True)
    handlers = [RotatingFileHandler(log_dir / LOG_FILENAME, maxBytes=1024 * 1024,
                                    backupCount=3, encoding='utf-8')]
    # pythonw and frozen GUI builds have no stderr
    if sys.stderr is not None:
        handlers.append(logging.StreamHandler())

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        handlers=handlers,
    )


def main():
    """Main application entry point."""
    settings_dir = get_settings_dir()
    settings = AppSettings(str(settings_dir / SETTINGS_FILENAME))
    setup_logging(settings, settings_dir)
    if not settings.settings_file.exists():
        settings.save_settings()

    # Message boxes need an application instance; there is no main window
    app = QApplication(sys.argv)
    app.setApplicationName("NoEXIF")
    app.setOrganizationName("NoEXIF")

    notifier = DialogNotifier(enabled=settings.show_dialogs)
    args = sys.argv[1:]
    logger.info(f"Invoked with arguments: {args}")

    try:
        config = AppConfig.from_environment(script=str(Path(__file__).resolve()), settings=settings)
        application = Application(config, WindowsIntegration(config), notifier)
        exit_code = application.run(args)
    except Exception as e:
        logger.exception("Unhandled error")
        notifier.error("Error", f"An error occurred: {e}")
        exit_code = 1

    sys.exit(exit_code)


if __name__ == '__main__':
    main()
