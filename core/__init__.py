"""Core modules for EXIF removal and hash renaming."""

from .app import Application
from .config import AppConfig
from .dispatcher import Dispatcher
from .errors import NoExifError, ElevationError, RegistrationError
from .exif import ExifStripper, strip_exif
from .file_manager import FileManager
from .hashing import HashRenamer, hash_file_content, rename_to_hash
from .integration import BaseSystemIntegration, WindowsIntegration
from .registry import ContextMenuRegistrar, ContextMenuEntry, CONTEXT_MENU_ENTRIES
from .results import OperationReport, OperationResult
from .settings import AppSettings

__all__ = [
    'Application',
    'AppConfig',
    'AppSettings',
    'Dispatcher',
    'NoExifError',
    'ElevationError',
    'RegistrationError',
    'ExifStripper',
    'strip_exif',
    'FileManager',
    'HashRenamer',
    'hash_file_content',
    'rename_to_hash',
    'BaseSystemIntegration',
    'WindowsIntegration',
    'ContextMenuRegistrar',
    'ContextMenuEntry',
    'CONTEXT_MENU_ENTRIES',
    'OperationReport',
    'OperationResult',
]
