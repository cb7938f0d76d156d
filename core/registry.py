"""Explorer context-menu registration under HKEY_CLASSES_ROOT."""

import logging
import sys
from typing import Dict, NamedTuple, Optional

from .errors import RegistrationError

if sys.platform == "win32":
    import winreg
else:  # pragma: no cover - registry access only exists on Windows
    winreg = None

logger = logging.getLogger(__name__)

COMMAND_SUBKEY = "command"


class ContextMenuEntry(NamedTuple):
    key_path: str
    description: str
    action: str


CONTEXT_MENU_ENTRIES = (
    ContextMenuEntry(r"*\shell\Remove EXIF Data",
                     "Remove EXIF Data from file", "removeexif"),
    ContextMenuEntry(r"Directory\shell\Remove EXIF Data",
                     "Remove EXIF Data from directory", "removeexif"),
    ContextMenuEntry(r"*\shell\Rename to Hash Value",
                     "Rename file to SHA256 hash", "renametohash"),
    ContextMenuEntry(r"Directory\shell\Rename to Hash Value",
                     "Rename directory files to SHA256 hash", "renametohash"),
)


class WinRegistryStore:
    """Default-value access to keys below a registry root."""

    def __init__(self, root=None):
        if winreg is None:
            raise OSError("The Windows registry is not available on this platform")
        self.root = root if root is not None else winreg.HKEY_CLASSES_ROOT

    def get_value(self, key_path: str) -> Optional[str]:
        """Default string value of a key, or None if the key or value is missing."""
        try:
            with winreg.OpenKey(self.root, key_path) as key:
                value, value_type = winreg.QueryValueEx(key, "")
        except FileNotFoundError:
            return None
        if value_type not in (winreg.REG_SZ, winreg.REG_EXPAND_SZ):
            return None
        return value

    def set_value(self, key_path: str, value: str):
        with winreg.CreateKeyEx(self.root, key_path, 0, winreg.KEY_WRITE) as key:
            winreg.SetValueEx(key, "", 0, winreg.REG_SZ, value)

    def delete_key(self, key_path: str) -> bool:
        try:
            winreg.DeleteKey(self.root, key_path)
        except FileNotFoundError:
            return False
        return True


class MemoryRegistryStore:
    """Registry stand-in keyed by case-insensitive path, for dry runs and tests."""

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values: Dict[str, Optional[str]] = {}
        for key_path, value in (values or {}).items():
            self.values[key_path.lower()] = value

    def get_value(self, key_path: str) -> Optional[str]:
        return self.values.get(key_path.lower())

    def set_value(self, key_path: str, value: str):
        self.values[key_path.lower()] = value

    def delete_key(self, key_path: str) -> bool:
        return self.values.pop(key_path.lower(), None) is not None


class ContextMenuRegistrar:
    """Checks, creates and removes the NoEXIF context-menu entries."""

    def __init__(self, config, store=None):
        self.config = config
        self.store = store if store is not None else WinRegistryStore()
        self.entries = CONTEXT_MENU_ENTRIES

    def expected_command(self, entry: ContextMenuEntry) -> str:
        return self.config.command_for(entry.action)

    @staticmethod
    def command_key_path(entry: ContextMenuEntry) -> str:
        return f"{entry.key_path}\\{COMMAND_SUBKEY}"

    def is_entry_registered(self, entry: ContextMenuEntry) -> bool:
        if self.store.get_value(entry.key_path) != entry.description:
            return False
        return self.store.get_value(self.command_key_path(entry)) == self.expected_command(entry)

    def is_registered(self) -> bool:
        """True only if every entry has the exact description and command."""
        return all(self.is_entry_registered(entry) for entry in self.entries)

    def register(self):
        """
        Create or repair every entry, writing only values that differ.

        Failures are collected per entry; the remaining entries are still
        attempted and nothing already written is rolled back.

        Raises:
            RegistrationError: At least one entry could not be written.
        """
        failures = []
        for entry in self.entries:
            try:
                self._register_entry(entry)
            except OSError as e:
                logger.error(f"Failed to register {entry.key_path}: {e}")
                failures.append(f"{entry.key_path}: {e}")

        if failures:
            raise RegistrationError(failures)

    def _register_entry(self, entry: ContextMenuEntry):
        if self.store.get_value(entry.key_path) != entry.description:
            self.store.set_value(entry.key_path, entry.description)
            logger.info(f"Wrote description for {entry.key_path}")

        command_path = self.command_key_path(entry)
        command = self.expected_command(entry)
        if self.store.get_value(command_path) != command:
            self.store.set_value(command_path, command)
            logger.info(f"Wrote command for {entry.key_path}: {command}")

    def unregister(self):
        """Remove every entry. Missing keys are ignored."""
        for entry in self.entries:
            # Subkeys must go before their parent
            if self.store.delete_key(self.command_key_path(entry)):
                logger.info(f"Removed {self.command_key_path(entry)}")
            if self.store.delete_key(entry.key_path):
                logger.info(f"Removed {entry.key_path}")
