"""Operating-system side effects behind a narrow interface."""

from abc import ABC, abstractmethod
from typing import List

from . import elevation
from .registry import ContextMenuRegistrar


class BaseSystemIntegration(ABC):
    """Abstract base class for elevation and context-menu registration."""

    @abstractmethod
    def is_elevated(self) -> bool:
        """Return True if the process runs with administrative rights."""
        pass

    @abstractmethod
    def relaunch_elevated(self, args: List[str]):
        """
        Start an elevated instance with the given arguments.

        Raises:
            ElevationError: Elevation was declined or failed.
        """
        pass

    @abstractmethod
    def is_registered(self) -> bool:
        """Return True if every context-menu entry is present and current."""
        pass

    @abstractmethod
    def register(self):
        """
        Create or repair the context-menu entries.

        Raises:
            RegistrationError: Some entries could not be written.
        """
        pass

    @abstractmethod
    def unregister(self):
        """Remove the context-menu entries."""
        pass


class WindowsIntegration(BaseSystemIntegration):
    """UAC and HKEY_CLASSES_ROOT backed integration."""

    def __init__(self, config, store=None):
        self.config = config
        self.registrar = ContextMenuRegistrar(config, store)

    def is_elevated(self) -> bool:
        return elevation.is_elevated()

    def relaunch_elevated(self, args: List[str]):
        executable, leading_args = self.config.relaunch_target()
        elevation.relaunch_elevated(executable, leading_args + list(args))

    def is_registered(self) -> bool:
        return self.registrar.is_registered()

    def register(self):
        self.registrar.register()

    def unregister(self):
        self.registrar.unregister()
