"""Top-level flow: register the context menu or run a shell action."""

import logging
from typing import List, Optional

from .dispatcher import Dispatcher
from .errors import ElevationError, RegistrationError

logger = logging.getLogger(__name__)

SETUP_COMMAND = 'setup'
UNREGISTER_COMMAND = 'unregister'

ELEVATION_DECLINED_MESSAGE = "Cannot register application without elevated privileges."


class Application:
    """
    Decides between setup and dispatch for one invocation.

    Args:
        config: AppConfig for the running program
        integration: BaseSystemIntegration providing elevation and registry access
        notifier: Object with info(title, text) and error(title, text)
        dispatcher: Action dispatcher; built from config when omitted
    """

    def __init__(self, config, integration, notifier,
                 dispatcher: Optional[Dispatcher] = None):
        self.config = config
        self.integration = integration
        self.notifier = notifier
        self.dispatcher = dispatcher if dispatcher is not None else Dispatcher.from_config(config, notifier)

    def run(self, args: List[str]) -> int:
        """Handle the command-line arguments and return the exit status."""
        args = list(args)

        if not args:
            return self._setup([])

        command = args[0].lower()
        if command == SETUP_COMMAND:
            return self._setup(args[1:])
        if command == UNREGISTER_COMMAND:
            return self._unregister()

        if not self.integration.is_registered():
            if not self.integration.is_elevated():
                return self._relaunch([SETUP_COMMAND] + args)
            self._register()

        self.dispatcher.dispatch(args[0], args[1:])
        return 0

    def _setup(self, trailing: List[str]) -> int:
        """Register, then run any action forwarded by an elevated relaunch."""
        if not self.integration.is_elevated():
            return self._relaunch([SETUP_COMMAND] + trailing)

        registered = self._register()

        if trailing:
            self.dispatcher.dispatch(trailing[0], trailing[1:])
        elif registered:
            self.notifier.info("Setup Complete", "Context menu entries are registered.")
        return 0

    def _unregister(self) -> int:
        if not self.integration.is_elevated():
            return self._relaunch([UNREGISTER_COMMAND])

        try:
            self.integration.unregister()
        except OSError as e:
            logger.error(f"Failed to remove context menu entries: {e}")
            self.notifier.error("Error", f"Failed to update registry: {e}")
            return 1

        self.notifier.info("Operation Complete", "Context menu entries removed.")
        return 0

    def _register(self) -> bool:
        try:
            self.integration.register()
        except RegistrationError as e:
            self.notifier.error("Error", f"Failed to update registry: {e}")
            return False
        logger.info("Context menu entries registered")
        return True

    def _relaunch(self, args: List[str]) -> int:
        """Hand the invocation to an elevated instance; this one stops afterwards."""
        try:
            self.integration.relaunch_elevated(args)
        except ElevationError as e:
            logger.error(f"Elevation failed: {e}")
            self.notifier.error("Error", ELEVATION_DECLINED_MESSAGE)
            return 1
        return 0
