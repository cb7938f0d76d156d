"""Exception types raised by NoEXIF."""

from typing import List


class NoExifError(Exception):
    """Base class for NoEXIF errors."""


class ElevationError(NoExifError):
    """The process could not be relaunched with administrative rights."""


class RegistrationError(NoExifError):
    """One or more context-menu entries could not be written."""

    def __init__(self, failures: List[str]):
        self.failures = list(failures)
        super().__init__("; ".join(self.failures))
