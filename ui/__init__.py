"""UI components for NoEXIF."""

from .dialogs import DialogNotifier

__all__ = [
    'DialogNotifier',
]
