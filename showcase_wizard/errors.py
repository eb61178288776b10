"""Exception taxonomy for the showcase wizard."""
from __future__ import annotations


class ShowcaseWizardError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(ShowcaseWizardError, ValueError):
    """A required argument was absent."""


class InvalidStateError(ShowcaseWizardError, RuntimeError):
    """The current step can't be turned into a request."""


class EmptyHistoryError(ShowcaseWizardError, IndexError):
    """Raw history popped with nothing on it."""


class TransportError(ShowcaseWizardError):
    def __init__(self, status_code: int | None = None, message: str = "", error_type: str = "unknown"):
        self.status_code = status_code
        self.message = message
        self.error_type = error_type  # network | validation | server | unknown
        super().__init__(f"TransportError[{error_type}]: {status_code} - {message}")
