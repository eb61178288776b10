"""Step navigation for server-defined showcase payment wizards."""
from showcase_wizard.engine import History, StepRequest, WizardContext, WizardSession
from showcase_wizard.errors import (
    EmptyHistoryError,
    InvalidArgumentError,
    InvalidStateError,
    ShowcaseWizardError,
    TransportError,
)
from showcase_wizard.types import Showcase, State, Step

__all__ = [
    "EmptyHistoryError",
    "History",
    "InvalidArgumentError",
    "InvalidStateError",
    "Showcase",
    "ShowcaseWizardError",
    "State",
    "Step",
    "StepRequest",
    "TransportError",
    "WizardContext",
    "WizardSession",
]
