from showcase_wizard.engine.context import WizardContext
from showcase_wizard.engine.history import History
from showcase_wizard.engine.outcome import (
    Completed,
    InvalidParams,
    NextStep,
    NotModified,
    Outcome,
    SubmitResult,
    apply_outcome,
)
from showcase_wizard.engine.request import StepRequest
from showcase_wizard.engine.session import WizardSession

__all__ = [
    "Completed",
    "History",
    "InvalidParams",
    "NextStep",
    "NotModified",
    "Outcome",
    "StepRequest",
    "SubmitResult",
    "WizardContext",
    "WizardSession",
    "apply_outcome",
]
