"""Classified transport outcomes and the transitions they drive."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, assert_never

from showcase_wizard.types import FieldError, Showcase, State, Step

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from showcase_wizard.engine.context import WizardContext

logger = logging.getLogger(__name__)

# ─── Outcomes ───

@dataclass(frozen=True)
class NextStep:
    showcase: Showcase
    submit_url: str
    last_modified: datetime | None = None

@dataclass(frozen=True)
class Completed:
    params: Mapping[str, str] = field(hash=False)

    def __post_init__(self):
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

@dataclass(frozen=True)
class NotModified:
    pass

@dataclass(frozen=True)
class InvalidParams:
    errors: tuple[FieldError, ...] = ()

Outcome = NextStep | Completed | NotModified | InvalidParams

# ─── Result type ───

class SubmitResult:
    def __init__(self, success: bool, message: str, state: State | None = None):
        self.success = success
        self.message = message
        self.state = state

    def __bool__(self) -> bool:
        return self.success

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "message": self.message,
            "state": self.state.name if self.state else None,
        }

    def __repr__(self) -> str:
        return f"SubmitResult({self.success}, {self.message!r}, {self.state})"

# ─── Transitions ───

def apply_outcome(context: WizardContext, outcome: Outcome) -> SubmitResult:
    """Move the context according to a submission outcome."""
    match outcome:
        case NextStep(showcase=showcase, submit_url=submit_url):
            context.push_current_step(Step(showcase, submit_url))
            context.set_state(State.HAS_NEXT_STEP)
            title = showcase.title or submit_url
            return SubmitResult(True, f"Advanced to: {title}", State.HAS_NEXT_STEP)
        case Completed(params=params):
            context.complete(params)
            return SubmitResult(True, f"Completed with {len(params)} payment parameters", State.COMPLETED)
        case NotModified():
            context.set_state(State.NOT_MODIFIED)
            return SubmitResult(True, "Showcase not modified, keeping the current form", State.NOT_MODIFIED)
        case InvalidParams(errors=errors):
            context.set_state(State.INVALID_PARAMS)
            logger.info("Submission rejected: %s", ", ".join(e.name for e in errors) or "no field errors")
            detail = "; ".join(f"{e.name}: {e.alert}" if e.alert else e.name for e in errors)
            message = "Parameters rejected"
            if detail:
                message += f" ({detail})"
            return SubmitResult(False, message + ". Please fix the form and resubmit.", State.INVALID_PARAMS)
        case _:
            assert_never(outcome)
