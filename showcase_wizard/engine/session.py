"""Wizard session — drives one WizardContext through a transport.

One session owns one context; calls must not interleave.
"""
from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, assert_never

from showcase_wizard.engine.context import WizardContext
from showcase_wizard.engine.outcome import (
    Completed,
    InvalidParams,
    NextStep,
    NotModified,
    SubmitResult,
    apply_outcome,
)
from showcase_wizard.engine.request import StepRequest
from showcase_wizard.types import State, Step

if TYPE_CHECKING:
    from collections.abc import Mapping

    from showcase_wizard.transport.base import Transport
    from showcase_wizard.types import FieldError

logger = logging.getLogger(__name__)


class WizardSession:
    def __init__(self, context: WizardContext, transport: Transport):
        self.context = context
        self.transport = transport
        self.errors: tuple[FieldError, ...] = ()

    @classmethod
    def open(cls, transport: Transport, url: str) -> WizardSession:
        """Fetch the first showcase step and start a session on it."""
        outcome = transport.fetch(url)
        errors: tuple[FieldError, ...] = ()
        match outcome:
            case NextStep(showcase=showcase, submit_url=submit_url, last_modified=last_modified):
                context = WizardContext(showcase, submit_url, last_modified or datetime.now(tz=UTC))
            case NotModified():
                context = WizardContext.placeholder(State.NOT_MODIFIED)
            case InvalidParams(errors=errors):
                context = WizardContext.placeholder(State.INVALID_PARAMS)
            case Completed(params=params):
                context = WizardContext.placeholder(State.UNKNOWN)
                context.complete(params)
            case _:
                assert_never(outcome)
        logger.info("Opened showcase %s (state %s)", url, context.state.name)
        session = cls(context, transport)
        session.errors = errors
        return session

    def submit(self, values: Mapping[str, Any] | None = None) -> SubmitResult:
        ctx = self.context
        if ctx.params:
            return SubmitResult(
                False,
                "Showcase is already completed. Use back to undo the completion before resubmitting.",
                ctx.state,
            )

        step = ctx.current_step
        if values and step.showcase is not None:
            step = Step(step.showcase.with_values(values), step.submit_url)

        request = StepRequest(step, ctx.last_modified)
        logger.info("Submitting step %s", request.url)
        outcome = self.transport.execute(request)
        # Filled values are kept only once the server has answered
        ctx.set_current_step(step)

        self.errors = outcome.errors if isinstance(outcome, InvalidParams) else ()
        result = apply_outcome(ctx, outcome)
        logger.info("Submit result: %s", ctx.state.name)
        return result

    def back(self) -> SubmitResult:
        ctx = self.context
        was_completed = bool(ctx.params)
        size_before = ctx.history_size
        step = ctx.pop_step()
        self.errors = ()

        if was_completed:
            return SubmitResult(True, "Completion undone. The last form can be resubmitted.", ctx.state)
        if ctx.history_size < size_before:
            title = step.showcase.title if step.showcase else ""
            return SubmitResult(True, f"Moved back to: {title or step.submit_url}", ctx.state)
        return SubmitResult(False, "Cannot go back — no previous step in history.", ctx.state)

    def get_status(self) -> dict[str, Any]:
        ctx = self.context
        step = ctx.current_step
        showcase = step.showcase

        allowed = ["back"] if ctx.params or ctx.history_size else []
        if not ctx.params and showcase is not None and step.submit_url:
            allowed.insert(0, "submit")

        result: dict[str, Any] = {
            "state": ctx.state.name,
            "title": showcase.title if showcase else "",
            "submit_url": step.submit_url,
            "fields": [
                {"name": f.name, "type": f.type, "label": f.label, "value": f.value, "required": f.required}
                for f in (showcase.fields if showcase else ())
            ],
            "history_size": ctx.history_size,
            "params": dict(ctx.params),
            "errors": [{"name": e.name, "alert": e.alert} for e in self.errors],
            "allowed_actions": allowed,
        }

        summary_parts = [f"{result['title'] or 'showcase'} > step {ctx.history_size + 1}", ctx.state.name]
        if self.errors:
            summary_parts.append(f"{len(self.errors)} field error(s)")
        if ctx.params:
            summary_parts.append(f"{len(ctx.params)} params ready")
        result["summary"] = ", ".join(summary_parts)
        return result
