"""Step navigation state for one showcase wizard session.

The context tracks the active step, the history of visited steps and the
outcome of the last submission. Transitions between outcome states are driven
by the caller (see ``engine.outcome``); the context itself never validates
them.

Backward navigation has two levels:
  1. Undo completion: a completed context drops its params and goes back to
     HAS_NEXT_STEP, keeping the last step so it can be resubmitted.
  2. Back: otherwise the previous step is popped from history.
"""
from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from showcase_wizard.engine.history import History
from showcase_wizard.engine.request import StepRequest
from showcase_wizard.errors import InvalidArgumentError
from showcase_wizard.schema.parser import extract_params
from showcase_wizard.types import State, Step

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from showcase_wizard.types import Showcase

logger = logging.getLogger(__name__)


class WizardContext:
    def __init__(self, showcase: Showcase | None, submit_url: str | None, last_modified: datetime):
        if last_modified is None:
            raise InvalidArgumentError("last_modified is None")
        self._history = History()
        self._last_modified = last_modified
        self._current_step = Step(showcase, submit_url)
        # Empty until the last step is reached
        self._params: dict[str, str] = {}
        self._state = State.UNKNOWN

    @classmethod
    def restore(
        cls,
        history: History | Iterable[Step] | None,
        last_modified: datetime | None,
        current_step: Step | None,
        params: Mapping[str, str] | None,
        state: State | None = State.UNKNOWN,
    ) -> WizardContext:
        """Rebuild a context from externally kept session data.

        Empty history and params are fine; None is not.
        """
        if history is None:
            raise InvalidArgumentError("history is None")
        if last_modified is None:
            raise InvalidArgumentError("last_modified is None")
        if params is None:
            raise InvalidArgumentError("params is None")

        ctx = cls.__new__(cls)
        ctx._history = history if isinstance(history, History) else History(history)
        ctx._last_modified = last_modified
        ctx._current_step = current_step if current_step is not None else Step()
        ctx._params = dict(params)
        ctx._state = state if state is not None else State.UNKNOWN
        return ctx

    @classmethod
    def placeholder(cls, state: State) -> WizardContext:
        """Context with an empty step, for outcomes that carried no schema."""
        ctx = cls(None, None, datetime.now(tz=UTC))
        ctx._state = state
        return ctx

    # ─── Requests ───

    def create_request(self) -> StepRequest:
        return StepRequest(self._current_step, self._last_modified)

    # ─── Navigation ───

    def pop_step(self) -> Step:
        """Undo completion if params are set, else go to the previous step.

        With nothing to undo and an empty history, nothing changes.
        """
        if self._params:
            self._params = {}
            self._state = State.HAS_NEXT_STEP
            logger.debug("Completion undone, back at %s", self._current_step.submit_url)
        elif not self._history.is_empty():
            self._current_step = self._history.pop()
            logger.debug("Moved back to %s (history %d)", self._current_step.submit_url, len(self._history))
        return self._current_step

    def push_current_step(self, new_step: Step | None) -> None:
        """Move the current step into history and make ``new_step`` current."""
        if new_step is None:
            raise InvalidArgumentError("new step is None")
        self._history.push(self._current_step)
        self._current_step = new_step
        logger.debug("Advanced to %s (history %d)", new_step.submit_url, len(self._history))

    def set_current_step(self, step: Step) -> None:
        if step is None:
            raise InvalidArgumentError("step is None")
        self._current_step = step

    def set_params(self, payload: Any) -> None:
        """Take params from a decoded completion payload. Doesn't touch the state."""
        self._params = extract_params(payload)

    def set_state(self, state: State) -> None:
        self._state = state

    def complete(self, params: Mapping[str, str]) -> None:
        """Record finished params and the COMPLETED state together."""
        if not params:
            raise InvalidArgumentError("params is None or empty")
        self._params = dict(params)
        self._state = State.COMPLETED
        logger.debug("Completed with %d params", len(self._params))

    # ─── Accessors ───

    @property
    def history(self) -> History:
        """Live history. Read it, don't mutate it."""
        return self._history

    @property
    def history_size(self) -> int:
        return len(self._history)

    @property
    def current_step(self) -> Step:
        return self._current_step

    @property
    def last_modified(self) -> datetime:
        return self._last_modified

    @property
    def params(self) -> dict[str, str]:
        return self._params

    @property
    def state(self) -> State:
        return self._state

    def snapshot(self) -> dict[str, Any]:
        return {
            "history": self._history.peek_all(),
            "last_modified": self._last_modified,
            "current_step": self._current_step,
            "params": dict(self._params),
            "state": self._state,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WizardContext):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"WizardContext(history={self._history!r}, last_modified={self._last_modified!r}, "
            f"current_step={self._current_step!r}, params={self._params!r}, state={self._state})"
        )
