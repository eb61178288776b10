from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from showcase_wizard.engine.outcome import Outcome
    from showcase_wizard.engine.request import StepRequest


class Transport(Protocol):
    def fetch(self, url: str) -> Outcome:
        """Fetch the first step of a showcase."""
        ...

    def execute(self, request: StepRequest) -> Outcome:
        """Submit a step and classify the response."""
        ...
