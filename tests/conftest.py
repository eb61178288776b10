"""Shared fixtures for showcase-wizard tests."""
from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from showcase_wizard.engine import Completed, InvalidParams, NextStep, NotModified, WizardSession
from showcase_wizard.schema import load_showcase
from showcase_wizard.types import Field, FieldError, Showcase, Step

if TYPE_CHECKING:
    from showcase_wizard.engine import Outcome, StepRequest, SubmitResult

SHOWCASES_DIR = Path(__file__).parent / "showcases"

LAST_MODIFIED = datetime(2015, 10, 21, 7, 28, tzinfo=UTC)


def load_fixture(name: str) -> Showcase:
    return load_showcase((SHOWCASES_DIR / name).read_text(encoding="utf-8"))


def make_showcase(title: str, *names: str) -> Showcase:
    return Showcase(title=title, fields=tuple(Field(name=n) for n in names))


class ScriptedTransport:
    """Fake transport that replays queued outcomes and records every request."""

    def __init__(self, first: Outcome | None = None):
        self.first = first
        self.outcomes: list[Outcome] = []
        self.fetched: list[str] = []
        self.requests: list[StepRequest] = []

    def queue(self, *outcomes: Outcome) -> ScriptedTransport:
        self.outcomes.extend(outcomes)
        return self

    def fetch(self, url: str) -> Outcome:
        self.fetched.append(url)
        if self.first is None:
            raise AssertionError("no first outcome scripted")
        return self.first

    def execute(self, request: StepRequest) -> Outcome:
        self.requests.append(request)
        if not self.outcomes:
            raise AssertionError(f"unexpected request to {request.url}")
        return self.outcomes.pop(0)


class WizardHarness:
    """Drives a WizardSession over a ScriptedTransport.

    Starts on the mobile top-up showcase submitted to https://x/1.
    """

    def __init__(self, first: Outcome | None = None):
        self.first_showcase = load_fixture("mobile_topup.json")
        self.transport = ScriptedTransport(
            first or NextStep(self.first_showcase, "https://x/1", LAST_MODIFIED)
        )
        self.session = WizardSession.open(self.transport, "https://x/showcase/5551")

    @property
    def context(self):
        return self.session.context

    @property
    def state(self):
        return self.context.state

    @property
    def step(self) -> Step:
        return self.context.current_step

    def next_step(self, title: str, url: str, *names: str) -> SubmitResult:
        self.transport.queue(NextStep(make_showcase(title, *names), url))
        return self.session.submit()

    def complete(self, **params: str) -> SubmitResult:
        self.transport.queue(Completed(dict(params)))
        return self.session.submit()

    def reject(self, *errors: FieldError) -> SubmitResult:
        self.transport.queue(InvalidParams(tuple(errors)))
        return self.session.submit()

    def not_modified(self) -> SubmitResult:
        self.transport.queue(NotModified())
        return self.session.submit()

    def submit(self, values: dict | None = None) -> SubmitResult:
        return self.session.submit(values)

    def back(self) -> SubmitResult:
        return self.session.back()

    @property
    def last_request(self) -> StepRequest:
        return self.transport.requests[-1]


@pytest.fixture
def harness_factory():
    def _make(first: Outcome | None = None) -> WizardHarness:
        return WizardHarness(first)
    return _make


@pytest.fixture
def harness() -> WizardHarness:
    return WizardHarness()
