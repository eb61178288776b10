"""Tests for StepRequest construction."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from showcase_wizard.engine.request import IF_MODIFIED_SINCE, StepRequest, http_date
from showcase_wizard.errors import InvalidStateError
from showcase_wizard.types import Field, Showcase, Step

MARKER = datetime(2015, 10, 21, 7, 28, tzinfo=UTC)


def _showcase() -> Showcase:
    return Showcase(
        title="Pay",
        fields=(Field(name="amount", value="10"), Field(name="comment")),
        hidden_fields=(("scid", "5551"),),
    )


def test_request_targets_submit_url_with_conditional_header():
    req = StepRequest(Step(_showcase(), "https://x/1"), MARKER)
    assert req.method == "POST"
    assert req.url == "https://x/1"
    assert req.headers == {IF_MODIFIED_SINCE: "Wed, 21 Oct 2015 07:28:00 GMT"}
    assert req.params == {"scid": "5551", "amount": "10", "comment": ""}
    assert req.to_dict()["params"] == req.params


def test_http_date_treats_naive_as_utc_and_converts_offsets():
    assert http_date(datetime(2015, 10, 21, 7, 28)) == "Wed, 21 Oct 2015 07:28:00 GMT"
    moscow = timezone(timedelta(hours=3))
    assert http_date(datetime(2015, 10, 21, 10, 28, tzinfo=moscow)) == "Wed, 21 Oct 2015 07:28:00 GMT"


@pytest.mark.parametrize("step", [
    None,
    Step(None, "https://x/1"),
    Step(_showcase(), None),
    Step(_showcase(), ""),
])
def test_unusable_step_is_rejected(step):
    with pytest.raises(InvalidStateError):
        StepRequest(step, MARKER)
