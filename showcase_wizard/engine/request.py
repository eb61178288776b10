"""Transport request for submitting the current step."""
from __future__ import annotations

from datetime import UTC
from email.utils import format_datetime
from typing import TYPE_CHECKING, Any

from showcase_wizard.errors import InvalidStateError

if TYPE_CHECKING:
    from datetime import datetime

    from showcase_wizard.types import Step

IF_MODIFIED_SINCE = "If-Modified-Since"


def http_date(moment: datetime) -> str:
    """Format as an RFC 7231 date. Naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return format_datetime(moment.astimezone(UTC), usegmt=True)


class StepRequest:
    method = "POST"

    def __init__(self, step: Step | None, last_modified: datetime):
        if step is None:
            raise InvalidStateError("current step is None")
        if step.showcase is None:
            raise InvalidStateError("showcase of current step is None")
        if not step.submit_url:
            raise InvalidStateError("submit url is None or empty")

        self.url: str = step.submit_url
        self.headers: dict[str, str] = {IF_MODIFIED_SINCE: http_date(last_modified)}
        self.params: dict[str, str] = step.showcase.payment_parameters()

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "headers": dict(self.headers),
            "params": dict(self.params),
        }

    def __repr__(self) -> str:
        return f"StepRequest({self.method} {self.url}, params={sorted(self.params)})"
