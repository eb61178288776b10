"""HTTP transport for showcase steps.

Response codes of the showcase protocol:
  300 Multiple Choices  -> next step; body is the showcase, Location the submit url
  200 OK                -> completed; body carries {"params": {...}}
  304 Not Modified      -> schema unchanged since If-Modified-Since
  400 Bad Request       -> parameters rejected; body is the showcase with "error"
Everything else is a TransportError. No retries are attempted.
"""
from __future__ import annotations

import logging
from email.utils import parsedate_to_datetime
from typing import TYPE_CHECKING

import requests

from showcase_wizard.config import WizardConfig
from showcase_wizard.engine.outcome import Completed, InvalidParams, NextStep, NotModified
from showcase_wizard.errors import TransportError
from showcase_wizard.schema.parser import extract_params, parse_showcase

if TYPE_CHECKING:
    from datetime import datetime

    from showcase_wizard.engine.outcome import Outcome
    from showcase_wizard.engine.request import StepRequest

logger = logging.getLogger(__name__)


def _classify_error(status_code: int | None) -> str:
    if status_code is None:
        return "network"
    if 400 <= status_code < 500:
        return "validation"
    if 500 <= status_code < 600:
        return "server"
    return "unknown"


def _parse_last_modified(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring malformed Last-Modified header: %r", value)
        return None


class HttpTransport:
    def __init__(self, config: WizardConfig | None = None, session: requests.Session | None = None):
        self.config = config or WizardConfig()
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": self.config.user_agent,
            "Accept-Language": self.config.accept_language,
        })

    def fetch(self, url: str) -> Outcome:
        response = self._send("GET", url)
        return self._classify(url, response)

    def execute(self, request: StepRequest) -> Outcome:
        response = self._send(request.method, request.url, data=request.params, headers=request.headers)
        return self._classify(request.url, response)

    def close(self) -> None:
        self.session.close()

    # ─── Private ───

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        logger.debug("%s %s", method, url)
        try:
            return self.session.request(
                method,
                url,
                timeout=(self.config.connect_timeout, self.config.read_timeout),
                allow_redirects=False,
                **kwargs,
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error("%s %s network error: %s", method, url, e)
            raise TransportError(message=f"Network error: {e}", error_type="network") from e
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise TransportError(message=str(e), error_type="unknown") from e

    def _classify(self, url: str, response: requests.Response) -> Outcome:
        status = response.status_code
        logger.debug("%s -> %d", url, status)

        if status == 304:
            return NotModified()

        if status not in (200, 300, 400):
            error_type = _classify_error(status)
            logger.error("%s failed with status %d (%s)", url, status, error_type)
            raise TransportError(status, response.text[:200], error_type)

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(status, f"Response is not JSON: {e}", "server") from e

        try:
            if status == 200:
                params = extract_params(body)
                if not params:
                    raise ValueError("completion carries no params")
                return Completed(params)
            showcase = parse_showcase(body)
        except ValueError as e:
            raise TransportError(status, f"Malformed response body: {e}", "server") from e

        if status == 400:
            return InvalidParams(showcase.errors)

        location = response.headers.get("Location")
        if not location:
            raise TransportError(status, "Next step has no Location header", "server")
        return NextStep(
            showcase=showcase,
            submit_url=location,
            last_modified=_parse_last_modified(response.headers.get("Last-Modified")),
        )
