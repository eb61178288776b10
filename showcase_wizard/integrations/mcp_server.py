"""MCP Server — exposes showcase_* tools over one in-memory wizard session."""
from __future__ import annotations

import json
import logging
import os

from mcp.server.fastmcp import FastMCP

from showcase_wizard.config import load_config
from showcase_wizard.engine import WizardSession
from showcase_wizard.errors import ShowcaseWizardError
from showcase_wizard.log import setup_logging
from showcase_wizard.transport import HttpTransport, Transport

logger = logging.getLogger(__name__)

mcp = FastMCP("showcase-wizard")

_session: WizardSession | None = None
_transport: Transport | None = None


def _get_transport() -> Transport:
    global _transport
    if _transport is None:
        _transport = HttpTransport(load_config(os.environ.get("SHOWCASE_WIZARD_CONFIG")))
    return _transport


def _require_session() -> WizardSession:
    if _session is None:
        raise ShowcaseWizardError("No showcase opened. Use showcase_open first.")
    return _session


def _error(e: Exception) -> str:
    return json.dumps({"error": str(e)}, ensure_ascii=False)


@mcp.tool()
def showcase_open(url: str) -> str:
    """Open a showcase by URL, replacing any current session."""
    global _session
    try:
        _session = WizardSession.open(_get_transport(), url)
        return json.dumps(_session.get_status(), ensure_ascii=False, indent=2)
    except Exception as e:
        return _error(e)


@mcp.tool()
def showcase_get_status() -> str:
    """Get the current step, its fields, state and allowed actions."""
    try:
        return json.dumps(_require_session().get_status(), ensure_ascii=False, indent=2)
    except Exception as e:
        return _error(e)


@mcp.tool()
def showcase_submit(values: dict | None = None) -> str:
    """Fill the current form with values and submit it."""
    try:
        session = _require_session()
        result = session.submit(values or {})
        return json.dumps({**result.to_dict(), "reminder": session.get_status()["summary"]}, ensure_ascii=False)
    except Exception as e:
        logger.warning("Submit failed: %s", e)
        return _error(e)


@mcp.tool()
def showcase_back() -> str:
    """Undo a completion, or go back to the previous step."""
    try:
        return json.dumps(_require_session().back().to_dict(), ensure_ascii=False)
    except Exception as e:
        return _error(e)


def run_server():
    setup_logging(load_config(os.environ.get("SHOWCASE_WIZARD_CONFIG")).log_level)
    mcp.run(transport="stdio")
