"""Tests for the MCP tool functions, driven over a scripted transport."""
from __future__ import annotations

import json

import pytest

from conftest import LAST_MODIFIED, ScriptedTransport, load_fixture, make_showcase
from showcase_wizard.engine import Completed, NextStep
from showcase_wizard.errors import TransportError
from showcase_wizard.integrations import mcp_server


@pytest.fixture
def transport(monkeypatch):
    t = ScriptedTransport(NextStep(load_fixture("mobile_topup.json"), "https://x/1", LAST_MODIFIED))
    monkeypatch.setattr(mcp_server, "_transport", t)
    monkeypatch.setattr(mcp_server, "_session", None)
    return t


def test_tools_require_an_open_showcase(transport):
    assert "showcase_open" in json.loads(mcp_server.showcase_get_status())["error"]
    assert "error" in json.loads(mcp_server.showcase_back())


def test_open_submit_back(transport):
    st = json.loads(mcp_server.showcase_open("https://x/showcase/5551"))
    assert st["title"] == "Mobile top-up"

    transport.queue(NextStep(make_showcase("Confirm", "comment"), "https://x/2"), Completed({"sum": "1"}))
    r = json.loads(mcp_server.showcase_submit({"phone": "7999"}))
    assert r["success"] is True
    assert r["state"] == "HAS_NEXT_STEP"
    assert r["reminder"].startswith("Confirm > step 2")

    r = json.loads(mcp_server.showcase_submit())
    assert r["state"] == "COMPLETED"

    r = json.loads(mcp_server.showcase_back())
    assert r["state"] == "HAS_NEXT_STEP"
    assert json.loads(mcp_server.showcase_get_status())["params"] == {}


def test_transport_errors_are_reported(transport):
    mcp_server.showcase_open("https://x/showcase/5551")

    def boom(request):
        raise TransportError(None, "Network error: refused", "network")

    transport.execute = boom
    assert "network" in json.loads(mcp_server.showcase_submit({}))["error"]


def test_config_errors_are_reported(monkeypatch):
    monkeypatch.setattr(mcp_server, "_transport", None)
    monkeypatch.setattr(mcp_server, "_session", None)
    monkeypatch.delenv("SHOWCASE_WIZARD_CONFIG", raising=False)
    monkeypatch.setenv("SHOWCASE_WIZARD_READ_TIMEOUT", "soon")
    r = json.loads(mcp_server.showcase_open("https://x/showcase/5551"))
    assert "read_timeout" in r["error"]
    assert mcp_server._session is None
