"""Parse server showcase documents into Showcase values."""
from __future__ import annotations

from typing import Any

import yaml

from showcase_wizard.errors import InvalidArgumentError
from showcase_wizard.types import Field, FieldError, Showcase

# Form items that only carry text, never a submitted value
_TEXT_ITEMS = frozenset({"paragraph", "text_block"})


def _flatten_form(items: list, out: list[Field]) -> None:
    """Flatten nested containers (groups, paragraphs) into a field list."""
    for item in items:
        if not isinstance(item, dict):
            continue
        children = item.get("items")
        if isinstance(children, list):
            _flatten_form(children, out)
            continue
        name = item.get("name")
        if not name or item.get("type") in _TEXT_ITEMS:
            continue
        value = item.get("value")
        out.append(Field(
            name=str(name),
            type=str(item.get("type", "text")),
            label=str(item.get("label", "")),
            value=None if value is None else str(value),
            required=bool(item.get("required", False)),
        ))


def _parse_errors(raw) -> tuple[FieldError, ...]:
    if not isinstance(raw, list):
        return ()
    return tuple(
        FieldError(name=str(e.get("name", "")), alert=str(e.get("alert", "")))
        for e in raw
        if isinstance(e, dict)
    )


def parse_showcase(raw: Any) -> Showcase:
    if not isinstance(raw, dict):
        raise ValueError("Invalid showcase: expected a mapping")

    form = raw.get("form", [])
    if not isinstance(form, list):
        raise ValueError('Invalid showcase: "form" must be a list')

    fields: list[Field] = []
    _flatten_form(form, fields)

    hidden = raw.get("hidden_fields") or {}
    if not isinstance(hidden, dict):
        raise ValueError('Invalid showcase: "hidden_fields" must be a mapping')

    return Showcase(
        title=str(raw.get("title", "")),
        fields=tuple(fields),
        hidden_fields=tuple((str(k), "" if v is None else str(v)) for k, v in hidden.items()),
        errors=_parse_errors(raw.get("error")),
    )


def load_showcase(content: str) -> Showcase:
    """Decode a showcase from JSON or YAML text."""
    try:
        raw = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid showcase document: {e}") from e
    return parse_showcase(raw)


def extract_params(payload: Any) -> dict[str, str]:
    """Pull the finished payment parameters out of a decoded completion payload."""
    if not isinstance(payload, dict):
        raise InvalidArgumentError("payload is not a mapping")
    params = payload.get("params")
    if not isinstance(params, dict):
        raise InvalidArgumentError('payload has no "params" object')
    return {str(k): "" if v is None else str(v) for k, v in params.items()}
