from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

# ─── Outcome state ───

class State(Enum):
    HAS_NEXT_STEP = "has_next_step"
    INVALID_PARAMS = "invalid_params"
    COMPLETED = "completed"
    NOT_MODIFIED = "not_modified"
    UNKNOWN = "unknown"

# ─── Showcase schema (parsed from the server document) ───

@dataclass(frozen=True)
class Field:
    name: str
    type: str = "text"
    label: str = ""
    value: str | None = None
    required: bool = False

@dataclass(frozen=True)
class FieldError:
    name: str
    alert: str = ""

@dataclass(frozen=True)
class Showcase:
    title: str = ""
    fields: tuple[Field, ...] = ()
    hidden_fields: tuple[tuple[str, str], ...] = ()  # ordered (name, value) pairs
    errors: tuple[FieldError, ...] = ()

    def payment_parameters(self) -> dict[str, str]:
        """Parameters submitted for this form: hidden fields, then every named field."""
        params = dict(self.hidden_fields)
        for f in self.fields:
            params[f.name] = "" if f.value is None else f.value
        return params

    def field(self, name: str) -> Field | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def with_values(self, values: Mapping[str, object]) -> Showcase:
        """Copy with field values replaced. Names not on the form are ignored."""
        fields = tuple(
            replace(f, value=None if values[f.name] is None else str(values[f.name]))
            if f.name in values else f
            for f in self.fields
        )
        return replace(self, fields=fields)

# ─── Wizard step ───

@dataclass(frozen=True)
class Step:
    showcase: Showcase | None = None
    submit_url: str | None = None

