"""Stack of previously visited steps, used for backward navigation."""
from __future__ import annotations

from typing import TYPE_CHECKING

from showcase_wizard.errors import EmptyHistoryError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from showcase_wizard.types import Step


class History:
    """LIFO sequence of steps. Not thread-safe; the owning context serializes access."""

    def __init__(self, steps: Iterable[Step] = ()):
        self._steps: list[Step] = list(steps)

    def push(self, step: Step) -> None:
        self._steps.append(step)

    def pop(self) -> Step:
        if not self._steps:
            raise EmptyHistoryError("history is empty")
        return self._steps.pop()

    def peek(self) -> Step:
        if not self._steps:
            raise EmptyHistoryError("history is empty")
        return self._steps[-1]

    def size(self) -> int:
        return len(self._steps)

    def is_empty(self) -> bool:
        return not self._steps

    def peek_all(self) -> tuple[Step, ...]:
        """All steps, most recent last."""
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(tuple(self._steps))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, History):
            return NotImplemented
        return self._steps == other._steps

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"History({self._steps!r})"
