from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class EditKind(str, Enum):
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True)
class Present(Generic[T]):
    """A value that has been resolved."""

    value: T


@dataclass(frozen=True)
class Absent:
    """A value that is not known yet (no selection, fetch still pending)."""


ABSENT = Absent()

Maybe = Union[Present[T], Absent]


def present(value: T) -> Present[T]:
    return Present(value)


def from_optional(value: Optional[T]) -> Maybe[T]:
    """Map a nullable upstream value onto the presence type."""
    if value is None:
        return ABSENT
    return Present(value)


class BalanceDisplayState(str, Enum):
    ZERO = "zero"
    LOADING = "loading"
    READY = "ready"


@dataclass(frozen=True)
class BalanceDisplay:
    state: BalanceDisplayState
    text: str

    def to_dict(self) -> dict[str, str]:
        return {"state": self.state.value, "text": self.text}
