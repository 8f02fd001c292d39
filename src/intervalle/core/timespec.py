"""Parse result types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar


class Modifier(Enum):
    """Directional qualifier carried by a timespec."""

    POINT = ""  # Exactly that instant
    AFTER = "+"  # Lower bound
    BEFORE = "-"  # Upper bound

    @classmethod
    def from_prefix(cls, char: str | None) -> Modifier:
        """Map a leading modifier character (or None) to a member."""
        if char is None:
            return cls.POINT
        return cls(char)


@dataclass(frozen=True)
class TimeSpec(ABC):
    """A parsed time specification.

    Never instantiated directly; a parse yields one of :class:`Point`,
    :class:`After` or :class:`Before`.
    """

    instant: datetime

    modifier: ClassVar[Modifier]

    @staticmethod
    def from_modifier(modifier: Modifier, instant: datetime) -> TimeSpec:
        """Build the variant matching *modifier*."""
        return _VARIANTS[modifier](instant)

    @abstractmethod
    def admits(self, moment: datetime) -> bool:
        """Check whether *moment* satisfies this filter (bounds inclusive)."""

    def format(self) -> str:
        """Render as canonical ``[+-]YYYY-MM-DD HH:MM:SS`` text."""
        return self.modifier.value + self.instant.isoformat(sep=" ", timespec="seconds")

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "kind": type(self).__name__.lower(),
            "instant": self.instant.isoformat(sep=" ", timespec="seconds"),
        }

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class Point(TimeSpec):
    """Exactly the given instant."""

    modifier: ClassVar[Modifier] = Modifier.POINT

    def admits(self, moment: datetime) -> bool:
        return moment == self.instant


@dataclass(frozen=True)
class After(TimeSpec):
    """Lower bound: the given instant or later."""

    modifier: ClassVar[Modifier] = Modifier.AFTER

    def admits(self, moment: datetime) -> bool:
        return moment >= self.instant


@dataclass(frozen=True)
class Before(TimeSpec):
    """Upper bound: the given instant or earlier."""

    modifier: ClassVar[Modifier] = Modifier.BEFORE

    def admits(self, moment: datetime) -> bool:
        return moment <= self.instant


_VARIANTS: dict[Modifier, type[TimeSpec]] = {
    Modifier.POINT: Point,
    Modifier.AFTER: After,
    Modifier.BEFORE: Before,
}
