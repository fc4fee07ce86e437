"""Stepping capabilities for discrete element types.

A `Discrete` knows the next and previous element of every value. Ranges use
it to walk their elements and to decide whether two ranges touch without a
gap, so no arithmetic on the element type is ever needed.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Generic, TypeVar

from dateutil.relativedelta import relativedelta
from typing_extensions import override

A = TypeVar("A")
D = TypeVar("D", bound=date)

# Largest Unicode code point
MAX_CODE_POINT = 0x10FFFF

_REFERENCE = datetime(2000, 1, 15, 12)


class Discrete(ABC, Generic[A]):

    @abstractmethod
    def succ(self, a: A) -> A:
        """Return the element directly after `a`."""
        pass

    @abstractmethod
    def pred(self, a: A) -> A:
        """Return the element directly before `a`."""
        pass

    def adj(self, a: A, b: A) -> bool:
        """True if `b` follows `a` with nothing in between."""
        return self.succ(a) == b

    @property
    def inverse(self) -> "Discrete[A]":
        """A stepping capability walking the other way (`succ` and `pred` swapped)."""
        return InvertedDiscrete(self)


class InvertedDiscrete(Discrete[A]):
    def __init__(self, discrete: Discrete[A]):
        self.discrete: Discrete[A] = discrete

    @override
    def succ(self, a: A) -> A:
        return self.discrete.pred(a)

    @override
    def pred(self, a: A) -> A:
        return self.discrete.succ(a)

    @property
    @override
    def inverse(self) -> Discrete[A]:
        return self.discrete

    @override
    def __repr__(self) -> str:
        return f"InvertedDiscrete({self.discrete!r})"


class IntDiscrete(Discrete[int]):
    """Integers stepped by a fixed, positive amount (1 by default)."""

    def __init__(self, step: int = 1):
        if step <= 0:
            raise ValueError(
                f"IntDiscrete step must be a positive integer, got {step!r}.\n"
                f"Hint: walk downwards with the inverse instead:\n"
                f"  IntDiscrete({abs(step) or 1}).inverse"
            )
        self.step: int = step

    @override
    def succ(self, a: int) -> int:
        return a + self.step

    @override
    def pred(self, a: int) -> int:
        return a - self.step

    @override
    def adj(self, a: int, b: int) -> bool:
        return a + self.step == b

    @override
    def __repr__(self) -> str:
        return f"IntDiscrete(step={self.step})"


class CharDiscrete(Discrete[str]):
    """Single characters, stepped by Unicode code point."""

    def _code(self, c: str) -> int:
        if len(c) != 1:
            raise ValueError(
                f"CharDiscrete steps single characters, got {c!r} "
                f"(length {len(c)})"
            )
        return ord(c)

    @override
    def succ(self, a: str) -> str:
        code = self._code(a)
        if code >= MAX_CODE_POINT:
            raise ValueError(f"No character after {a!r} (U+{code:04X})")
        return chr(code + 1)

    @override
    def pred(self, a: str) -> str:
        code = self._code(a)
        if code <= 0:
            raise ValueError(f"No character before {a!r} (U+{code:04X})")
        return chr(code - 1)

    @override
    def __repr__(self) -> str:
        return "CharDiscrete()"


class CalendarDiscrete(Discrete[D]):
    """Dates or datetimes stepped by a calendar-aware `relativedelta`.

    Month and year steps follow dateutil's clamping rules, so stepping
    2025-01-31 by one month lands on 2025-02-28. Because of that clamping,
    `pred(succ(d))` is not always `d` for month or year steps.
    """

    def __init__(self, step: relativedelta | None = None, **kwargs: int):
        if step is None:
            step = relativedelta(**kwargs) if kwargs else relativedelta(days=1)
        elif kwargs:
            raise TypeError(
                "CalendarDiscrete takes either a relativedelta or keyword units, not both.\n"
                "Examples:\n"
                "  CalendarDiscrete(relativedelta(months=1))\n"
                "  CalendarDiscrete(months=1)"
            )
        if step == relativedelta():
            raise ValueError("CalendarDiscrete step must not be zero")
        # datetime so time-unit steps stay comparable
        if not (_REFERENCE - step < _REFERENCE < _REFERENCE + step):
            raise ValueError(
                f"CalendarDiscrete step must move dates forward, got {step!r}.\n"
                f"Absolute fields (day=, month=, ...) and negative steps are rejected.\n"
                f"Hint: walk backwards with the inverse instead:\n"
                f"  CalendarDiscrete(days=1).inverse"
            )
        self.step: relativedelta = step

    @override
    def succ(self, a: D) -> D:
        return a + self.step

    @override
    def pred(self, a: D) -> D:
        return a - self.step

    @override
    def __repr__(self) -> str:
        return f"CalendarDiscrete({self.step!r})"
