"""Bundles of capabilities for common element types.

A `Domain` groups the order, stepping and display capabilities of one element
type so ranges can be bound to it once instead of passing every capability to
every operation. Binding is what makes the operator forms (`-`, `+`, `&`,
`in`, `iter()`) available on a range.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from typing_extensions import override

from discrange.discrete import CalendarDiscrete, CharDiscrete, Discrete, IntDiscrete
from discrange.order import Order, natural
from discrange.range import Range
from discrange.show import FormatShow, Show, plain

A = TypeVar("A")


@dataclass(frozen=True)
class Domain(Generic[A]):
    """Order, stepping and display capabilities for one element type.

    Attributes:
        order: Total order used for every comparison
        discrete: Successor/predecessor stepping
        show: Rendering of single elements for `str(range)`
        name: Label used in `repr` only
    """

    order: Order[A]
    discrete: Discrete[A]
    show: Show[A] = field(default=plain)
    name: str = "domain"

    def range(self, start: A, end: A) -> Range[A]:
        """Construct `[start, end]` bound to this domain."""
        return Range(start, end, domain=self)

    def inverse(self) -> "Domain[A]":
        """The mirror domain: reversed order and inverted stepping."""
        return Domain(
            order=self.order.reverse(),
            discrete=self.discrete.inverse,
            show=self.show,
            name=f"~{self.name}",
        )

    @override
    def __repr__(self) -> str:
        return f"Domain({self.name})"


integers: Domain[int] = Domain(natural, IntDiscrete(), name="integers")
characters: Domain[str] = Domain(natural, CharDiscrete(), name="characters")

_iso_date = FormatShow("%Y-%m-%d")

days: Domain[Any] = Domain(
    natural, CalendarDiscrete(days=1), show=_iso_date, name="days"
)
weeks: Domain[Any] = Domain(
    natural, CalendarDiscrete(weeks=1), show=_iso_date, name="weeks"
)
months: Domain[Any] = Domain(
    natural, CalendarDiscrete(months=1), show=_iso_date, name="months"
)
years: Domain[Any] = Domain(
    natural, CalendarDiscrete(years=1), show=_iso_date, name="years"
)
