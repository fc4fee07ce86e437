import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from typing_extensions import override

from discrange.discrete import Discrete
from discrange.order import Eq, Order
from discrange.show import Show, plain

if TYPE_CHECKING:
    from discrange.domain import Domain

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")


class RangeIterator(Iterator[A]):
    """Single-pass cursor over the elements of a range.

    Walks forward with `succ` while the cursor is at or before `end` and
    backward with `pred` once it is after it, so a range whose start is
    greater than its end is produced in descending order. If a step jumps
    over `end` the walk would turn around; the iterator stops there instead.
    """

    def __init__(self, start: A, end: A, discrete: Discrete[A], order: Order[A]):
        self.discrete: Discrete[A] = discrete
        self.order: Order[A] = order
        self._current: A = start
        self._end: A = end
        self._reached_end: bool = False
        self._forward: bool | None = None

    def has_next(self) -> bool:
        return not self._reached_end

    @override
    def __next__(self) -> A:
        if self._reached_end:
            logger.debug("Iterator for end %r is exhausted", self._end)
            raise StopIteration
        value = self._current
        if self.order.eqv(value, self._end):
            logger.debug("Reached end %r", self._end)
            self._reached_end = True
            return value
        forward = self.order.lt(value, self._end)
        if self._forward is not None and forward != self._forward:
            logger.debug("Stepped over end %r at %r; stopping", self._end, value)
            self._reached_end = True
            raise StopIteration
        self._forward = forward
        if forward:
            self._current = self.discrete.succ(value)
        else:
            self._current = self.discrete.pred(value)
        return value


@dataclass(frozen=True)
class Range(Generic[A]):
    """Inclusive range `[start, end]` over a discrete, totally ordered type.

    No ordering is enforced between the endpoints. A range with
    `start > end` iterates backwards rather than being empty.

    Operations take their capabilities (`order`, `discrete`, `eq`, `show`)
    as keywords. When a keyword is omitted the range's bound `domain`
    supplies it; the operator forms rely on that binding. The domain is not
    part of equality, hashing or `repr`.
    """

    start: A
    end: A
    domain: "Domain[A] | None" = field(
        default=None, kw_only=True, compare=False, repr=False
    )

    def _order(self, order: Order[A] | None, operation: str) -> Order[A]:
        if order is not None:
            return order
        if self.domain is not None:
            return self.domain.order
        raise TypeError(self._missing("order", operation))

    def _discrete(self, discrete: Discrete[A] | None, operation: str) -> Discrete[A]:
        if discrete is not None:
            return discrete
        if self.domain is not None:
            return self.domain.discrete
        raise TypeError(self._missing("discrete", operation))

    def _missing(self, capability: str, operation: str) -> str:
        return (
            f"Range.{operation}() needs a {capability!r} capability, but none was "
            f"passed and {self!r} is not bound to a domain.\n"
            f"Hint: pass it explicitly or bind the range:\n"
            f"  r.{operation}(..., {capability}=...)\n"
            f"  integers.range({self.start!r}, {self.end!r})  "
            f"# or Range(start, end, domain=integers)"
        )

    def _derive(self, start: A, end: A) -> "Range[A]":
        return Range(start, end, domain=self.domain)

    def bind(self, domain: "Domain[A] | None") -> "Range[A]":
        """Return the same endpoints bound to `domain` (or unbound for None)."""
        return Range(self.start, self.end, domain=domain)

    # Set algebra

    def difference(
        self,
        other: "Range[A]",
        *,
        discrete: Discrete[A] | None = None,
        order: Order[A] | None = None,
    ) -> "tuple[Range[A], Range[A] | None] | None":
        """Subtract `other` from this range.

        Returns None when nothing is left, `(remainder, None)` when one range
        is left, and `(lower, upper)` when `other` cuts a hole in the middle.
        """
        o = self._order(order, "difference")
        d = self._discrete(discrete, "difference")

        if o.lteqv(other.start, self.start):
            if o.lt(other.end, self.start):
                logger.debug("%r - %r: disjoint on the left", self, other)
                return (self, None)
            if o.gteqv(other.end, self.end):
                logger.debug("%r - %r: fully covered", self, other)
                return None
            logger.debug("%r - %r: lower part removed", self, other)
            return (self._derive(d.succ(other.end), self.end), None)

        if o.gt(other.start, self.end):
            logger.debug("%r - %r: disjoint on the right", self, other)
            return (self, None)

        lower = self._derive(self.start, d.pred(other.start))
        upper = None
        if o.lt(other.end, self.end):
            upper = self._derive(d.succ(other.end), self.end)
        logger.debug("%r - %r: interior overlap", self, other)
        return (lower, upper)

    def union(
        self,
        other: "Range[A]",
        *,
        order: Order[A] | None = None,
        discrete: Discrete[A] | None = None,
    ) -> "tuple[Range[A], Range[A] | None]":
        """Combine with `other`.

        Overlapping or adjacent ranges merge into one; otherwise both come
        back unchanged, lower-starting first.
        """
        o = self._order(order, "union")
        d = self._discrete(discrete, "union")

        left, right = (self, other) if o.lt(self.start, other.start) else (other, self)

        if o.gteqv(left.end, right.start) or d.adj(left.end, right.start):
            logger.debug("%r + %r: merged", self, other)
            return (self._derive(left.start, o.max(left.end, right.end)), None)
        return (
            self._derive(left.start, left.end),
            self._derive(right.start, right.end),
        )

    def intersection(
        self, other: "Range[A]", *, order: Order[A] | None = None
    ) -> "Range[A] | None":
        """Overlap of both ranges, or None when they do not meet."""
        o = self._order(order, "intersection")
        start = o.max(self.start, other.start)
        end = o.min(self.end, other.end)
        if o.lteqv(start, end):
            return self._derive(start, end)
        return None

    def __sub__(self, other: Any) -> "tuple[Range[A], Range[A] | None] | None":
        if not isinstance(other, Range):
            return NotImplemented
        return self.difference(other)

    def __add__(self, other: Any) -> "tuple[Range[A], Range[A] | None]":
        if not isinstance(other, Range):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: Any) -> "Range[A] | None":
        if not isinstance(other, Range):
            return NotImplemented
        return self.intersection(other)

    # Containment and transforms

    def contains(self, item: "A | Range[A]", *, order: Order[A] | None = None) -> bool:
        """True if `item` lies in this range.

        A `Range` item is a sub-range test: `start <= item.start` and
        `end >= item.end`. Any other item is a membership test for one element.
        """
        o = self._order(order, "contains")
        if isinstance(item, Range):
            return o.lteqv(self.start, item.start) and o.gteqv(self.end, item.end)
        return o.gteqv(item, self.start) and o.lteqv(item, self.end)

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # pyright: ignore[reportArgumentType]

    def reverse(self) -> "Range[A]":
        """Return `[end, start]`."""
        return self._derive(self.end, self.start)

    def map(
        self, f: Callable[[A], B], *, domain: "Domain[B] | None" = None
    ) -> "Range[B]":
        """Apply `f` to both endpoints.

        The caller is responsible for `f` preserving the endpoint ordering.
        """
        return Range(f(self.start), f(self.end), domain=domain)

    # Sequences and folds

    def iterate(
        self,
        *,
        discrete: Discrete[A] | None = None,
        order: Order[A] | None = None,
    ) -> RangeIterator[A]:
        return RangeIterator(
            self.start,
            self.end,
            self._discrete(discrete, "iterate"),
            self._order(order, "iterate"),
        )

    def __iter__(self) -> Iterator[A]:
        return self.iterate()

    def to_list(
        self,
        *,
        discrete: Discrete[A] | None = None,
        order: Order[A] | None = None,
    ) -> list[A]:
        return list(self.iterate(discrete=discrete, order=order))

    def foreach(
        self,
        f: Callable[[A], Any],
        *,
        discrete: Discrete[A] | None = None,
        order: Order[A] | None = None,
    ) -> None:
        """Call `f` on each element from `start` up to `end`.

        Only ever steps forward: unlike `iterate`, a range with
        `start > end` visits nothing.
        """
        o = self._order(order, "foreach")
        d = self._discrete(discrete, "foreach")
        current = self.start
        while o.lteqv(current, self.end):
            f(current)
            if o.eqv(current, self.end):
                break
            current = d.succ(current)

    def fold_left(
        self,
        seed: B,
        f: Callable[[B, A], B],
        *,
        discrete: Discrete[A] | None = None,
        order: Order[A] | None = None,
    ) -> B:
        acc = seed

        def step(a: A) -> None:
            nonlocal acc
            acc = f(acc, a)

        self.foreach(step, discrete=discrete, order=order)
        return acc

    def fold_right(
        self,
        seed: B,
        f: Callable[[A, B], B],
        *,
        discrete: Discrete[A] | None = None,
        order: Order[A] | None = None,
    ) -> B:
        """Fold from `end` down to `start`: `f(a1, f(a2, ... f(an, seed)))`.

        Runs `fold_left` over the reversed range in the mirror algebra, where
        `succ` steps down and comparisons are flipped.
        """
        o = self._order(order, "fold_right")
        d = self._discrete(discrete, "fold_right")
        return self.reverse().fold_left(
            seed, lambda b, a: f(a, b), discrete=d.inverse, order=o.reverse()
        )

    # Equality and display

    def eqv(self, other: "Range[A]", *, eq: Eq[A] | None = None) -> bool:
        """Structural equality through an `Eq` capability (the domain's order by default)."""
        e = eq if eq is not None else self._order(None, "eqv")
        return e.eqv(self.start, other.start) and e.eqv(self.end, other.end)

    def show(self, show: Show[A] | None = None) -> str:
        if show is None:
            show = self.domain.show if self.domain is not None else plain
        return f"[{show.show(self.start)}, {show.show(self.end)}]"

    @override
    def __str__(self) -> str:
        return self.show()
