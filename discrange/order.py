"""Equality and total-order capabilities.

Ranges never compare their endpoints with Python operators directly; every
comparison goes through an `Order` so the same algorithms work for any
totally ordered element type, including ones ordered by a key or backwards.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

from typing_extensions import override

A = TypeVar("A")


class Eq(ABC, Generic[A]):

    @abstractmethod
    def eqv(self, x: A, y: A) -> bool:
        pass

    def neqv(self, x: A, y: A) -> bool:
        return not self.eqv(x, y)


class Order(Eq[A]):
    """Total order over `A`.

    Subclasses implement `compare`, returning a negative number, zero or a
    positive number when `x` sorts before, together with or after `y`.
    """

    @abstractmethod
    def compare(self, x: A, y: A) -> int:
        pass

    @override
    def eqv(self, x: A, y: A) -> bool:
        return self.compare(x, y) == 0

    def lt(self, x: A, y: A) -> bool:
        return self.compare(x, y) < 0

    def lteqv(self, x: A, y: A) -> bool:
        return self.compare(x, y) <= 0

    def gt(self, x: A, y: A) -> bool:
        return self.compare(x, y) > 0

    def gteqv(self, x: A, y: A) -> bool:
        return self.compare(x, y) >= 0

    def max(self, x: A, y: A) -> A:
        return y if self.lt(x, y) else x

    def min(self, x: A, y: A) -> A:
        return y if self.gt(x, y) else x

    def reverse(self) -> "Order[A]":
        return ReversedOrder(self)


class NaturalOrder(Order[Any]):
    """Order by Python's own `<` and `==`."""

    @override
    def compare(self, x: Any, y: Any) -> int:
        if x < y:
            return -1
        if x == y:
            return 0
        return 1

    @override
    def __repr__(self) -> str:
        return "NaturalOrder()"


class KeyOrder(Order[A]):
    """Order elements by the natural order of `key(element)`."""

    def __init__(self, key: Callable[[A], Any]):
        self.key: Callable[[A], Any] = key

    @override
    def compare(self, x: A, y: A) -> int:
        return natural.compare(self.key(x), self.key(y))


class ReversedOrder(Order[A]):
    """The dual of another order: `lt` becomes `gt` and so on."""

    def __init__(self, order: Order[A]):
        self.order: Order[A] = order

    @override
    def compare(self, x: A, y: A) -> int:
        return self.order.compare(y, x)

    @override
    def reverse(self) -> Order[A]:
        return self.order

    @override
    def __repr__(self) -> str:
        return f"ReversedOrder({self.order!r})"


natural: NaturalOrder = NaturalOrder()


def reverse(order: Order[A]) -> Order[A]:
    """Return the dual of `order`. Reversing twice yields the original."""
    return order.reverse()
