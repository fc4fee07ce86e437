from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from typing_extensions import override

A = TypeVar("A")


class Show(ABC, Generic[A]):

    @abstractmethod
    def show(self, a: A) -> str:
        pass


class StrShow(Show[Any]):
    @override
    def show(self, a: Any) -> str:
        return str(a)


class ReprShow(Show[Any]):
    @override
    def show(self, a: Any) -> str:
        return repr(a)


class FormatShow(Show[Any]):
    """Render with a `format()` spec, e.g. `FormatShow("%Y-%m-%d")` for dates."""

    def __init__(self, spec: str):
        self.spec: str = spec

    @override
    def show(self, a: Any) -> str:
        return format(a, self.spec)


plain: StrShow = StrShow()
