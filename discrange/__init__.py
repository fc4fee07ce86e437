from .discrete import CalendarDiscrete, CharDiscrete, Discrete, IntDiscrete, InvertedDiscrete
from .domain import Domain, characters, days, integers, months, weeks, years
from .order import Eq, KeyOrder, NaturalOrder, Order, ReversedOrder, natural, reverse
from .range import Range, RangeIterator
from .show import FormatShow, ReprShow, Show, StrShow, plain

__all__ = [
    "Range",
    "RangeIterator",
    "Domain",
    "Order",
    "Eq",
    "NaturalOrder",
    "KeyOrder",
    "ReversedOrder",
    "natural",
    "reverse",
    "Discrete",
    "InvertedDiscrete",
    "IntDiscrete",
    "CharDiscrete",
    "CalendarDiscrete",
    "Show",
    "StrShow",
    "ReprShow",
    "FormatShow",
    "plain",
    "integers",
    "characters",
    "days",
    "weeks",
    "months",
    "years",
]
