# pure numeric reducers. no i/o, no logging, inputs are never mutated
# sum() shadows the builtin inside this module, folds go through functools.reduce

from __future__ import annotations
from functools import reduce
from typing import Sequence, Union

Number = Union[int, float]

def sum(a: Number, b: Number) -> Number:
    return a + b

def average(values: Sequence[Number]) -> float:
    # arithmetic mean; empty input returns NaN instead of raising ZeroDivisionError
    if not values:
        return float("nan")
    total = reduce(lambda acc, item: acc + item, values, 0)
    return total / len(values)

def biggest(values: Sequence[Number]) -> Number:
    # running maximum seeded at 0, replaced only when an element is strictly greater.
    # consequence: all-negative and empty inputs both return 0, not the true maximum
    return reduce(lambda acc, value: value if value > acc else acc, values, 0)
