"""Minimum, maximum and clamp over any ordered type.

Only the strict `<` and `>` operators are used. When neither holds, the
second argument wins, which keeps tie-breaking deterministic for values that
compare equal but are distinct objects.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'minimum',
    'maximum',
    'clamp'
]

from typing import Any, Protocol, TypeVar

class Ordered(Protocol):
    def __lt__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...

T = TypeVar('T', bound=Ordered)

def minimum(first: T, second: T) -> T:
    return first if first < second else second

def maximum(first: T, second: T) -> T:
    return first if first > second else second

def clamp(value: T, lower: T, upper: T) -> T:
    """
    Cap a value between two bounds.

    The lower bound is tested first. If `lower > upper`, any value below
    `lower` returns `lower` and every other value returns `upper`.

    Example:
        >>> clamp(10, 0, 5)
        5
        >>> clamp(-1, 0, 5)
        0
        >>> clamp(3, 5, 1)
        5
    """
    if value < lower:
        return lower
    elif value > upper:
        return upper
    return value
