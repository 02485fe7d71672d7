"""Ordered collections of unique references.

These functions treat a list as an ordered set of object references. Two
slots may never hold the same object, and "same" means identity (`is`), not
equality: two equal but distinct objects can both be stored.

The uniqueness check happens before every insert made through this module.
Nothing stops a caller from appending a duplicate directly, and `combine`
does not de-duplicate.

The functions mutate the list they are given and do no locking.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'contains',
    'add',
    'insert_at',
    'remove',
    'combine'
]

from typing import List, MutableSequence, Sequence, TypeVar

T = TypeVar('T')

def contains(items: Sequence[T], element: T) -> bool:
    """
    Check if the exact object is stored in the sequence.

    Example:
        >>> a, b = [1], [1]
        >>> contains([a], a)
        True
        >>> contains([a], b)
        False
    """
    return any(item is element for item in items)

def add(items: MutableSequence[T], element: T) -> bool:
    """
    Append an object unless it is already stored.

    Returns:
        True if the object was appended, False if it was a duplicate
    """
    if contains(items, element):
        return False
    items.append(element)
    return True

def insert_at(items: MutableSequence[T], index: int, element: T) -> bool:
    """
    Insert an object at a position unless it is already stored.

    Out-of-range positions are clamped rather than rejected:
        * a negative index inserts at the front
        * an index at or past the end appends
        * any other index inserts before the object currently there

    Args:
        items: Sequence to modify in place
        index: Position the object should occupy
        element: Object to insert

    Returns:
        True if the object was inserted, False if it was a duplicate
    """
    if contains(items, element):
        return False

    if index < 0:
        items.insert(0, element)
    elif index >= len(items):
        items.append(element)
    else:
        items.insert(index, element)
    return True

def remove(items: MutableSequence[T], element: T) -> bool:
    """
    Remove the first slot holding the exact object.

    Returns:
        True if a slot was removed, False if the object was not stored
    """
    for position, item in enumerate(items):
        if item is element:
            del items[position]
            return True
    return False

def combine(first: Sequence[T], second: Sequence[T]) -> List[T]:
    """
    Concatenate two sequences into a new list.

    Duplicates are kept, whether they come from one input or both.

    Example:
        >>> combine([1, 2], [2, 3])
        [1, 2, 2, 3]
    """
    return [*first, *second]
