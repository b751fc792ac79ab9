"""Container helpers."""

from collections.abc import Callable, MutableMapping, MutableSequence, MutableSet
from typing import Any


def erase_if(items: Any, predicate: Callable[[Any], bool]) -> None:
    """Remove in place every entry for which ``predicate`` is true.

    Mappings are tested with ``(key, value)`` pairs, sequences and sets
    with their elements.
    """
    if isinstance(items, MutableMapping):
        for key in [key for key, value in items.items() if predicate((key, value))]:
            del items[key]
    elif isinstance(items, MutableSequence):
        items[:] = [item for item in items if not predicate(item)]
    elif isinstance(items, MutableSet):
        for item in [item for item in items if predicate(item)]:
            items.discard(item)
    else:
        raise TypeError(f"cannot erase from {type(items).__name__}")