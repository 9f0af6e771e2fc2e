"""
Removing Iterator
=================

Iterator over a snapshot of a container that can remove the element it is
positioned on through the container's own (observable) removal operation.

States::

    NOT_POSITIONED --next()--> POSITIONED --remove()--> CONSUMED
                                    ^                      |
                                    +-------next()---------+

``remove()`` is only legal in POSITIONED; anywhere else it raises
InvalidIteratorStateError and leaves the container alone.
"""

from enum import Enum
from typing import Any, Callable, Generic, Iterable, Iterator

from ..errors import InvalidIteratorStateError
from ..types import T


class IteratorState(Enum):
    NOT_POSITIONED = "not_positioned"
    POSITIONED = "positioned"
    CONSUMED = "consumed"


class RemovingIterator(Generic[T]):
    """
    Args:
        items: Snapshot to walk. Copied, so the owner may change while iterating.
        remove_item: Called with the current item by ``remove()``.
    """

    __slots__ = ("_items", "_remove_item", "_current", "_state")

    def __init__(self, items: Iterable[T], remove_item: Callable[[T], Any]):
        self._items: Iterator[T] = iter(list(items))
        self._remove_item = remove_item
        self._current: Any = None
        self._state = IteratorState.NOT_POSITIONED

    @property
    def state(self) -> IteratorState:
        return self._state

    def __iter__(self) -> "RemovingIterator[T]":
        return self

    def __next__(self) -> T:
        item = next(self._items)
        self._current = item
        self._state = IteratorState.POSITIONED
        return item

    def remove(self) -> None:
        """Remove the item returned by the last ``next()``."""
        if self._state is not IteratorState.POSITIONED:
            raise InvalidIteratorStateError(
                f"remove() requires a positioned iterator (state: {self._state.value})"
            )
        item, self._current = self._current, None
        self._state = IteratorState.CONSUMED
        self._remove_item(item)
