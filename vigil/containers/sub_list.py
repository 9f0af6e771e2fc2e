"""
Vigil ObservableSubList - Observable Window Over a Parent List
==============================================================

``ObservableList.sub_list(start, stop)`` returns an ObservableSubList: a live
view of a contiguous index range of its parent that is itself observable.

Propagation policy:

- Reads go straight to the parent, offset by the window start.
- Writes through the window are made with the parent's public operations.
  Parent observers therefore see parent-absolute indices, the window's own
  observers see window-relative indices, one event each.
- Any structural change to the parent (insert, removal, clear, bulk add) that
  was not made through this window makes the window stale: every later
  access raises StaleViewError.
- That includes structural changes a parent observer makes while a write
  through the window is being dispatched.
- If a parent observer raises during a write through the window, the window
  still accounts for the change before the exception propagates. Its own
  observers are not notified of that write.
- Replacing an element in the parent is not structural. The window keeps
  working and reads the new value, but its observers are not told.

Windows of windows follow the same rules relative to their own parent.
"""

import logging
from collections.abc import Sequence
from typing import Any, Callable, Iterator, List

from ..errors import StaleViewError
from ..types import E
from .observable_list import ObservableList


class _Window(Sequence):
    """Read-only, staleness-checked index window used as the sub-list delegate."""

    __slots__ = ("parent", "offset", "size", "expected_mod_count")

    def __init__(self, parent: ObservableList, offset: int, size: int) -> None:
        self.parent = parent
        self.offset = offset
        self.size = size
        self.expected_mod_count = parent._mod_count

    def check(self) -> None:
        if self.parent._mod_count != self.expected_mod_count:
            logging.debug(
                f"Sub-list window [{self.offset}, {self.offset + self.size}) is stale"
            )
            raise StaleViewError(
                "parent list was structurally modified outside this sub-list"
            )

    def sync(self, size_change: int) -> None:
        self.size += size_change
        self.expected_mod_count = self.parent._mod_count

    def __len__(self) -> int:
        self.check()
        return self.size

    def __getitem__(self, index: int) -> Any:
        self.check()
        return self.parent[self.offset + index]

    def __iter__(self) -> Iterator[Any]:
        for index in range(len(self)):
            yield self[index]

    def __contains__(self, value: object) -> bool:
        return any(item is value or item == value for item in self)


class ObservableSubList(ObservableList[E]):
    """
    Observable view of ``parent[start:stop]``.

    Args:
        parent: The list being windowed.
        start: First parent index in the window.
        stop: Parent index one past the end of the window.
    """

    def __init__(self, parent: ObservableList[E], start: int, stop: int) -> None:
        super().__init__(_Window(parent, start, stop - start))

    @property
    def parent(self) -> ObservableList[E]:
        return self._delegate.parent

    @property
    def offset(self) -> int:
        return self._delegate.offset

    def _write_through(self, write: Callable[[ObservableList[E]], Any], size_change: int) -> Any:
        """
        Apply ``write`` to the parent and resynchronize the window.

        The window only adopts the parent's new modification count when the
        write advanced it by exactly one. If a parent observer changed the
        parent structurally while the write was being dispatched, the window
        stays stale. If a parent observer raised after the parent was changed,
        the window is still resynchronized before the exception propagates.
        """
        window = self._delegate
        window.check()
        parent = window.parent
        before = parent._mod_count
        try:
            result = write(parent)
        except BaseException:
            if parent._mod_count != before:
                self._settle(before, size_change)
                # The structure changed even though the call failed
                self._mod_count += 1
            raise
        self._settle(before, size_change)
        return result

    def _settle(self, before: int, size_change: int) -> None:
        window = self._delegate
        if window.parent._mod_count == before + 1:
            window.sync(size_change)
        else:
            logging.debug(
                f"Parent changed {window.parent._mod_count - before} times during a "
                f"write through window [{window.offset}, {window.offset + window.size}), "
                "leaving it stale"
            )

    def _do_insert(self, index: int, value: E) -> None:
        offset = self._delegate.offset
        self._write_through(lambda parent: parent.insert(offset + index, value), 1)

    def _do_insert_all(self, index: int, items: List[E]) -> None:
        offset = self._delegate.offset
        self._write_through(
            lambda parent: parent.add_all(items, offset + index), len(items)
        )

    def _do_set(self, index: int, value: E) -> E:
        window = self._delegate
        window.check()
        return window.parent.set(window.offset + index, value)

    def _do_pop(self, index: int) -> E:
        offset = self._delegate.offset
        return self._write_through(lambda parent: parent.pop(offset + index), -1)

    def _do_remove_range(self, start: int, stop: int) -> List[E]:
        offset = self._delegate.offset
        return self._write_through(
            lambda parent: parent.remove_range(offset + start, offset + stop),
            start - stop,
        )

    def _do_clear(self) -> List[E]:
        return self._do_remove_range(0, len(self._delegate))
