"""
Vigil ObservableList - List With Change Notification
====================================================

This module provides ObservableList, a mutable sequence that wraps a caller
supplied delegate list and notifies its observers synchronously after every
change made through it.

Event rules (one event per call unless stated otherwise):

- ``set`` / ``lst[i] = v``              -> ElementReplaced(i, old)
- ``insert`` / ``append``               -> ElementsAdded(i, 1)
- ``add_all`` / ``extend`` / ``+=``     -> ElementsAdded(i, n), nothing when n == 0
- ``pop`` / ``del lst[i]`` / ``remove`` -> ElementsRemoved(i, (old,))
- ``remove_range`` / ``del lst[i:j]``   -> ElementsRemoved(i, removed), nothing when empty
- ``clear``                             -> ElementsRemoved(0, previous), nothing when empty

Index errors are detected before the delegate is touched, so a failing call
never notifies anybody. Changes made to the delegate directly are invisible to
observers.
"""

from collections.abc import MutableSequence, Sequence
from typing import Any, Generic, Iterable, Iterator, List, Optional, Union, overload

from ..errors import OutOfRangeError, UnsupportedOperationError, require_not_none
from ..events import (
    ChangeEvent,
    ElementPropertyChanged,
    ElementReplaced,
    ElementsAdded,
    ElementsRemoved,
)
from ..types import E
from ..util.listener_registry import ListenerRegistry


class ObservableList(MutableSequence, Generic[E]):
    """
    A list that notifies observers of changes.

    Observers are objects implementing the callbacks of
    ``ObservableListListener``; each callback receives this list first.

    Args:
        delegate: The list that actually stores the elements. The observable
            list is its only intended mutator.
        supports_element_property_changed: Whether element property changes
            may be reported through an ``ObservableListHelper``.

    Raises:
        NullArgumentError: If delegate is None.

    Example:
        >>> names = ObservableList(["ada"])
        >>> names.add_observer(printer)
        >>> names.append("grace")   # printer.list_elements_added(names, 1, 1)
    """

    def __init__(
        self, delegate: List[E], supports_element_property_changed: bool = False
    ) -> None:
        require_not_none(delegate, "delegate list")
        self._delegate = delegate
        self._listeners = ListenerRegistry()
        self._supports_element_property_changed = supports_element_property_changed
        # Bumped on structural changes; sub-list windows compare against it
        self._mod_count = 0

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_observer(self, observer: Any) -> None:
        self._listeners.register(observer)

    def remove_observer(self, observer: Any) -> None:
        self._listeners.deregister(observer)

    def has_observer(self, observer: Any) -> bool:
        return observer in self._listeners

    @property
    def supports_element_property_changed(self) -> bool:
        """
        True if this list sends ``list_element_property_changed``.

        Observers may use it to decide whether to watch the elements
        themselves instead.
        """
        return self._supports_element_property_changed

    def _fire(self, event: ChangeEvent) -> None:
        self._listeners.dispatch(event, self._deliver)

    def _deliver(self, observer: Any, event: ChangeEvent) -> None:
        event.notify(observer, self)

    def _fire_element_changed(self, index: int) -> None:
        self._fire(ElementPropertyChanged(self._check_index(index)))

    # ------------------------------------------------------------------
    # Index validation
    # ------------------------------------------------------------------

    def _check_index(self, index: int) -> int:
        """Normalize ``index`` for element access, requiring ``0 <= i < len``."""
        size = len(self)
        position = index + size if index < 0 else index
        if not 0 <= position < size:
            raise OutOfRangeError(f"index {index} out of range for size {size}")
        return position

    def _check_position(self, index: int) -> int:
        """Normalize ``index`` for insertion, requiring ``0 <= i <= len``."""
        size = len(self)
        position = index + size if index < 0 else index
        if not 0 <= position <= size:
            raise OutOfRangeError(f"insert position {index} out of range for size {size}")
        return position

    # ------------------------------------------------------------------
    # Delegate primitives (ObservableSubList routes these to its parent)
    # ------------------------------------------------------------------

    def _do_insert(self, index: int, value: E) -> None:
        self._delegate.insert(index, value)

    def _do_insert_all(self, index: int, items: List[E]) -> None:
        if isinstance(self._delegate, list):
            self._delegate[index:index] = items
        else:
            for offset, item in enumerate(items):
                self._delegate.insert(index + offset, item)

    def _do_set(self, index: int, value: E) -> E:
        old = self._delegate[index]
        self._delegate[index] = value
        return old

    def _do_pop(self, index: int) -> E:
        old = self._delegate[index]
        del self._delegate[index]
        return old

    def _do_remove_range(self, start: int, stop: int) -> List[E]:
        removed = [self._delegate[i] for i in range(start, stop)]
        if isinstance(self._delegate, list):
            del self._delegate[start:stop]
        else:
            for _ in range(stop - start):
                del self._delegate[start]
        return removed

    def _do_clear(self) -> List[E]:
        removed = list(self._delegate)
        self._delegate.clear()
        return removed

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._delegate)

    @overload
    def __getitem__(self, index: int) -> E: ...

    @overload
    def __getitem__(self, index: slice) -> List[E]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[E, List[E]]:
        if isinstance(index, slice):
            return [self._delegate[i] for i in range(*index.indices(len(self)))]
        return self._delegate[self._check_index(index)]

    def get(self, index: int) -> E:
        return self[index]

    def __iter__(self) -> Iterator[E]:
        return iter(self._delegate)

    def __contains__(self, value: object) -> bool:
        return value in self._delegate

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set(self, index: int, value: E) -> E:
        """
        Replace the element at ``index`` and return the previous one.

        Raises:
            OutOfRangeError: If index is not a valid element index.
        """
        position = self._check_index(index)
        old = self._do_set(position, value)
        self._fire(ElementReplaced(position, old))
        return old

    def insert(self, index: int, value: E) -> None:
        """
        Insert ``value`` before ``index``.

        Unlike ``list.insert`` the index is not clamped: after normalizing a
        negative index it must lie in ``[0, len]``.
        """
        position = self._check_position(index)
        self._do_insert(position, value)
        self._mod_count += 1
        self._fire(ElementsAdded(position, 1))

    def append(self, value: E) -> None:
        self.insert(len(self), value)

    def add_all(self, items: Iterable[E], index: Optional[int] = None) -> bool:
        """
        Insert all ``items`` at ``index`` (default: the end) with one notification.

        Returns:
            True if anything was added; an empty iterable changes nothing.
        """
        items = list(items)
        position = len(self) if index is None else self._check_position(index)
        if not items:
            return False
        self._do_insert_all(position, items)
        self._mod_count += 1
        self._fire(ElementsAdded(position, len(items)))
        return True

    def extend(self, items: Iterable[E]) -> None:
        self.add_all(items)

    def __iadd__(self, items: Iterable[E]) -> "ObservableList[E]":
        self.add_all(items)
        return self

    def pop(self, index: int = -1) -> E:
        """Remove and return the element at ``index`` (default: the last one)."""
        position = self._check_index(index)
        old = self._do_pop(position)
        self._mod_count += 1
        self._fire(ElementsRemoved(position, (old,)))
        return old

    def remove(self, value: E) -> None:
        """Remove the first element equal to ``value``; ValueError if there is none."""
        self.pop(self.index(value))

    def remove_range(self, start: int, stop: int) -> List[E]:
        """
        Remove the elements in ``[start, stop)`` with one notification.

        Returns:
            The removed elements.

        Raises:
            OutOfRangeError: Unless ``0 <= start <= stop <= len``.
        """
        size = len(self)
        if not 0 <= start <= stop <= size:
            raise OutOfRangeError(f"range [{start}, {stop}) out of bounds for size {size}")
        if start == stop:
            return []
        removed = self._do_remove_range(start, stop)
        self._mod_count += 1
        self._fire(ElementsRemoved(start, tuple(removed)))
        return removed

    def clear(self) -> None:
        if not len(self):
            return
        removed = self._do_clear()
        self._mod_count += 1
        self._fire(ElementsRemoved(0, tuple(removed)))

    def __setitem__(self, index: Union[int, slice], value: Any) -> None:
        if isinstance(index, slice):
            self._set_slice(index, value)
        else:
            self.set(index, value)

    def __delitem__(self, index: Union[int, slice]) -> None:
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step == 1:
                self.remove_range(start, max(start, stop))
            else:
                for position in sorted(range(start, stop, step), reverse=True):
                    self.pop(position)
        else:
            self.pop(index)

    def _set_slice(self, index: slice, values: Iterable[E]) -> None:
        values = list(values)
        start, stop, step = index.indices(len(self))
        if step == 1:
            self.remove_range(start, max(start, stop))
            self.add_all(values, start)
            return
        positions = range(start, stop, step)
        if len(values) != len(positions):
            raise ValueError(
                f"attempt to assign sequence of size {len(values)} "
                f"to extended slice of size {len(positions)}"
            )
        for position, value in zip(positions, values):
            self.set(position, value)

    def reverse(self) -> None:
        """Reverse in place with one removal and one addition notification."""
        from ..algorithms import reverse

        reverse(self)

    def sort(self, *, key=None, reverse: bool = False) -> None:
        """Sort in place with one removal and one addition notification."""
        from ..algorithms import sort

        sort(self, key=key, reverse=reverse)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def sub_list(self, start: int, stop: int) -> "ObservableList[E]":
        """
        Return a live observable window over ``[start, stop)``.

        Writes through the window reach this list (and its observers) with
        absolute indices. Structural changes made to this list by anyone else
        make the window stale. See ``ObservableSubList``.
        """
        from .sub_list import ObservableSubList

        size = len(self)
        if not 0 <= start <= stop <= size:
            raise OutOfRangeError(f"range [{start}, {stop}) out of bounds for size {size}")
        return ObservableSubList(self, start, stop)


class ObservableListHelper(Generic[E]):
    """
    Restricted handle for reporting element property changes.

    Created by ``observable_list_helper``. Only holders of the helper can fire
    ``list_element_property_changed``; the list itself does not expose it.

    Raises:
        UnsupportedOperationError: If the list was not created with
            ``supports_element_property_changed=True``.
    """

    __slots__ = ("_list",)

    def __init__(self, observable_list: ObservableList[E]) -> None:
        require_not_none(observable_list, "observable list")
        if not observable_list.supports_element_property_changed:
            raise UnsupportedOperationError(
                f"{type(observable_list).__name__} does not support element property changes"
            )
        self._list = observable_list

    @property
    def observable_list(self) -> ObservableList[E]:
        return self._list

    def fire_element_changed(self, index: int) -> None:
        """
        Notify observers that the element at ``index`` has changed.

        Raises:
            OutOfRangeError: If index is outside ``[0, len)``.
        """
        size = len(self._list)
        if not 0 <= index < size:
            raise OutOfRangeError(f"illegal index {index} for size {size}")
        self._list._fire_element_changed(index)

    def __iter__(self):
        # Allows ``lst, helper = observable_list_helper(...)``
        yield self._list
        yield self
