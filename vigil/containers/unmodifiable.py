"""
Vigil UnmodifiableObservableList - Read-Only Relaying View
==========================================================

UnmodifiableObservableList is a read-only facade over an ObservableList.

- Reads go to the wrapped list.
- Every write raises UnsupportedOperationError before the wrapped list is
  touched.
- Observers registered on the view are stored in the view's own registry,
  each behind a fresh WeakListener, so the view never keeps them alive.
- At construction the view installs exactly one relay on the wrapped list.
  The relay re-fires every notification it receives to the view's observers
  with the view as the source.

The wrapped list holds the relay only weakly and the relay holds the view
only weakly, so a view nobody references can be reclaimed even while the
wrapped list lives on; its relay then detaches itself on the next event.
"""

import weakref
from collections.abc import Sequence
from typing import Any, Generic, Iterator, List, NoReturn, Union

from ..errors import UnsupportedOperationError, require_not_none
from ..events import (
    ChangeEvent,
    ElementPropertyChanged,
    ElementReplaced,
    ElementsAdded,
    ElementsRemoved,
)
from ..types import E
from ..util.listener_registry import ListenerRegistry
from ..util.weak_listener import WeakListener
from .observable_list import ObservableList


class _Relay:
    """The single observer a view installs on the list it wraps."""

    __slots__ = ("_view_ref", "__weakref__")

    def __init__(self, view: "UnmodifiableObservableList") -> None:
        self._view_ref = weakref.ref(view)

    def _relay(self, event: ChangeEvent) -> None:
        view = self._view_ref()
        if view is not None:
            view._fire(event)

    def list_elements_added(self, source, index, count):
        self._relay(ElementsAdded(index, count))

    def list_elements_removed(self, source, index, removed_elements):
        self._relay(ElementsRemoved(index, tuple(removed_elements)))

    def list_element_replaced(self, source, index, old_element):
        self._relay(ElementReplaced(index, old_element))

    def list_element_property_changed(self, source, index):
        self._relay(ElementPropertyChanged(index))


class UnmodifiableObservableList(Sequence, Generic[E]):
    """
    Read-only observable view of an ObservableList.

    Args:
        inner: The list to expose.

    Raises:
        NullArgumentError: If inner is None.
    """

    def __init__(self, inner: ObservableList[E]) -> None:
        require_not_none(inner, "inner list")
        self._inner = inner
        self._listeners = ListenerRegistry()
        self._relay = _Relay(self)
        self._relay_subscription = WeakListener(self._relay)
        inner.add_observer(self._relay_subscription)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_observer(self, observer: Any) -> None:
        """Register ``observer`` behind a new WeakListener."""
        require_not_none(observer, "observer")
        self._listeners.register(WeakListener(observer))

    def remove_observer(self, observer: Any) -> None:
        """
        Remove ``observer``.

        Accepts either one of the view's own WeakListener wrappers (this is
        how a reclaimed wrapper detaches itself) or the original observer, in
        which case every wrapper resolving to it is removed.
        """
        if isinstance(observer, WeakListener):
            self._listeners.deregister(observer)
        else:
            self._listeners.deregister_if(
                lambda wrapper: wrapper.refers_to(observer)
            )

    def has_observer(self, observer: Any) -> bool:
        return any(
            wrapper is observer or wrapper.refers_to(observer)
            for wrapper in self._listeners
        )

    @property
    def supports_element_property_changed(self) -> bool:
        # Property-change notifications of the wrapped list are relayed as-is
        return self._inner.supports_element_property_changed

    def _fire(self, event: ChangeEvent) -> None:
        self._listeners.dispatch(event, self._deliver)

    def _deliver(self, observer: Any, event: ChangeEvent) -> None:
        event.notify(observer, self)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._inner)

    def __getitem__(self, index: Union[int, slice]) -> Union[E, List[E]]:
        return self._inner[index]

    def get(self, index: int) -> E:
        return self._inner[index]

    def __iter__(self) -> Iterator[E]:
        return iter(self._inner)

    def __contains__(self, value: object) -> bool:
        return value in self._inner

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def sub_list(self, start: int, stop: int) -> "UnmodifiableObservableList[E]":
        """Read-only view of a window of the wrapped list."""
        return UnmodifiableObservableList(self._inner.sub_list(start, stop))

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def _unsupported(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise UnsupportedOperationError(f"{type(self).__name__} is read-only")

    set = _unsupported
    insert = _unsupported
    append = _unsupported
    add_all = _unsupported
    extend = _unsupported
    pop = _unsupported
    remove = _unsupported
    remove_range = _unsupported
    clear = _unsupported
    sort = _unsupported
    reverse = _unsupported
    __setitem__ = _unsupported
    __delitem__ = _unsupported
    __iadd__ = _unsupported
