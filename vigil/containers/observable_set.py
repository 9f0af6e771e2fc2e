"""
Vigil ObservableSet - Set With Change Notification
==================================================

ObservableSet wraps a caller-supplied set. Observers hear about an element
only when membership really changes: adding an element that is already
present, or removing one that is absent, is silent.

Bulk operations (``update``, ``difference_update``, ``clear``) are carried
out element by element, so they fire one notification per element changed.
"""

from collections.abc import MutableSet, Set
from typing import Any, Generic, Iterable, Iterator

from ..errors import require_not_none
from ..events import ChangeEvent, ElementAdded, ElementRemoved
from ..types import E
from ..util.iterators import RemovingIterator
from ..util.listener_registry import ListenerRegistry


class ObservableSet(MutableSet, Generic[E]):
    """
    A set that notifies observers of changes.

    Observers implement the callbacks of ``ObservableSetListener``.

    Args:
        delegate: The set that actually stores the elements.

    Raises:
        NullArgumentError: If delegate is None.
    """

    def __init__(self, delegate: Set) -> None:
        require_not_none(delegate, "delegate set")
        self._delegate = delegate
        self._listeners = ListenerRegistry()

    def add_observer(self, observer: Any) -> None:
        self._listeners.register(observer)

    def remove_observer(self, observer: Any) -> None:
        self._listeners.deregister(observer)

    def has_observer(self, observer: Any) -> bool:
        return observer in self._listeners

    def _fire(self, event: ChangeEvent) -> None:
        self._listeners.dispatch(event, self._deliver)

    def _deliver(self, observer: Any, event: ChangeEvent) -> None:
        event.notify(observer, self)

    # Reads

    def __contains__(self, element: object) -> bool:
        return element in self._delegate

    def __iter__(self) -> Iterator[E]:
        return iter(self._delegate)

    def __len__(self) -> int:
        return len(self._delegate)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({set(self._delegate)!r})"

    def iterator(self) -> RemovingIterator[E]:
        """Iterator over a snapshot whose ``remove()`` removes through this set."""
        return RemovingIterator(self._delegate, self.discard)

    @classmethod
    def _from_iterable(cls, iterable: Iterable[Any]) -> set:
        # Operators such as ``|`` and ``-`` build plain sets
        return set(iterable)

    # Writes

    def add(self, element: E) -> bool:
        """Add ``element``. Returns True (and notifies) only if it was absent."""
        if element in self._delegate:
            return False
        self._delegate.add(element)
        self._fire(ElementAdded(element))
        return True

    def discard(self, element: E) -> bool:
        """Remove ``element`` if present. Returns True (and notifies) if it was."""
        if element not in self._delegate:
            return False
        self._delegate.discard(element)
        self._fire(ElementRemoved(element))
        return True

    def remove(self, element: E) -> None:
        if not self.discard(element):
            raise KeyError(element)

    def add_all(self, elements: Iterable[E]) -> bool:
        modified = False
        for element in elements:
            modified |= self.add(element)
        return modified

    def remove_all(self, elements: Iterable[E]) -> bool:
        modified = False
        for element in elements:
            modified |= self.discard(element)
        return modified

    def update(self, *iterables: Iterable[E]) -> bool:
        modified = False
        for iterable in iterables:
            modified |= self.add_all(iterable)
        return modified

    def difference_update(self, *iterables: Iterable[E]) -> bool:
        modified = False
        for iterable in iterables:
            modified |= self.remove_all(iterable)
        return modified

    def clear(self) -> None:
        """Remove every element, one notification per element."""
        iterator = self.iterator()
        for _ in iterator:
            iterator.remove()
