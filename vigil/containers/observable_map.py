"""
Vigil ObservableMap - Mapping With Change Notification
======================================================

ObservableMap wraps a caller-supplied mapping:

- ``put`` / ``m[k] = v`` fires KeyValueChanged when ``k`` already existed,
  otherwise KeyAdded
- ``remove`` / ``del m[k]`` / ``pop`` fire KeyRemoved only when ``k`` existed
- ``update`` and ``clear`` work key by key, one notification per key

``put`` and ``remove`` return ``NOT_FOUND`` instead of a previous value when
the key was absent, so stored ``None`` values stay distinguishable.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any, Generic, Iterator, Tuple, Union

from ..errors import NOT_FOUND, require_not_none
from ..events import ChangeEvent, KeyAdded, KeyRemoved, KeyValueChanged
from ..types import K, V
from ..util.iterators import RemovingIterator
from ..util.listener_registry import ListenerRegistry

_MISSING = object()


class ObservableMap(MutableMapping, Generic[K, V]):
    """
    A mapping that notifies observers of changes.

    Observers implement the callbacks of ``ObservableMapListener``.

    Args:
        delegate: The mapping that actually stores the entries.

    Raises:
        NullArgumentError: If delegate is None.
    """

    def __init__(self, delegate: Mapping) -> None:
        require_not_none(delegate, "delegate mapping")
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

    def __getitem__(self, key: K) -> V:
        return self._delegate[key]

    def __contains__(self, key: object) -> bool:
        return key in self._delegate

    def __iter__(self) -> Iterator[K]:
        return iter(self._delegate)

    def __len__(self) -> int:
        return len(self._delegate)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._delegate)!r})"

    def contains_value(self, value: Any) -> bool:
        return any(v is value or v == value for v in self._delegate.values())

    def key_iterator(self) -> RemovingIterator[K]:
        """Iterator over a snapshot of the keys; ``remove()`` removes the current key."""
        return RemovingIterator(self._delegate.keys(), self.remove)

    def entry_iterator(self) -> RemovingIterator[Tuple[K, V]]:
        """Iterator over a snapshot of ``(key, value)`` pairs; ``remove()`` removes the key."""
        return RemovingIterator(
            self._delegate.items(), lambda entry: self.remove(entry[0])
        )

    # Writes

    def put(self, key: K, value: V) -> Union[V, Any]:
        """
        Associate ``value`` with ``key``.

        Returns:
            The previous value, or NOT_FOUND if the key is new.
        """
        if key in self._delegate:
            old = self._delegate[key]
            self._delegate[key] = value
            self._fire(KeyValueChanged(key, old))
            return old
        self._delegate[key] = value
        self._fire(KeyAdded(key))
        return NOT_FOUND

    def remove(self, key: K) -> Union[V, Any]:
        """
        Remove ``key``.

        Returns:
            The value it had, or NOT_FOUND (without notifying) if it was absent.
        """
        if key not in self._delegate:
            return NOT_FOUND
        old = self._delegate.pop(key)
        self._fire(KeyRemoved(key, old))
        return old

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: K) -> None:
        if self.remove(key) is NOT_FOUND:
            raise KeyError(key)

    def pop(self, key: K, default: Any = _MISSING) -> Any:
        old = self.remove(key)
        if old is NOT_FOUND:
            if default is _MISSING:
                raise KeyError(key)
            return default
        return old

    def put_all(self, other: Mapping) -> None:
        for key in other:
            self.put(key, other[key])

    def clear(self) -> None:
        """Remove every key, one notification per key."""
        iterator = self.key_iterator()
        for _ in iterator:
            iterator.remove()
