"""
Weak Listener - Non-Owning Subscription Proxy
=============================================

This module provides WeakListener, an observer that forwards every
notification to another observer it only references weakly.

Registering a WeakListener instead of the observer itself means the container
does not keep the observer alive. Once the observer has been reclaimed the
next notification finds nothing to forward to, and the WeakListener removes
itself from the container that is notifying it::

    proxy = WeakListener(my_observer)
    observable_list.add_observer(proxy)

    del my_observer        # reclaimed by the garbage collector
    observable_list.append(1)
    assert not observable_list.has_observer(proxy)

The same class serves list, set and map containers.
"""

import logging
import weakref
from typing import Any, Callable, Optional

from ..errors import require_not_none


class WeakListener:
    """
    Observer proxy holding its target through a ``weakref.ref``.

    Args:
        observer: The observer to forward to. Must support weak references.
        callback: Optional function passed to ``weakref.ref``; it is called
            with the dead reference when the observer is reclaimed.

    Raises:
        NullArgumentError: If observer is None.
    """

    __slots__ = ("_ref", "__weakref__")

    def __init__(
        self,
        observer: Any,
        callback: Optional[Callable[["weakref.ref"], None]] = None,
    ):
        require_not_none(observer, "observer")
        self._ref: Optional[weakref.ref] = weakref.ref(observer, callback)

    def resolve(self) -> Optional[Any]:
        """Return the observer, or None once it is gone or the proxy was cleared."""
        ref = self._ref
        return None if ref is None else ref()

    def was_reclaimed(self) -> bool:
        return self.resolve() is None

    def clear(self) -> None:
        """Sever the reference now, without waiting for garbage collection."""
        self._ref = None

    def refers_to(self, observer: Any) -> bool:
        target = self.resolve()
        return target is not None and target is observer

    def _forward(self, callback: str, source: Any, *args: Any) -> None:
        observer = self.resolve()
        if observer is None:
            logging.debug(f"Weak observer reclaimed, detaching {self!r} from {type(source).__name__}")
            source.remove_observer(self)
            return
        getattr(observer, callback)(source, *args)

    # List notifications

    def list_elements_added(self, source, index, count):
        self._forward("list_elements_added", source, index, count)

    def list_elements_removed(self, source, index, removed_elements):
        self._forward("list_elements_removed", source, index, removed_elements)

    def list_element_replaced(self, source, index, old_element):
        self._forward("list_element_replaced", source, index, old_element)

    def list_element_property_changed(self, source, index):
        self._forward("list_element_property_changed", source, index)

    # Set notifications

    def set_element_added(self, source, element):
        self._forward("set_element_added", source, element)

    def set_element_removed(self, source, element):
        self._forward("set_element_removed", source, element)

    # Map notifications

    def map_key_added(self, source, key):
        self._forward("map_key_added", source, key)

    def map_key_removed(self, source, key, old_value):
        self._forward("map_key_removed", source, key, old_value)

    def map_key_value_changed(self, source, key, old_value):
        self._forward("map_key_value_changed", source, key, old_value)

    def __repr__(self) -> str:
        target = self.resolve()
        state = "reclaimed" if target is None else repr(target)
        return f"WeakListener({state})"
