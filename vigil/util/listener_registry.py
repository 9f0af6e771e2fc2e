"""
Copy-on-Write Listener Registry
===============================

This module provides ListenerRegistry, the ordered observer storage behind
every observable container.

Writers (register / deregister) build a new tuple under a lock and swap it in.
Readers (dispatch) grab the current tuple once and walk it without locking, so
a dispatch pass always sees the observers that were registered when it
started:

- registering during a pass takes effect on the next pass
- deregistering during a pass does not skip anybody in the current pass
- a callback may mutate the container again; that simply starts a nested pass
"""

import logging
import threading
from typing import Any, Callable, Iterator, Tuple

from ..errors import require_not_none
from ..types import DeliveryFunction


class ListenerRegistry:
    """
    Ordered, identity-unique set of observers with snapshot dispatch.

    Dispatch order is registration order. Storage is an immutable tuple that
    is replaced wholesale on every write, so a snapshot is just the tuple
    reference read at the start of a pass.
    """

    __slots__ = ("_observers", "_lock")

    def __init__(self):
        self._observers: Tuple[Any, ...] = ()
        self._lock = threading.Lock()

    def register(self, observer: Any) -> bool:
        """
        Append ``observer`` unless the very same object is already registered.

        Returns:
            True if the observer was added.

        Raises:
            NullArgumentError: If observer is None.
        """
        require_not_none(observer, "observer")
        with self._lock:
            if any(existing is observer for existing in self._observers):
                return False
            self._observers = self._observers + (observer,)
        logging.debug(f"Registered observer {observer!r} ({len(self._observers)} total)")
        return True

    def deregister(self, observer: Any) -> bool:
        """Remove ``observer`` by identity. Returns True if it was present."""
        return self.deregister_if(lambda existing: existing is observer) > 0

    def deregister_if(self, predicate: Callable[[Any], bool]) -> int:
        """
        Remove every observer matching ``predicate`` in a single swap.

        Matches are collected first and removed together, so adjacent matches
        are never skipped.

        Returns:
            The number of observers removed.
        """
        with self._lock:
            kept = tuple(o for o in self._observers if not predicate(o))
            removed = len(self._observers) - len(kept)
            if removed:
                self._observers = kept
        if removed:
            logging.debug(f"Deregistered {removed} observer(s), {len(kept)} left")
        return removed

    def snapshot(self) -> Tuple[Any, ...]:
        """The observers as of now; later registry changes do not affect it."""
        return self._observers

    def dispatch(self, event: Any, deliver: DeliveryFunction) -> None:
        """
        Call ``deliver(observer, event)`` for each observer in the snapshot.

        Exceptions raised by ``deliver`` propagate to the caller and end the
        pass.
        """
        for observer in self._observers:
            deliver(observer, event)

    def clear(self) -> None:
        with self._lock:
            self._observers = ()

    def __contains__(self, observer: Any) -> bool:
        return any(existing is observer for existing in self._observers)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._observers)

    def __len__(self) -> int:
        return len(self._observers)

    def __bool__(self) -> bool:
        return bool(self._observers)

    def __repr__(self) -> str:
        return f"ListenerRegistry({list(self._observers)!r})"
