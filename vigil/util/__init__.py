"""
Vigil Utils - Observer Bookkeeping
==================================

Classes:
- ListenerRegistry: Copy-on-write, ordered observer storage with snapshot dispatch
- WeakListener: Observer proxy that does not keep its target alive
- RemovingIterator: Snapshot iterator whose remove() goes through the container
"""

from .iterators import IteratorState, RemovingIterator
from .listener_registry import ListenerRegistry
from .weak_listener import WeakListener

__all__ = [
    "IteratorState",
    "ListenerRegistry",
    "RemovingIterator",
    "WeakListener",
]
