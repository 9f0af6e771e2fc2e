"""
Vigil - Observable Containers
=============================

Wrappers for lists, sets and mappings that synchronously notify observers of
every change made through them, weak subscriptions that do not keep
observers alive, a read-only relaying list view, and bulk list algorithms
with controlled notification volume.
"""

from . import algorithms
from .algorithms import (
    concat,
    copy,
    dedup,
    dedup_by,
    fill,
    replace_all,
    reverse,
    rotate,
    shuffle,
    sort,
    species,
    to_observable_list,
)
from .containers import (
    ObservableList,
    ObservableListHelper,
    ObservableMap,
    ObservableSet,
    ObservableSubList,
    UnmodifiableObservableList,
)
from .errors import (
    NOT_FOUND,
    InvalidIteratorStateError,
    NullArgumentError,
    OutOfRangeError,
    SizeMismatchError,
    StaleViewError,
    UnsupportedOperationError,
    VigilError,
)
from .events import (
    ChangeEvent,
    ElementAdded,
    ElementPropertyChanged,
    ElementRemoved,
    ElementReplaced,
    ElementsAdded,
    ElementsRemoved,
    KeyAdded,
    KeyRemoved,
    KeyValueChanged,
)
from .factories import (
    observable_array_list,
    observable_list,
    observable_list_helper,
    observable_map,
    observable_set,
    unmodifiable_observable_list,
)
from .listeners import (
    ObservableListListener,
    ObservableMapListener,
    ObservableSetListener,
)
from .util import IteratorState, ListenerRegistry, RemovingIterator, WeakListener

__version__ = "0.1.0"

__all__ = [
    # Containers
    "ObservableList",
    "ObservableListHelper",
    "ObservableMap",
    "ObservableSet",
    "ObservableSubList",
    "UnmodifiableObservableList",
    # Factories
    "observable_list",
    "observable_array_list",
    "observable_list_helper",
    "observable_set",
    "observable_map",
    "unmodifiable_observable_list",
    # Algorithms
    "algorithms",
    "concat",
    "copy",
    "dedup",
    "dedup_by",
    "fill",
    "replace_all",
    "reverse",
    "rotate",
    "shuffle",
    "sort",
    "species",
    "to_observable_list",
    # Observers
    "ObservableListListener",
    "ObservableSetListener",
    "ObservableMapListener",
    "WeakListener",
    "ListenerRegistry",
    # Iteration
    "RemovingIterator",
    "IteratorState",
    # Events
    "ChangeEvent",
    "ElementsAdded",
    "ElementsRemoved",
    "ElementReplaced",
    "ElementPropertyChanged",
    "ElementAdded",
    "ElementRemoved",
    "KeyAdded",
    "KeyRemoved",
    "KeyValueChanged",
    # Exceptions
    "VigilError",
    "NullArgumentError",
    "OutOfRangeError",
    "SizeMismatchError",
    "UnsupportedOperationError",
    "InvalidIteratorStateError",
    "StaleViewError",
    # Sentinel
    "NOT_FOUND",
]
