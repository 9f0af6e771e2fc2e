"""
Vigil Containers
================

Observable list, set and map wrappers, the sub-list window and the read-only
list view.
"""

from .observable_list import ObservableList, ObservableListHelper
from .observable_map import ObservableMap
from .observable_set import ObservableSet
from .sub_list import ObservableSubList
from .unmodifiable import UnmodifiableObservableList

__all__ = [
    "ObservableList",
    "ObservableListHelper",
    "ObservableMap",
    "ObservableSet",
    "ObservableSubList",
    "UnmodifiableObservableList",
]
