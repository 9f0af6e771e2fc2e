"""
Vigil Factories
===============

Entry points for wrapping ordinary containers::

    from vigil import observable_list, observable_list_helper

    tasks = observable_list(["write", "review"])
    tasks.add_observer(task_panel)

    rows, helper = observable_list_helper([])
    helper.fire_element_changed(0)   # after mutating rows[0] in place
"""

from typing import Dict, List, Set

from .containers.observable_list import ObservableList, ObservableListHelper
from .containers.observable_map import ObservableMap
from .containers.observable_set import ObservableSet
from .containers.unmodifiable import UnmodifiableObservableList
from .errors import require_not_none
from .types import E, K, V


def observable_list(delegate: List[E]) -> ObservableList[E]:
    """
    Wrap ``delegate`` in an ObservableList.

    The returned list does not support element property change notification.

    Raises:
        NullArgumentError: If delegate is None.
    """
    require_not_none(delegate, "delegate list")
    return ObservableList(delegate, False)


def observable_array_list() -> ObservableList:
    """An ObservableList over a new, empty list."""
    return observable_list([])


def observable_list_helper(delegate: List[E]) -> ObservableListHelper[E]:
    """
    Wrap ``delegate`` in an ObservableList that supports element property change
    notification, and return the helper that can fire it.

    Use this instead of ``observable_list`` when the caller can tell when an
    element changes in place. The helper unpacks as ``(list, helper)``.

    Raises:
        NullArgumentError: If delegate is None.
    """
    require_not_none(delegate, "delegate list")
    return ObservableListHelper(ObservableList(delegate, True))


def observable_set(delegate: Set[E]) -> ObservableSet[E]:
    """
    Wrap ``delegate`` in an ObservableSet.

    Raises:
        NullArgumentError: If delegate is None.
    """
    require_not_none(delegate, "delegate set")
    return ObservableSet(delegate)


def observable_map(delegate: Dict[K, V]) -> ObservableMap[K, V]:
    """
    Wrap ``delegate`` in an ObservableMap.

    Raises:
        NullArgumentError: If delegate is None.
    """
    require_not_none(delegate, "delegate mapping")
    return ObservableMap(delegate)


def unmodifiable_observable_list(
    inner: ObservableList[E],
) -> UnmodifiableObservableList[E]:
    """
    Read-only view of ``inner`` that relays its notifications.

    Observers added to the view are held weakly.
    """
    require_not_none(inner, "inner list")
    return UnmodifiableObservableList(inner)
