"""
Vigil Change Events
===================

One frozen dataclass per kind of change an observable container can report.

Each event names the observer callback it maps to and knows how to deliver
itself, so registries, weak listeners and relays can pass events around
without caring which container kind produced them::

    event = ElementsAdded(index=3, count=2)
    event.notify(observer, source)
    # -> observer.list_elements_added(source, 3, 2)
"""

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Tuple


@dataclass(frozen=True)
class ChangeEvent:
    """Base class for every change event."""

    callback: ClassVar[str] = ""

    @property
    def payload(self) -> Tuple[Any, ...]:
        # astuple() deep-copies containers, so read the fields directly
        return tuple(getattr(self, f.name) for f in fields(self))

    def notify(self, observer: Any, source: Any) -> None:
        """Invoke the matching callback of ``observer`` with ``source`` first."""
        getattr(observer, self.callback)(source, *self.payload)


# ============================================================================
# LIST EVENTS
# ============================================================================


@dataclass(frozen=True)
class ElementsAdded(ChangeEvent):
    """``count`` elements were inserted starting at ``index``."""

    index: int
    count: int

    callback: ClassVar[str] = "list_elements_added"


@dataclass(frozen=True)
class ElementsRemoved(ChangeEvent):
    """``removed_elements`` used to start at ``index``."""

    index: int
    removed_elements: Tuple[Any, ...]

    callback: ClassVar[str] = "list_elements_removed"


@dataclass(frozen=True)
class ElementReplaced(ChangeEvent):
    """The element at ``index`` was replaced; ``old_element`` is the previous one."""

    index: int
    old_element: Any

    callback: ClassVar[str] = "list_element_replaced"


@dataclass(frozen=True)
class ElementPropertyChanged(ChangeEvent):
    """The element at ``index`` changed internally."""

    index: int

    callback: ClassVar[str] = "list_element_property_changed"


# ============================================================================
# SET EVENTS
# ============================================================================


@dataclass(frozen=True)
class ElementAdded(ChangeEvent):
    element: Any

    callback: ClassVar[str] = "set_element_added"


@dataclass(frozen=True)
class ElementRemoved(ChangeEvent):
    element: Any

    callback: ClassVar[str] = "set_element_removed"


# ============================================================================
# MAP EVENTS
# ============================================================================


@dataclass(frozen=True)
class KeyAdded(ChangeEvent):
    key: Any

    callback: ClassVar[str] = "map_key_added"


@dataclass(frozen=True)
class KeyRemoved(ChangeEvent):
    key: Any
    old_value: Any

    callback: ClassVar[str] = "map_key_removed"


@dataclass(frozen=True)
class KeyValueChanged(ChangeEvent):
    key: Any
    old_value: Any

    callback: ClassVar[str] = "map_key_value_changed"


LIST_EVENTS = (ElementsAdded, ElementsRemoved, ElementReplaced, ElementPropertyChanged)
SET_EVENTS = (ElementAdded, ElementRemoved)
MAP_EVENTS = (KeyAdded, KeyRemoved, KeyValueChanged)
