"""
Vigil Listeners - Observer Callback Interfaces
==============================================

Observers are plain objects exposing one method per change event. The classes
in this module implement every callback as a no-op so subclasses only override
the notifications they care about. Registration is duck-typed: any object with
the right methods works, it does not have to inherit from these classes.

Every callback receives the container that fired the event first. For views
and relays this is the view the observer was registered on, not the wrapped
container.
"""

from typing import Any, Generic, Sequence

from .types import E, K, V


class ObservableListListener(Generic[E]):
    """Notification types from an observable list."""

    def list_elements_added(self, source: Any, index: int, count: int) -> None:
        """``count`` elements were inserted at ``index``."""

    def list_elements_removed(
        self, source: Any, index: int, removed_elements: Sequence[E]
    ) -> None:
        """``removed_elements`` used to start at ``index``."""

    def list_element_replaced(self, source: Any, index: int, old_element: E) -> None:
        """The element at ``index`` was replaced; ``old_element`` is the prior value."""

    def list_element_property_changed(self, source: Any, index: int) -> None:
        """
        A property of the element at ``index`` changed.

        Only lists whose ``supports_element_property_changed`` is True send this.
        """


class ObservableSetListener(Generic[E]):
    """Notification types from an observable set."""

    def set_element_added(self, source: Any, element: E) -> None:
        pass

    def set_element_removed(self, source: Any, element: E) -> None:
        pass


class ObservableMapListener(Generic[K, V]):
    """Notification types from an observable map."""

    def map_key_added(self, source: Any, key: K) -> None:
        pass

    def map_key_removed(self, source: Any, key: K, old_value: V) -> None:
        pass

    def map_key_value_changed(self, source: Any, key: K, old_value: V) -> None:
        pass
