"""
Shared pytest fixtures and configuration for Vigil tests.
"""

import pytest

from vigil import observable_list, observable_map, observable_set

from .utils import EventRecorder


@pytest.fixture
def recorder():
    """Provide a fresh observer that records every notification."""
    return EventRecorder()


@pytest.fixture
def squares():
    """An observable list of the first five squares."""
    return observable_list([1, 4, 9, 16, 25])


@pytest.fixture
def watched_list(recorder):
    """An observable list ``[0, 1, 2, 3, 4]`` with ``recorder`` attached."""
    lst = observable_list(list(range(5)))
    lst.add_observer(recorder)
    return lst


@pytest.fixture
def watched_set(recorder):
    s = observable_set({"a", "b"})
    s.add_observer(recorder)
    return s


@pytest.fixture
def watched_map(recorder):
    m = observable_map({"a": 1, "b": 2})
    m.add_observer(recorder)
    return m
