"""
Test utilities for Vigil.

This package contains shared testing helpers: an observer that records
notifications and garbage-collection assertions for weak subscriptions.
"""

from .memory_utils import assert_alive, assert_reclaimed, collect_garbage
from .recorder import EventRecorder

__all__ = [
    "EventRecorder",
    "assert_alive",
    "assert_reclaimed",
    "collect_garbage",
]
