"""
Vigil Common Types - Shared Type Definitions
============================================

Shared type variables and callable aliases used across the containers, the
listener machinery and the bulk algorithms. Kept in one module so the
sub-packages can import them without circular imports.
"""

from typing import Any, Callable, List, TypeVar

# ============================================================================
# TYPE VARIABLES
# ============================================================================

E = TypeVar("E")  # element type
K = TypeVar("K")  # map key type
V = TypeVar("V")  # map value type
T = TypeVar("T")

# ============================================================================
# CALLER-SUPPLIED FUNCTIONS
# ============================================================================

# Two-argument ordering function returning <0, 0 or >0
Comparator = Callable[[Any, Any], int]

# Single-argument sort key
KeyFunction = Callable[[Any], Any]

# Equivalence test used by dedup_by; called as predicate(later, earlier)
EquivalencePredicate = Callable[[Any, Any], bool]

# Zero-argument factory producing a fresh delegate list
ListFactory = Callable[[], List[Any]]

# Applies one observer to one event during a dispatch pass
DeliveryFunction = Callable[[Any, Any], None]
