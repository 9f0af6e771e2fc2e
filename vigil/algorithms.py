"""
Vigil Algorithms - Bulk Operations on Observable Lists
======================================================

Bulk operations that change an ObservableList only through its public
operations, so every change is seen by its observers. Two notification
policies are used:

Full replace (rotate, sort, reverse, fill, copy, replace_all):
    The new content is computed from a snapshot, then swapped in with
    ``clear()`` followed by one ``add_all()``. Observers receive at most one
    removal and one addition, whatever the list size. When the new content is
    element-for-element identical to the old one nothing is swapped and
    nothing is fired.

Positional swap (shuffle):
    Elements are swapped in place with ``set()``; every swap fires two
    ElementReplaced notifications, so observers see each intermediate state.

``dedup_by`` removes duplicates one ``pop()`` at a time from the end, firing
one removal per duplicate in descending index order.

Preconditions are checked before anything is modified: a failing call leaves
the list exactly as it was.
"""

import functools
from typing import Any, Callable, Iterable, List, Optional, Sequence

import numpy as np

from .containers.observable_list import ObservableList
from .errors import SizeMismatchError, require_not_none
from .types import Comparator, EquivalencePredicate, KeyFunction, ListFactory, T


def _same_elements(old: Sequence[Any], new: Sequence[Any]) -> bool:
    return len(old) == len(new) and all(a is b for a, b in zip(old, new))


def _replace_contents(target: ObservableList, new_content: List[Any]) -> bool:
    """Swap ``new_content`` into ``target`` with clear + add_all."""
    if _same_elements(list(target), new_content):
        return False
    target.clear()
    target.add_all(new_content)
    return True


# ============================================================================
# FULL-REPLACE ALGORITHMS
# ============================================================================


def rotate(target: ObservableList[T], distance: int) -> None:
    """
    Rotate ``target`` by ``distance`` positions.

    After the call the element that was at index ``i`` is at
    ``(i + distance) % len(target)``; negative distances rotate to the left.
    ``rotate([1, 2, 3, 4, 5], 2)`` gives ``[4, 5, 1, 2, 3]``.
    """
    content = list(target)
    size = len(content)
    if size == 0:
        return
    distance %= size
    if distance == 0:
        return

    # Follow each displacement cycle until every element has moved once
    moved = 0
    cycle_start = 0
    while moved != size:
        displaced = content[cycle_start]
        i = cycle_start
        while True:
            i += distance
            if i >= size:
                i -= size
            content[i], displaced = displaced, content[i]
            moved += 1
            if i == cycle_start:
                break
        cycle_start += 1

    _replace_contents(target, content)


def reverse(target: ObservableList[T]) -> None:
    content = list(target)
    content.reverse()
    _replace_contents(target, content)


def sort(
    target: ObservableList[T],
    key: Optional[KeyFunction] = None,
    *,
    comparator: Optional[Comparator] = None,
    reverse: bool = False,
) -> None:
    """
    Stable sort of ``target``.

    Args:
        target: The list to sort.
        key: Sort key, as for ``sorted``. Natural order when omitted.
        comparator: Two-argument ordering function; used instead of ``key``.
        reverse: Sort in descending order.
    """
    if comparator is not None:
        if key is not None:
            raise ValueError("pass either key or comparator, not both")
        key = functools.cmp_to_key(comparator)
    _replace_contents(target, sorted(target, key=key, reverse=reverse))


def fill(target: ObservableList[T], value: T) -> None:
    """Replace every element of ``target`` with ``value``."""
    _replace_contents(target, [value] * len(target))


def copy(dest: ObservableList[T], src: Sequence[T]) -> None:
    """
    Overwrite the first ``len(src)`` positions of ``dest`` with ``src``.

    Positions past ``len(src)`` keep their elements.

    Raises:
        SizeMismatchError: If ``src`` is longer than ``dest``; ``dest`` is
            left untouched.
    """
    src = list(src)
    size = len(dest)
    if len(src) > size:
        raise SizeMismatchError(
            f"source of size {len(src)} does not fit in destination of size {size}"
        )
    content = list(dest)
    content[: len(src)] = src
    _replace_contents(dest, content)


def replace_all(target: ObservableList[T], old_value: T, new_value: T) -> bool:
    """
    Replace every element equal to ``old_value`` with ``new_value``.

    Returns:
        True if at least one element matched. Without a match the list is
        not touched and nothing is fired.
    """
    content = list(target)
    modified = False
    for i, element in enumerate(content):
        if element == old_value:
            content[i] = new_value
            modified = True
    if modified:
        target.clear()
        target.add_all(content)
    return modified


# ============================================================================
# POSITIONAL ALGORITHMS
# ============================================================================


def _draw(rng: Any, bound: int) -> int:
    """Uniform integer in ``[0, bound)`` from a numpy Generator or a random.Random."""
    if hasattr(rng, "integers"):
        return int(rng.integers(bound))
    return rng.randrange(bound)


def shuffle(target: ObservableList[T], rng: Any = None) -> None:
    """
    Fisher-Yates shuffle performed with ``set()`` swaps.

    Each step swaps two positions with two ``set()`` calls (even when both
    positions are the same), so observers receive two ElementReplaced
    notifications per step and ``2 * (len - 1)`` in total.

    Args:
        target: The list to shuffle.
        rng: Source of randomness exposing ``integers(n)`` (numpy Generator)
            or ``randrange(n)`` (random.Random). A fresh
            ``numpy.random.default_rng()`` when omitted.
    """
    if rng is None:
        rng = np.random.default_rng()
    for size in range(len(target), 1, -1):
        src = size - 1
        dst = _draw(rng, size)
        held = target[src]
        target.set(src, target[dst])
        target.set(dst, held)


def dedup_by(target: ObservableList[T], predicate: EquivalencePredicate) -> None:
    """
    Remove consecutive duplicates according to ``predicate``.

    Scans from the end: whenever ``predicate(list[i], list[i - 1])`` holds,
    element ``i`` is removed with ``pop(i)``. ``[1, 1, 2, 2, 3]`` fires
    removals at index 3 and then index 1 and leaves ``[1, 2, 3]``.
    """
    require_not_none(predicate, "predicate")
    for current in range(len(target) - 1, 0, -1):
        if predicate(target[current], target[current - 1]):
            target.pop(current)


def dedup(target: ObservableList[T]) -> None:
    """``dedup_by`` using ``==``."""
    dedup_by(target, lambda a, b: a == b)


# ============================================================================
# CONSTRUCTION
# ============================================================================


def concat(*lists: ObservableList[T]) -> ObservableList[T]:
    """
    Concatenate observable lists.

    - no argument: a new, empty observable list
    - one argument: an observable list wrapping that very list (no copy)
    - several: a new observable list over a fresh list of all elements

    The result never observes its inputs.
    """
    if not lists:
        return ObservableList([])
    if len(lists) == 1:
        return ObservableList(lists[0])
    backing: List[T] = []
    for source in lists:
        backing.extend(source)
    return ObservableList(backing)


def species(factory: ListFactory) -> Callable[[], ObservableList[Any]]:
    """Return a callable building a new observable list around ``factory()``."""
    require_not_none(factory, "factory")
    return lambda: ObservableList(factory())


def to_observable_list(
    items: Iterable[T], factory: ListFactory = list
) -> ObservableList[T]:
    """Collect ``items`` into a new observable list whose delegate comes from ``factory``."""
    result = species(factory)()
    result.add_all(items)
    return result
