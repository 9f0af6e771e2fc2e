"""Unit tests for the bulk list algorithms and their notification volume."""

import random
from collections import deque

import numpy as np
import pytest

from vigil import (
    ElementReplaced,
    ElementsAdded,
    ElementsRemoved,
    NullArgumentError,
    ObservableList,
    SizeMismatchError,
    algorithms,
    concat,
    copy,
    dedup,
    dedup_by,
    fill,
    observable_list,
    replace_all,
    reverse,
    rotate,
    shuffle,
    sort,
    species,
    to_observable_list,
)

from ..utils import EventRecorder


def watched(items):
    lst = observable_list(list(items))
    recorder = EventRecorder()
    lst.add_observer(recorder)
    return lst, recorder


# ============================================================================
# rotate / reverse
# ============================================================================


@pytest.mark.unit
@pytest.mark.algorithms
def test_rotate_moves_element_i_to_i_plus_distance():
    lst, recorder = watched([1, 2, 3, 4, 5])

    rotate(lst, 2)

    assert list(lst) == [4, 5, 1, 2, 3]
    assert recorder.events == [
        ElementsRemoved(0, (1, 2, 3, 4, 5)),
        ElementsAdded(0, 5),
    ]


@pytest.mark.unit
@pytest.mark.algorithms
@pytest.mark.parametrize("distance", [-7, -1, 1, 3, 6, 13])
def test_rotate_matches_index_arithmetic(distance):
    original = list(range(6))
    lst = observable_list(list(original))

    rotate(lst, distance)

    for i, element in enumerate(original):
        assert lst[(i + distance) % len(original)] == element


@pytest.mark.unit
@pytest.mark.algorithms
def test_rotate_back_restores_order():
    lst = observable_list(list("abcdefg"))

    rotate(lst, 4)
    rotate(lst, -4)

    assert list(lst) == list("abcdefg")


@pytest.mark.unit
@pytest.mark.algorithms
@pytest.mark.parametrize("items,distance", [([], 3), ([1, 2, 3], 0), ([1, 2, 3], 3)])
def test_rotate_without_movement_is_silent(items, distance):
    lst, recorder = watched(items)

    rotate(lst, distance)

    assert list(lst) == items
    assert recorder.events == []


@pytest.mark.unit
@pytest.mark.algorithms
def test_reverse_fires_one_removal_and_one_addition():
    lst, recorder = watched([1, 2, 3])

    reverse(lst)

    assert list(lst) == [3, 2, 1]
    assert recorder.events == [ElementsRemoved(0, (1, 2, 3)), ElementsAdded(0, 3)]


@pytest.mark.unit
@pytest.mark.algorithms
def test_reverse_single_element_is_silent():
    lst, recorder = watched(["only"])

    reverse(lst)

    assert recorder.events == []


# ============================================================================
# sort
# ============================================================================


@pytest.mark.unit
@pytest.mark.algorithms
def test_sort_natural_order():
    lst, recorder = watched([3, 1, 2])

    sort(lst)

    assert list(lst) == [1, 2, 3]
    assert recorder.events == [ElementsRemoved(0, (3, 1, 2)), ElementsAdded(0, 3)]


@pytest.mark.unit
@pytest.mark.algorithms
def test_sort_with_key_and_reverse():
    lst = observable_list(["ccc", "a", "bb"])

    sort(lst, key=len, reverse=True)

    assert list(lst) == ["ccc", "bb", "a"]


@pytest.mark.unit
@pytest.mark.algorithms
def test_sort_with_comparator():
    lst = observable_list([1, 5, 3])

    sort(lst, comparator=lambda a, b: b - a)

    assert list(lst) == [5, 3, 1]


@pytest.mark.unit
@pytest.mark.algorithms
def test_sort_rejects_key_and_comparator_together():
    lst, recorder = watched([2, 1])

    with pytest.raises(ValueError):
        sort(lst, key=abs, comparator=lambda a, b: a - b)

    assert list(lst) == [2, 1]
    assert recorder.events == []


@pytest.mark.unit
@pytest.mark.algorithms
def test_sort_is_stable():
    lst = observable_list([(1, "b"), (0, "x"), (1, "a")])

    sort(lst, key=lambda pair: pair[0])

    assert list(lst) == [(0, "x"), (1, "b"), (1, "a")]


@pytest.mark.unit
@pytest.mark.algorithms
def test_sort_already_sorted_is_silent():
    lst, recorder = watched([1, 2, 3])

    sort(lst)

    assert recorder.events == []


# ============================================================================
# fill / copy / replace_all
# ============================================================================


@pytest.mark.unit
@pytest.mark.algorithms
def test_fill_replaces_every_element():
    lst, recorder = watched([1, 2, 3])

    fill(lst, 0)

    assert list(lst) == [0, 0, 0]
    assert recorder.events == [ElementsRemoved(0, (1, 2, 3)), ElementsAdded(0, 3)]


@pytest.mark.unit
@pytest.mark.algorithms
def test_fill_empty_list_is_silent():
    lst, recorder = watched([])

    fill(lst, 0)

    assert list(lst) == []
    assert recorder.events == []


@pytest.mark.unit
@pytest.mark.algorithms
def test_copy_overwrites_prefix_only():
    dest, recorder = watched([1, 2, 3, 4])

    copy(dest, ["a", "b"])

    assert list(dest) == ["a", "b", 3, 4]
    assert recorder.events == [
        ElementsRemoved(0, (1, 2, 3, 4)),
        ElementsAdded(0, 4),
    ]


@pytest.mark.unit
@pytest.mark.algorithms
def test_copy_longer_source_fails_before_touching_destination():
    dest, recorder = watched([1, 2])

    with pytest.raises(SizeMismatchError):
        copy(dest, [7, 8, 9])

    assert list(dest) == [1, 2]
    assert recorder.events == []


@pytest.mark.unit
@pytest.mark.algorithms
def test_size_mismatch_is_an_index_error():
    with pytest.raises(IndexError):
        copy(observable_list([]), [1])


@pytest.mark.unit
@pytest.mark.algorithms
def test_replace_all_swaps_whole_content_when_matched():
    lst, recorder = watched([1, 4, 9, 16])

    assert replace_all(lst, 4, 400) is True

    assert list(lst) == [1, 400, 9, 16]
    assert recorder.events == [
        ElementsRemoved(0, (1, 4, 9, 16)),
        ElementsAdded(0, 4),
    ]


@pytest.mark.unit
@pytest.mark.algorithms
def test_replace_all_replaces_every_match():
    lst = observable_list(["x", "y", "x"])

    replace_all(lst, "x", "z")

    assert list(lst) == ["z", "y", "z"]


@pytest.mark.unit
@pytest.mark.algorithms
def test_replace_all_without_match_is_silent():
    lst, recorder = watched([1, 2, 3])

    assert replace_all(lst, 7, 8) is False
    assert recorder.events == []


@pytest.mark.unit
@pytest.mark.algorithms
def test_replace_all_can_match_none():
    lst = observable_list([None, 1, None])

    assert replace_all(lst, None, 0) is True
    assert list(lst) == [0, 1, 0]


# ============================================================================
# shuffle
# ============================================================================


@pytest.mark.unit
@pytest.mark.algorithms
@pytest.mark.parametrize(
    "rng", [random.Random(7), np.random.default_rng(7)], ids=["random", "numpy"]
)
def test_shuffle_fires_two_replacements_per_step(rng):
    items = list(range(10))
    lst, recorder = watched(items)

    shuffle(lst, rng)

    assert sorted(lst) == items
    assert len(recorder.events) == 2 * (len(items) - 1)
    assert all(isinstance(event, ElementReplaced) for event in recorder.events)


@pytest.mark.unit
@pytest.mark.algorithms
def test_shuffle_is_reproducible_with_seeded_generator():
    first = observable_list(list(range(20)))
    second = observable_list(list(range(20)))

    shuffle(first, np.random.default_rng(42))
    shuffle(second, np.random.default_rng(42))

    assert list(first) == list(second)


@pytest.mark.unit
@pytest.mark.algorithms
def test_shuffle_default_generator_keeps_elements():
    lst = observable_list(list("abcdef"))

    shuffle(lst)

    assert sorted(lst) == list("abcdef")


@pytest.mark.unit
@pytest.mark.algorithms
@pytest.mark.parametrize("items", [[], ["solo"]])
def test_shuffle_short_list_is_silent(items):
    lst, recorder = watched(items)

    shuffle(lst, random.Random(0))

    assert recorder.events == []


# ============================================================================
# dedup
# ============================================================================


@pytest.mark.unit
@pytest.mark.algorithms
def test_dedup_removes_from_the_end():
    lst, recorder = watched([1, 1, 2, 2, 3])

    dedup(lst)

    assert list(lst) == [1, 2, 3]
    assert recorder.events == [ElementsRemoved(3, (2,)), ElementsRemoved(1, (1,))]


@pytest.mark.unit
@pytest.mark.algorithms
def test_dedup_only_removes_consecutive_duplicates():
    lst = observable_list([1, 2, 1, 1])

    dedup(lst)

    assert list(lst) == [1, 2, 1]


@pytest.mark.unit
@pytest.mark.algorithms
def test_dedup_by_never_matching_predicate_is_silent():
    lst, recorder = watched([1, 1, 1])

    dedup_by(lst, lambda a, b: False)

    assert list(lst) == [1, 1, 1]
    assert recorder.events == []


@pytest.mark.unit
@pytest.mark.algorithms
def test_dedup_by_custom_equivalence():
    lst = observable_list(["Apple", "apple", "Banana", "BANANA", "cherry"])

    dedup_by(lst, lambda a, b: a.lower() == b.lower())

    assert list(lst) == ["Apple", "Banana", "cherry"]


@pytest.mark.unit
@pytest.mark.algorithms
def test_dedup_by_rejects_none_predicate():
    with pytest.raises(NullArgumentError):
        dedup_by(observable_list([1]), None)


# ============================================================================
# concat / species / to_observable_list
# ============================================================================


@pytest.mark.unit
@pytest.mark.algorithms
def test_concat_of_nothing_is_a_new_empty_list():
    result = concat()

    assert isinstance(result, ObservableList)
    assert len(result) == 0


@pytest.mark.unit
@pytest.mark.algorithms
def test_concat_of_one_list_wraps_it_without_copying():
    source = observable_list([1, 2])

    result = concat(source)
    source.append(3)

    assert result is not source
    assert list(result) == [1, 2, 3]


@pytest.mark.unit
@pytest.mark.algorithms
def test_concat_of_many_lists_copies_in_order():
    a, b, c = observable_list([1]), observable_list([]), observable_list([2, 3])

    result = concat(a, b, c)
    a.append(99)

    assert list(result) == [1, 2, 3]


@pytest.mark.unit
@pytest.mark.algorithms
def test_concat_result_does_not_observe_inputs():
    a, b = observable_list([1]), observable_list([2])
    recorder = EventRecorder()

    result = concat(a, b)
    result.add_observer(recorder)
    a.append(5)

    assert recorder.events == []
    assert len(a._listeners) == 0


@pytest.mark.unit
@pytest.mark.algorithms
def test_species_builds_fresh_lists_from_factory():
    make = species(deque)

    first, second = make(), make()
    first.append(1)

    assert isinstance(first._delegate, deque)
    assert list(second) == []


@pytest.mark.unit
@pytest.mark.algorithms
def test_species_rejects_none_factory():
    with pytest.raises(NullArgumentError):
        species(None)


@pytest.mark.unit
@pytest.mark.algorithms
def test_to_observable_list_collects_items():
    result = to_observable_list(x * x for x in range(4))

    assert isinstance(result, ObservableList)
    assert list(result) == [0, 1, 4, 9]


@pytest.mark.unit
@pytest.mark.algorithms
def test_list_methods_route_to_algorithms():
    lst, recorder = watched([2, 3, 1])

    lst.sort()
    lst.reverse()

    assert list(lst) == [3, 2, 1]
    assert len(recorder.events) == 4
    assert algorithms.sort is sort
