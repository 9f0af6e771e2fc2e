"""Unit tests for ObservableMap."""

import pytest

from vigil import (
    NOT_FOUND,
    InvalidIteratorStateError,
    KeyAdded,
    KeyRemoved,
    KeyValueChanged,
    NullArgumentError,
    ObservableMap,
    observable_map,
)


@pytest.mark.unit
@pytest.mark.observable
def test_put_new_key_notifies_added(watched_map, recorder):
    assert watched_map.put("c", 3) is NOT_FOUND

    assert watched_map["c"] == 3
    assert recorder.events == [KeyAdded("c")]
    assert recorder.sources == [watched_map]


@pytest.mark.unit
@pytest.mark.observable
def test_put_existing_key_notifies_changed_with_old_value(watched_map, recorder):
    assert watched_map.put("a", 10) == 1

    assert watched_map["a"] == 10
    assert recorder.events == [KeyValueChanged("a", 1)]


@pytest.mark.unit
@pytest.mark.observable
def test_put_same_value_still_notifies_changed(watched_map, recorder):
    """Rebinding a key always reports a change, even to an equal value"""
    watched_map["a"] = 1

    assert recorder.events == [KeyValueChanged("a", 1)]


@pytest.mark.unit
@pytest.mark.observable
def test_none_values_are_distinguishable_from_absence(recorder):
    m = observable_map({"k": None})
    m.add_observer(recorder)

    assert m.put("k", 1) is None
    assert m.remove("k") == 1
    assert m.remove("k") is NOT_FOUND
    assert recorder.events == [KeyValueChanged("k", None), KeyRemoved("k", 1)]


@pytest.mark.unit
@pytest.mark.observable
def test_remove_absent_key_is_silent(watched_map, recorder):
    assert watched_map.remove("zzz") is NOT_FOUND
    assert recorder.events == []


@pytest.mark.unit
@pytest.mark.observable
def test_del_present_key_notifies_removed(watched_map, recorder):
    del watched_map["b"]

    assert "b" not in watched_map
    assert recorder.events == [KeyRemoved("b", 2)]


@pytest.mark.unit
@pytest.mark.observable
def test_del_absent_key_raises_key_error(watched_map, recorder):
    with pytest.raises(KeyError):
        del watched_map["zzz"]

    assert recorder.events == []


@pytest.mark.unit
@pytest.mark.observable
def test_pop_follows_dict_semantics(watched_map, recorder):
    assert watched_map.pop("a") == 1
    assert watched_map.pop("zzz", "fallback") == "fallback"
    with pytest.raises(KeyError):
        watched_map.pop("zzz")

    assert recorder.events == [KeyRemoved("a", 1)]


@pytest.mark.unit
@pytest.mark.observable
def test_update_and_put_all_notify_per_key(watched_map, recorder):
    watched_map.update({"a": 5, "c": 6})
    watched_map.put_all({"d": 7})

    assert dict(watched_map) == {"a": 5, "b": 2, "c": 6, "d": 7}
    assert recorder.events == [KeyValueChanged("a", 1), KeyAdded("c"), KeyAdded("d")]


@pytest.mark.unit
@pytest.mark.observable
def test_clear_notifies_once_per_key(watched_map, recorder):
    watched_map.clear()

    assert len(watched_map) == 0
    assert recorder.events == [KeyRemoved("a", 1), KeyRemoved("b", 2)]


@pytest.mark.unit
@pytest.mark.observable
def test_clear_on_empty_map_is_silent(recorder):
    m = observable_map({})
    m.add_observer(recorder)

    m.clear()

    assert recorder.events == []


@pytest.mark.unit
@pytest.mark.observable
def test_reads_delegate(watched_map):
    assert watched_map.get("a") == 1
    assert watched_map.get("zzz") is None
    assert set(watched_map.keys()) == {"a", "b"}
    assert watched_map.contains_value(2)
    assert not watched_map.contains_value(3)
    assert watched_map == {"a": 1, "b": 2}


@pytest.mark.unit
@pytest.mark.observable
def test_key_iterator_remove_notifies(watched_map, recorder):
    iterator = watched_map.key_iterator()

    with pytest.raises(InvalidIteratorStateError):
        iterator.remove()

    assert next(iterator) == "a"
    iterator.remove()

    with pytest.raises(InvalidIteratorStateError):
        iterator.remove()

    assert dict(watched_map) == {"b": 2}
    assert recorder.events == [KeyRemoved("a", 1)]


@pytest.mark.unit
@pytest.mark.observable
def test_entry_iterator_yields_pairs_and_removes_by_key(watched_map, recorder):
    iterator = watched_map.entry_iterator()

    entries = []
    for key, value in iterator:
        entries.append((key, value))
        if key == "b":
            iterator.remove()

    assert entries == [("a", 1), ("b", 2)]
    assert dict(watched_map) == {"a": 1}
    assert recorder.events == [KeyRemoved("b", 2)]


@pytest.mark.unit
@pytest.mark.observable
def test_map_changes_reach_delegate():
    backing = {}
    m = observable_map(backing)

    m["x"] = 1

    assert backing == {"x": 1}


@pytest.mark.unit
@pytest.mark.observable
def test_wrapping_none_is_rejected():
    with pytest.raises(NullArgumentError):
        ObservableMap(None)
