# Copyright 2022 Francis Meyvis (pwsync@mikmak.fun)

"""record identity and comparable forms tests"""

# pylint: disable=missing-function-docstring

import pytest

from dlcsync import DlcCompareInfo, DlcUnsupported, index_records, make_key
from dlcsync.record import canonical, comparable_fields, comparable_props, field_map, tag_set


def test_make_key():
    assert make_key({"name": "qb", "implementation": "QBittorrent"}) == "qb::QBittorrent"
    assert make_key({"name": "qb", "implementation": "QBittorrent", "id": 7}) == "qb::QBittorrent"


def test_make_key_missing_parts():
    assert make_key({}) == "::"
    assert make_key({"name": "qb"}) == "qb::"
    assert make_key({"implementation": "Sabnzbd", "name": None}) == "::Sabnzbd"


def test_make_key_separator():
    assert make_key({"name": "qb", "implementation": "QBittorrent"}, DlcCompareInfo(id_sep="/")) == "qb/QBittorrent"


def test_index_records_last_wins():
    first = {"name": "qb", "implementation": "QBittorrent", "priority": 1}
    other = {"name": "sab", "implementation": "Sabnzbd"}
    last = {"name": "qb", "implementation": "QBittorrent", "priority": 2}
    index = index_records([first, other, last])
    assert list(index.keys()) == ["qb::QBittorrent", "sab::Sabnzbd"]
    assert index["qb::QBittorrent"] is last


def test_index_records_empty():
    assert not index_records([])


def test_canonical_bool_is_not_number():
    assert canonical(True) != canonical(1)
    assert canonical(False) != canonical(0)
    assert canonical(1) == canonical(1.0)


def test_canonical_string_is_not_number():
    assert canonical("1") != canonical(1)


def test_canonical_null():
    assert canonical(None) == canonical(None)
    assert canonical(None) != canonical("")
    assert canonical(None) != canonical(False)


def test_canonical_object_key_order():
    assert canonical({"a": 1, "b": [1, 2]}) == canonical({"b": [1, 2], "a": 1})


def test_canonical_array_order():
    assert canonical([1, 2]) != canonical([2, 1])
    assert canonical([{"a": {"b": 1, "c": 2}}]) == canonical([{"a": {"c": 2, "b": 1}}])


def test_canonical_unsupported():
    with pytest.raises(DlcUnsupported):
        canonical(object())


def test_tag_set():
    assert tag_set({"tags": [2, 1]}) == ("1", "2")
    assert tag_set({"tags": ["b", "a", "a"]}) == ("a", "a", "b")
    assert tag_set({"tags": None}) == ()
    assert tag_set({}) == ()


def test_tag_set_string_coerced():
    assert tag_set({"tags": [1, 2]}) == tag_set({"tags": ["2", "1"]})


def test_field_map_strips_secrets():
    record = {
        "fields": [
            {"name": "host", "value": "localhost"},
            {"name": "apiKey", "value": "********"},
            {"name": "password", "value": "********"},
            {"name": "api_key", "value": "********"},
            {"name": "port"},
        ]
    }
    assert field_map(record) == {"host": "localhost", "port": None}


def test_field_map_custom_secrets():
    record = {"fields": [{"name": "host", "value": "localhost"}, {"name": "token", "value": "abc"}]}
    compare_info = DlcCompareInfo(sensitive_fields=frozenset(["token"]))
    assert field_map(record, compare_info) == {"host": "localhost"}


def test_field_map_absent():
    assert field_map({}) == {}
    assert field_map({"fields": None}) == {}


def test_comparable_fields_order():
    one = {"fields": [{"name": "host", "value": "h"}, {"name": "port", "value": 8080}]}
    two = {"fields": [{"name": "port", "value": 8080}, {"name": "host", "value": "h"}]}
    assert comparable_fields(one) == comparable_fields(two)


def test_comparable_props_absent_is_null():
    props = comparable_props({"name": "qb"})
    assert props["name"] == canonical("qb")
    assert props["priority"] == canonical(None)
    assert len(props) == 10


def test_tag_set_numbers_and_booleans():
    assert tag_set({"tags": [1.0, 2]}) == ("1", "2")
    assert tag_set({"tags": [True, False]}) == ("false", "true")
    assert tag_set({"tags": [1.5]}) == ("1.5",)


def test_comparable_fields_name_type():
    assert comparable_fields({"fields": [{"name": 1, "value": "a"}]}) != comparable_fields(
        {"fields": [{"name": "1", "value": "a"}]}
    )
