# Copyright 2022 Francis Meyvis (pwsync@mikmak.fun)

"""Identity and comparable forms of a download client record

Records are the plain JSON-like dicts found in the config file (desired state)
or returned by the server (observed state). The comparable forms are hashable,
canonical values so that structurally equal records compare equal with ==.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .common import FIELDS, IMPLEMENTATION, NAME, SCALAR_PROPS, TAGS, VALUE, DlcCompareInfo, DlcUnsupported

Record = Dict[str, Any]


def make_key(record: Mapping, compare_info: Optional[DlcCompareInfo] = None) -> str:
    """returns the record's identifying string: name and implementation joined by the id separator"""
    id_sep = compare_info.id_sep if compare_info else DlcCompareInfo().id_sep
    return id_sep.join("" if record.get(prop) is None else str(record.get(prop)) for prop in (NAME, IMPLEMENTATION))


def index_records(records: Iterable[Mapping], compare_info: Optional[DlcCompareInfo] = None) -> Dict[str, Mapping]:
    """maps each record's key to the record, the last record wins on duplicate keys"""
    index: Dict[str, Mapping] = {}
    for record in records:
        index[make_key(record, compare_info)] = record
    return index


def canonical(value: Any) -> Tuple:
    """returns a hashable, type tagged form of a JSON-like value.

    Compares by value: object key order is irrelevant, list order is not,
    and a boolean never equals a number (unlike True == 1).
    """
    # bool is a subclass of int, test it first
    if isinstance(value, bool):
        return ("boolean", value)
    if isinstance(value, (int, float)):
        return ("number", value)
    if isinstance(value, str):
        return ("string", value)
    if value is None:
        return ("null",)
    if isinstance(value, Mapping):
        return ("object", tuple(sorted((str(k), canonical(v)) for k, v in value.items())))
    if isinstance(value, (list, tuple)):
        return ("array", tuple(canonical(v) for v in value))
    raise DlcUnsupported(f"cannot compare value of type {type(value).__name__}: {value!r}")


def _tag_str(tag: Any) -> str:
    # the server renders 1.0 as "1" and True as "true"
    if isinstance(tag, bool):
        return "true" if tag else "false"
    if isinstance(tag, float) and tag.is_integer():
        return str(int(tag))
    return str(tag)


def tag_set(record: Mapping) -> Tuple[str, ...]:
    """the record's tags as a sorted multiset of strings, absent tags are no tags"""
    tags = record.get(TAGS)
    if not isinstance(tags, (list, tuple)):
        return ()
    return tuple(sorted(_tag_str(tag) for tag in tags))


def _plain_fields(record: Mapping, compare_info: Optional[DlcCompareInfo]) -> List[Tuple[Any, Any]]:
    sensitive = compare_info.sensitive_fields if compare_info else DlcCompareInfo().sensitive_fields
    fields = record.get(FIELDS)
    if not isinstance(fields, (list, tuple)):
        return []
    return [(f.get(NAME), f.get(VALUE)) for f in fields if isinstance(f, Mapping) and f.get(NAME) not in sensitive]


def field_map(record: Mapping, compare_info: Optional[DlcCompareInfo] = None) -> Dict[Any, Any]:
    """the record's fields as name to value, without the sensitive fields"""
    return dict(_plain_fields(record, compare_info))


def comparable_fields(record: Mapping, compare_info: Optional[DlcCompareInfo] = None) -> Tuple:
    """canonical form of field_map(), names compare by value and type (1 is not "1")"""
    fields = {canonical(name): canonical(value) for name, value in _plain_fields(record, compare_info)}
    return tuple(sorted(fields.items(), key=repr))


def comparable_props(record: Mapping) -> Dict[str, Tuple]:
    """canonical form of each scalar property, an absent property compares as null"""
    return {prop: canonical(record.get(prop)) for prop in SCALAR_PROPS}
