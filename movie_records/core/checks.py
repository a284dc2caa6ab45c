"""
Type checks shared by the mutation helpers and the accessors.

A movie record is any mapping; mutations additionally need it to be
mutable. Type tags mirror the small closed set of runtime kinds a
record value can have.
"""

from collections import ChainMap
from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import Any, List, Union


class TypeTag(str, Enum):
    """Runtime kind of a record value."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NULL = "null"


def is_movie_record(value: Any) -> bool:
    """Return True if value is a (possibly empty) mapping."""
    return isinstance(value, Mapping)


def is_mutable_record(value: Any) -> bool:
    """Return True if value is a mapping that can be changed in place."""
    return isinstance(value, MutableMapping)


def own_mapping(record: Mapping) -> Mapping:
    """Return the part of a record that holds its own keys.

    Parent maps of a ChainMap are inherited, not owned; writes and
    deletes only ever touch the first map.
    """
    if isinstance(record, ChainMap):
        return record.maps[0]
    return record


def has_own_key(record: Mapping, key: str) -> bool:
    """Return True if key is set on the record itself."""
    return key in own_mapping(record)


def own_keys(record: Mapping) -> List[str]:
    """Return the record's own keys in insertion order."""
    return list(own_mapping(record).keys())


def is_number(value: Any) -> bool:
    """Return True for int and float values; bool is not a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def matches_type(value: Any, tag: TypeTag) -> bool:
    """
    Check a value against a type tag.
    
    Args:
        value: Value to check
        tag: Expected kind
        
    Returns:
        True if the value is of the expected kind
    """
    if tag is TypeTag.STRING:
        return isinstance(value, str)
    if tag is TypeTag.NUMBER:
        return is_number(value)
    if tag is TypeTag.BOOLEAN:
        return isinstance(value, bool)
    if tag is TypeTag.OBJECT:
        # arrays are objects too
        return isinstance(value, (Mapping, list))
    if tag is TypeTag.ARRAY:
        return isinstance(value, list)
    if tag is TypeTag.NULL:
        return value is None
    raise ValueError(f"Unsupported type tag: {tag!r}")


def has_property_of_type(
    record: Any,
    property_name: str,
    expected_type: Union[TypeTag, str]
) -> bool:
    """
    Check whether a record has a property of the expected type.
    
    Args:
        record: Movie record to inspect
        property_name: Key to look up
        expected_type: TypeTag or its string value (e.g. "string", "number")
        
    Returns:
        True if record is a mapping holding property_name with a value of
        the expected type. Unknown type names give False.
    """
    try:
        tag = TypeTag(expected_type)
    except ValueError:
        return False
    return (
        is_movie_record(record)
        and has_own_key(record, property_name)
        and matches_type(record[property_name], tag)
    )
