"""
Generic value <-> DynamoDB attribute value conversion.

DynamoDB's low-level API wants every value tagged with its type:

    {"name": {"S": "widget"}, "qty": {"N": "3"}, "tags": {"L": [{"S": "a"}]}}

This module converts between that wire format and plain Python trees of
strings, numbers, booleans, dicts and lists.

Read-side conventions:
- Numbers come back as strings, never int/float, so no precision is lost.
  Parsing them is the caller's call.
- BOOL attributes come back as "true"/"false" unless bool_as_text=False.
- Maps always come back as nested dicts.
- Binary attributes come back as the raw bytes botocore decoded. Writing
  bytes is still rejected: the generic model has no binary type.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Dict, List

from .exceptions import ConversionError

NUMBER_TYPES = (int, float, Decimal)


def _child_path(path: str, key: Any) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else str(key)


# =============================================================================
# Generic -> Wire
# =============================================================================

def to_attribute_value(value: Any, path: str = "") -> Dict[str, Any]:
    """Convert a single generic value into a tagged attribute value.

    Args:
        value: str, bool, int/float/Decimal, mapping with str keys, or list/tuple
        path: Location of the value inside the item, used in error messages

    Returns:
        Tagged attribute value, e.g. ``{"S": "abc"}``

    Raises:
        ConversionError: If the value (or anything nested in it) has no mapping

    Examples:
        >>> to_attribute_value(3)
        {'N': '3'}
        >>> to_attribute_value({"on": True})
        {'M': {'on': {'BOOL': True}}}
    """
    if isinstance(value, str):
        return {'S': value}

    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return {'BOOL': value}

    if isinstance(value, NUMBER_TYPES):
        return {'N': str(value)}

    if isinstance(value, Mapping):
        return {'M': to_wire_item(value, path)}

    if isinstance(value, (list, tuple)):
        return {'L': [to_attribute_value(v, _child_path(path, i)) for i, v in enumerate(value)]}

    type_name = type(value).__name__
    raise ConversionError(
        f"Unsupported type '{type_name}' at '{path or '<root>'}'",
        path=path,
        value_type=type_name
    )


def to_wire_item(item: Mapping, path: str = "") -> Dict[str, Dict[str, Any]]:
    """Convert a generic mapping into a DynamoDB item (or map attribute body).

    Args:
        item: Mapping from attribute names to generic values
        path: Location of the mapping inside an enclosing item

    Returns:
        Mapping from attribute names to tagged attribute values

    Raises:
        ConversionError: On a non-string key or an unsupported value
    """
    if not isinstance(item, Mapping):
        type_name = type(item).__name__
        raise ConversionError(
            f"Item must be a mapping, got '{type_name}'",
            path=path,
            value_type=type_name
        )

    wire = {}
    for key, value in item.items():
        if not isinstance(key, str):
            type_name = type(key).__name__
            raise ConversionError(
                f"Attribute names must be strings, got '{type_name}' at '{path or '<root>'}'",
                path=path,
                value_type=type_name
            )
        wire[key] = to_attribute_value(value, _child_path(path, key))
    return wire


# =============================================================================
# Wire -> Generic
# =============================================================================

def from_attribute_value(attribute: Mapping, bool_as_text: bool = True, path: str = "") -> Any:
    """Convert a tagged attribute value back into a generic value.

    Args:
        attribute: Tagged attribute value, e.g. ``{"N": "3"}``
        bool_as_text: Return BOOL as "true"/"false" instead of a native bool
        path: Location of the attribute inside the item, used in error messages

    Returns:
        str, bool, bytes, None, dict or list

    Raises:
        ConversionError: For unknown or malformed tags
    """
    if not isinstance(attribute, Mapping) or len(attribute) != 1:
        raise ConversionError(
            f"Malformed attribute value at '{path or '<root>'}': {attribute!r}",
            path=path,
            value_type=type(attribute).__name__
        )

    (tag, value), = attribute.items()

    if tag in ('S', 'N'):
        return value

    if tag == 'BOOL':
        if bool_as_text:
            return "true" if value else "false"
        return bool(value)

    if tag == 'M':
        return from_wire_item(value, bool_as_text, path)

    if tag == 'L':
        return [
            from_attribute_value(v, bool_as_text, _child_path(path, i))
            for i, v in enumerate(value)
        ]

    if tag == 'NULL':
        return None

    if tag in ('SS', 'NS', 'BS'):
        return list(value)

    if tag == 'B':
        return value

    raise ConversionError(
        f"Unsupported attribute type '{tag}' at '{path or '<root>'}'",
        path=path,
        value_type=tag
    )


def from_wire_item(item: Mapping, bool_as_text: bool = True, path: str = "") -> Dict[str, Any]:
    """Convert a DynamoDB item (or map attribute body) into a generic dict.

    Args:
        item: Mapping from attribute names to tagged attribute values
        bool_as_text: Return BOOL as "true"/"false" instead of a native bool
        path: Location of the mapping inside an enclosing item

    Returns:
        Plain dict of generic values
    """
    return {
        key: from_attribute_value(value, bool_as_text, _child_path(path, key))
        for key, value in item.items()
    }


def from_wire_items(items: List[Mapping], bool_as_text: bool = True) -> List[Dict[str, Any]]:
    """Convert a page of DynamoDB items."""
    return [from_wire_item(item, bool_as_text) for item in items]
