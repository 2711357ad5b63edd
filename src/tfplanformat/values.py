"""Value model shared by the masking and diff engines.

Raw values are plain decoded JSON (``str``, ``int``, ``float``, ``bool``,
``list``, ``dict`` or ``None``). Masked values additionally allow the
``SENSITIVE`` marker in place of any scalar leaf.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Union

from .constants import NULL_TOKEN, SENSITIVE_TOKEN


class Sensitive:
    """Opaque leaf standing in for a value whose contents are withheld."""

    _instance = None

    def __new__(cls) -> "Sensitive":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Sensitive)

    def __hash__(self) -> int:
        return hash(SENSITIVE_TOKEN)

    def __reduce__(self):
        return (Sensitive, ())

    def __repr__(self) -> str:
        return "SENSITIVE"

    def __str__(self) -> str:
        return SENSITIVE_TOKEN


SENSITIVE = Sensitive()

RawValue = Union[str, int, float, bool, List[Any], Dict[str, Any], None]
Value = Union[str, int, float, bool, List[Any], Dict[str, Any], Sensitive, None]
ValueMap = Dict[str, Value]
SensitivityMask = Union[bool, List[Any], Dict[str, Any], None]


def is_object(value: Any) -> bool:
    return isinstance(value, dict)


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool, Sensitive))


def from_raw(value: RawValue) -> Value:
    """Return a structural copy of a raw value with nothing masked."""

    if isinstance(value, dict):
        return {key: from_raw(item) for key, item in value.items()}
    if isinstance(value, list):
        return [from_raw(item) for item in value]
    return value


def same_value(left: Value, right: Value) -> bool:
    """Type-strict equality: ``True`` differs from ``1`` and ``1`` from ``1.0``."""

    if isinstance(left, dict):
        if not isinstance(right, dict) or left.keys() != right.keys():
            return False
        return all(same_value(left[key], right[key]) for key in left)
    if isinstance(left, list):
        if not isinstance(right, list) or len(left) != len(right):
            return False
        return all(same_value(a, b) for a, b in zip(left, right))
    if isinstance(left, (bool, int, float)):
        return type(left) is type(right) and left == right
    return left == right


def plaintext(value: Value) -> str:
    """Render a value on a single line for diff output."""

    if value is None:
        return NULL_TOKEN
    if isinstance(value, Sensitive):
        return SENSITIVE_TOKEN
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, list):
        return "[" + ", ".join(plaintext(item) for item in value) + "]"
    if isinstance(value, dict):
        items = (
            f"{json.dumps(key, ensure_ascii=False)}: {plaintext(value[key])}"
            for key in sorted(value)
        )
        return "{" + ", ".join(items) + "}"
    return str(value)


__all__ = [
    "Sensitive",
    "SENSITIVE",
    "RawValue",
    "Value",
    "ValueMap",
    "SensitivityMask",
    "is_object",
    "is_array",
    "is_scalar",
    "from_raw",
    "same_value",
    "plaintext",
]
