"""Sensitivity mask engine.

Walks a decoded value together with Terraform's ``*_sensitive`` tree and
replaces every scalar leaf flagged as sensitive with ``SENSITIVE``. A mask
that is a bare boolean applies to the whole subtree below it; a missing key
or index, or ``None``, means "not sensitive".
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger

from .errors import MaskShapeMismatch
from .values import SENSITIVE, RawValue, SensitivityMask, Value, ValueMap


def mask(
    value: RawValue,
    sensitivity: SensitivityMask = None,
    *,
    strict: bool = False,
) -> Value:
    """Return a new value tree with sensitive scalar leaves replaced.

    Shape mismatches between ``value`` and ``sensitivity`` fall back to "not
    sensitive" for the affected subtree, or raise ``MaskShapeMismatch`` when
    ``strict`` is set.
    """

    return _mask(value, sensitivity, strict, "")


def mask_map(
    values: Optional[Dict[str, RawValue]],
    sensitivity: SensitivityMask = None,
    *,
    strict: bool = False,
) -> Optional[ValueMap]:
    """Mask an optional top-level attribute map."""

    if values is None:
        return None
    return _mask_object(values, sensitivity, strict, "")


def _mask(value: RawValue, sensitivity: SensitivityMask, strict: bool, path: str) -> Value:
    if value is None:
        return None
    if isinstance(value, dict):
        return _mask_object(value, sensitivity, strict, path)
    if isinstance(value, list):
        return _mask_array(value, sensitivity, strict, path)
    return _mask_scalar(value, sensitivity, strict, path)


def _mask_object(
    value: Dict[str, RawValue],
    sensitivity: SensitivityMask,
    strict: bool,
    path: str,
) -> Dict[str, Value]:
    if isinstance(sensitivity, dict):
        return {
            key: _mask(item, sensitivity.get(key, False), strict, _key_path(path, key))
            for key, item in value.items()
        }
    if sensitivity is not None and not isinstance(sensitivity, bool):
        sensitivity = _mismatch("object", sensitivity, strict, path)
    return {
        key: _mask(item, sensitivity, strict, _key_path(path, key))
        for key, item in value.items()
    }


def _mask_array(
    value: List[RawValue],
    sensitivity: SensitivityMask,
    strict: bool,
    path: str,
) -> List[Value]:
    if isinstance(sensitivity, list):
        return [
            _mask(
                item,
                sensitivity[index] if index < len(sensitivity) else False,
                strict,
                _index_path(path, index),
            )
            for index, item in enumerate(value)
        ]
    if sensitivity is not None and not isinstance(sensitivity, bool):
        sensitivity = _mismatch("array", sensitivity, strict, path)
    return [
        _mask(item, sensitivity, strict, _index_path(path, index))
        for index, item in enumerate(value)
    ]


def _mask_scalar(value: RawValue, sensitivity: SensitivityMask, strict: bool, path: str) -> Value:
    if isinstance(sensitivity, bool):
        return SENSITIVE if sensitivity else value
    if sensitivity is not None:
        _mismatch("boolean", sensitivity, strict, path)
    return value


def _mismatch(expected: str, sensitivity: Any, strict: bool, path: str) -> bool:
    location = path or "<root>"
    found = type(sensitivity).__name__
    if strict:
        raise MaskShapeMismatch(
            f"Sensitivity mask shape mismatch at {location}: expected {expected} mask, got {found}",
            path=location,
        )
    logger.warning(
        "Sensitivity mask shape mismatch at {}: expected {} mask, got {}; treating as not sensitive",
        location,
        expected,
        found,
    )
    return False


def _key_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _index_path(path: str, index: int) -> str:
    return f"{path}[{index}]"


__all__ = ["mask", "mask_map"]
