"""Boolean environment overrides (``1/true/yes/on`` and ``0/false/no/off``)."""

from __future__ import annotations

import os
from typing import Mapping, Optional

_TRUTHY = {"1", "true", "yes", "on"}
_FALSEY = {"0", "false", "no", "off"}


def env_truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def env_falsey(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _FALSEY


def env_override(
    name: str,
    default: bool,
    env: Optional[Mapping[str, str]] = None,
) -> bool:
    """Return the boolean override for ``name``, or ``default`` when unset or unrecognised."""

    env_map = os.environ if env is None else env
    value = env_map.get(name)
    if env_truthy(value):
        return True
    if env_falsey(value):
        return False
    return default
