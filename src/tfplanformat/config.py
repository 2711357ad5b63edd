"""Render options for tfplanformat."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import ENV_SHOW_CHANGED_VALUES, ENV_STRICT
from .env_flags import env_override


@dataclass(frozen=True)
class RenderOptions:
    """Options bag handed to the rendering entry points.

    ``show_changed_values`` controls whether unchanged leaf lines are kept in
    diff output. ``strict_masking`` makes sensitivity-mask shape mismatches
    raise instead of falling back to "not sensitive".
    """

    show_changed_values: bool = True
    strict_masking: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "RenderOptions":
        defaults = cls()
        return cls(
            show_changed_values=env_override(
                ENV_SHOW_CHANGED_VALUES, defaults.show_changed_values, env
            ),
            strict_masking=env_override(ENV_STRICT, defaults.strict_masking, env),
        )


DEFAULT_OPTIONS = RenderOptions()

__all__ = ["RenderOptions", "DEFAULT_OPTIONS"]
