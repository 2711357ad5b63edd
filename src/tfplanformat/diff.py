"""Line-oriented diff of two attribute maps."""

from __future__ import annotations

from typing import List, Mapping, Optional

from .constants import CHANGE_ARROW, INDENT_UNIT
from .values import Value, is_object, plaintext, same_value


def render_diff(
    before: Optional[Mapping[str, Value]],
    after: Optional[Mapping[str, Value]],
    *,
    show_changed_values: bool = True,
) -> str:
    """Return the diff of ``before`` and ``after`` as newline-joined text.

    No trailing newline is added.
    """

    return "\n".join(diff_lines(before, after, show_changed_values=show_changed_values))


def diff_lines(
    before: Optional[Mapping[str, Value]],
    after: Optional[Mapping[str, Value]],
    *,
    show_changed_values: bool = True,
) -> List[str]:
    """Return the diff of ``before`` and ``after`` one display line per entry.

    When only one side is present it is listed as unchanged. Keys are always
    visited in sorted order so the output does not depend on map ordering.
    ``show_changed_values=False`` drops leaves that are equal on both sides.
    """

    if before is None and after is None:
        return []
    if before is None:
        return _listing(after, 0)
    if after is None:
        return _listing(before, 0)
    return _diff_object(before, after, 0, show_changed_values)


def _listing(values: Mapping[str, Value], indent: int) -> List[str]:
    prefix = INDENT_UNIT * indent
    lines: List[str] = []
    for key in sorted(values):
        value = values[key]
        if is_object(value):
            lines.append(f"{prefix}{key}:")
            lines.extend(_listing(value, indent + 1))
        else:
            lines.append(f"{prefix}{key}: {plaintext(value)}")
    return lines


def _diff_object(
    before: Mapping[str, Value],
    after: Mapping[str, Value],
    indent: int,
    show_changed_values: bool,
) -> List[str]:
    lines: List[str] = []
    for key in sorted(set(before) | set(after)):
        lines.extend(
            _diff_key(key, before.get(key), after.get(key), indent, show_changed_values)
        )
    return lines


def _diff_key(
    key: str,
    before: Value,
    after: Value,
    indent: int,
    show_changed_values: bool,
) -> List[str]:
    header = f"{INDENT_UNIT * indent}{key}:"

    if is_object(before) and is_object(after):
        nested = _diff_object(before, after, indent + 1, show_changed_values)
        if not nested and not show_changed_values:
            return []
        return [header, *nested]

    # an object appearing or disappearing is listed as-is, not as "null -> {...}"
    if before is None and is_object(after):
        return [header, *_listing(after, indent + 1)]
    if after is None and is_object(before):
        return [header, *_listing(before, indent + 1)]

    if same_value(before, after):
        if not show_changed_values:
            return []
        return [f"{header} {plaintext(before)}"]
    return [f"{header} {plaintext(before)}{CHANGE_ARROW}{plaintext(after)}"]


__all__ = ["render_diff", "diff_lines"]
