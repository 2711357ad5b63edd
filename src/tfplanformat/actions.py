"""Lifecycle actions and the classifier that folds them into one result."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Dict, FrozenSet, Iterable

from .errors import ActionParseError


class Action(str, Enum):
    """Raw per-resource action as written in ``change.actions``."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    NO_OP = "no-op"

    @classmethod
    def parse(cls, raw: object) -> "Action":
        try:
            return cls(raw)
        except ValueError as exc:
            raise ActionParseError(f"Failed to parse action({raw})") from exc

    def __str__(self) -> str:
        return self.value


@total_ordering
class ResultAction(Enum):
    """Consolidated action; declaration order is the summary sort order."""

    CREATE = "create"
    DELETE_CREATE = "delete-create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    NO_OP = "no-op"
    UNKNOWN = "unknown"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ResultAction):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.value


_RANKS: Dict[ResultAction, int] = {action: index for index, action in enumerate(ResultAction)}

_GLYPHS: Dict[ResultAction, str] = {
    ResultAction.CREATE: "✅",
    ResultAction.DELETE_CREATE: "♻️",
    ResultAction.READ: "📖",
    ResultAction.UPDATE: "🔄",
    ResultAction.DELETE: "❌",
    ResultAction.NO_OP: "🤷",
    ResultAction.UNKNOWN: "❓",
}

_SINGLE_ACTIONS: Dict[Action, ResultAction] = {
    Action.CREATE: ResultAction.CREATE,
    Action.READ: ResultAction.READ,
    Action.UPDATE: ResultAction.UPDATE,
    Action.DELETE: ResultAction.DELETE,
    Action.NO_OP: ResultAction.NO_OP,
}

_REPLACE: FrozenSet[Action] = frozenset({Action.CREATE, Action.DELETE})


def classify(actions: Iterable[Action]) -> ResultAction:
    """Fold a set of raw actions into one ``ResultAction``.

    ``{create, delete}`` in any order is a replacement, a single action maps
    to its counterpart, and anything else is ``UNKNOWN``.
    """

    distinct = frozenset(actions)
    if distinct == _REPLACE:
        return ResultAction.DELETE_CREATE
    if len(distinct) == 1:
        (action,) = distinct
        return _SINGLE_ACTIONS[action]
    return ResultAction.UNKNOWN


def classify_strings(raw_actions: Iterable[object]) -> ResultAction:
    """Parse raw action strings and classify them."""

    return classify([Action.parse(raw) for raw in raw_actions])


__all__ = ["Action", "ResultAction", "classify", "classify_strings"]
