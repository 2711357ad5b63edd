"""Typed plan model built from decoded Terraform plan JSON."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from loguru import logger

from .actions import ResultAction, classify_strings
from .errors import MaskShapeMismatch, PlanFormatError
from .masking import mask_map
from .values import ValueMap


def unique_actions(changes: Iterable["Change"]) -> List[ResultAction]:
    """Return the distinct classified actions of ``changes`` in summary order."""

    return sorted({change.action for change in changes})


@dataclass(frozen=True)
class Change:
    """One resource change with its classified action and masked attributes."""

    address: str
    name: str
    action: ResultAction
    before: Optional[ValueMap] = None
    after: Optional[ValueMap] = None
    type: str = ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], *, strict: bool = False) -> "Change":
        if not isinstance(payload, Mapping):
            raise PlanFormatError(
                f"Failed to parse resource change. expected an object, got {type(payload).__name__}"
            )
        address = str(payload.get("address") or "")
        change = payload.get("change") or {}
        if not isinstance(change, Mapping):
            raise PlanFormatError(f"Failed to parse resource change({address}). change must be an object")

        raw_actions = change.get("actions") or []
        if isinstance(raw_actions, (str, bytes)) or not isinstance(raw_actions, Iterable):
            raise PlanFormatError(f"Failed to parse resource change({address}). actions must be a list")
        try:
            action = classify_strings(raw_actions)
        except PlanFormatError as exc:
            raise PlanFormatError.inherit(exc, f"Failed to parse resource change({address})") from exc

        before = _attribute_map(change, "before", address)
        after = _attribute_map(change, "after", address)
        try:
            masked_before = mask_map(before, change.get("before_sensitive"), strict=strict)
            masked_after = mask_map(after, change.get("after_sensitive"), strict=strict)
        except MaskShapeMismatch as exc:
            raise MaskShapeMismatch.inherit(
                exc, f"Failed to parse resource change({address})", path=exc.path
            ) from exc
        logger.debug("Classified {} as {}", address, action)
        return cls(
            address=address,
            name=str(payload.get("name") or ""),
            action=action,
            before=masked_before,
            after=masked_after,
            type=str(payload.get("type") or ""),
        )


def _attribute_map(change: Mapping[str, Any], key: str, address: str) -> Optional[Dict[str, Any]]:
    values = change.get(key)
    if values is None or isinstance(values, dict):
        return values
    raise PlanFormatError(f"Failed to parse resource change({address}). {key} must be an object")


@dataclass(frozen=True)
class Plan:
    """Resource changes of one plan document, in plan order."""

    changes: Tuple[Change, ...] = ()

    @property
    def unique_actions(self) -> List[ResultAction]:
        return unique_actions(self.changes)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], *, strict: bool = False) -> "Plan":
        if not isinstance(payload, Mapping):
            raise PlanFormatError(
                f"Failed to parse plan. expected an object, got {type(payload).__name__}"
            )
        resource_changes = payload.get("resource_changes") or []
        if not isinstance(resource_changes, list):
            raise PlanFormatError("Failed to parse plan. resource_changes must be a list")
        try:
            changes = tuple(Change.from_dict(item, strict=strict) for item in resource_changes)
        except PlanFormatError as exc:
            raise PlanFormatError.inherit(exc, "Failed to parse plan") from exc
        logger.debug("Parsed plan with {} resource changes", len(changes))
        return cls(changes=changes)


@dataclass(frozen=True)
class Data:
    """Plans keyed by the path of the document they came from.

    ``plans`` is kept sorted by key so that multi-plan output is stable.
    """

    plans: Dict[str, Plan] = field(default_factory=dict)

    def __post_init__(self) -> None:
        ordered = {key: self.plans[key] for key in sorted(self.plans)}
        object.__setattr__(self, "plans", ordered)

    @classmethod
    def from_plans(cls, payloads: Mapping[str, Mapping[str, Any]], *, strict: bool = False) -> "Data":
        plans: Dict[str, Plan] = {}
        for source, payload in payloads.items():
            try:
                plans[source] = Plan.from_dict(payload, strict=strict)
            except PlanFormatError as exc:
                raise PlanFormatError.inherit(exc, f"Failed to read file({source})") from exc
        return cls(plans=plans)


__all__ = ["Change", "Plan", "Data", "unique_actions"]
