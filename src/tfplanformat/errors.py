"""Exception hierarchy for tfplanformat."""

from __future__ import annotations

from typing import Optional


class TfPlanFormatError(Exception):
    """Base class for every error raised by tfplanformat."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @classmethod
    def inherit(cls, parent: object, message: str, **kwargs):
        """Build an error whose message is ``"<message>. <parent>"``."""

        return cls(f"{message}. {parent}", **kwargs)

    def __str__(self) -> str:
        return self.message


class PlanFormatError(TfPlanFormatError):
    """Raised when a decoded plan cannot be turned into the typed model."""


class ActionParseError(PlanFormatError):
    """Raised when a resource change carries an unknown action string."""


class MaskShapeMismatch(PlanFormatError):
    """Raised in strict mode when a sensitivity mask disagrees with its value."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class TemplateEngineError(TfPlanFormatError):
    """Raised for an unknown template engine name."""


class RenderError(TfPlanFormatError):
    """Raised when a template cannot be compiled or rendered."""


__all__ = [
    "TfPlanFormatError",
    "PlanFormatError",
    "ActionParseError",
    "MaskShapeMismatch",
    "TemplateEngineError",
    "RenderError",
]
