"""Template engine dispatch for rendering plan data."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Union

from ..config import DEFAULT_OPTIONS, RenderOptions
from ..errors import TemplateEngineError
from ..models import Data
from . import jinja
from .jinja import GITHUB_MARKDOWN_TEMPLATE


class Engine(str, Enum):
    JINJA = "jinja"

    @classmethod
    def parse(cls, name: object) -> "Engine":
        try:
            return cls(name)
        except ValueError as exc:
            raise TemplateEngineError(f"Invalid template engine: {name}") from exc


_RENDERERS: Dict[Engine, Callable[[Data, str, Optional[RenderOptions]], str]] = {
    Engine.JINJA: jinja.render,
}


def render(
    engine: Union[Engine, str],
    data: Data,
    template: str,
    options: Optional[RenderOptions] = None,
) -> str:
    """Render ``template`` for ``data`` with the named engine."""

    return _RENDERERS[Engine.parse(engine)](data, template, options)


def render_github(data: Data, options: Optional[RenderOptions] = None) -> str:
    """Render ``data`` with the default GitHub Markdown template."""

    return render(Engine.JINJA, data, GITHUB_MARKDOWN_TEMPLATE, options)


def render_plans(
    payloads: Mapping[str, Mapping[str, Any]],
    template: str = GITHUB_MARKDOWN_TEMPLATE,
    options: Optional[RenderOptions] = None,
    engine: Union[Engine, str] = Engine.JINJA,
) -> str:
    """Build the plan model from decoded plan documents and render it.

    ``payloads`` maps a source name (usually the plan file path) to the
    decoded ``terraform show -json`` document.
    """

    options = options or DEFAULT_OPTIONS
    data = Data.from_plans(payloads, strict=options.strict_masking)
    return render(engine, data, template, options)


__all__ = [
    "Engine",
    "GITHUB_MARKDOWN_TEMPLATE",
    "render",
    "render_github",
    "render_plans",
]
