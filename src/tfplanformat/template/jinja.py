"""Jinja2 rendering of plan data."""

from __future__ import annotations

from functools import partial
from typing import Any, Mapping, Optional

import jinja2
from loguru import logger

from ..config import DEFAULT_OPTIONS, RenderOptions
from ..diff import render_diff
from ..errors import RenderError
from ..models import Data

GITHUB_MARKDOWN_TEMPLATE = """\
{% for plan_key, plan in data.plans.items() %}
<details>
<summary>{% for action in plan.unique_actions %}{{ action.glyph }}{% endfor %} {{ plan_key }}</summary>
{% for change in plan.changes %}

<details>
<summary>{{ change.action.glyph }} {{ change.address }}</summary>

```
{{ render_changes(change.before, change.after) }}
```

</details>
{% endfor %}
</details>
{% endfor %}"""


def render_changes(
    before: Any = None,
    after: Any = None,
    *,
    show_changed_values: bool = True,
) -> str:
    """Template function wrapping ``render_diff``."""

    for side in (before, after):
        if side is not None and not isinstance(side, Mapping):
            raise jinja2.TemplateRuntimeError("before and after must be objects or null")
    return render_diff(before, after, show_changed_values=show_changed_values)


def build_environment(options: RenderOptions = DEFAULT_OPTIONS) -> jinja2.Environment:
    environment = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=False,
    )
    environment.globals["render_changes"] = partial(
        render_changes, show_changed_values=options.show_changed_values
    )
    return environment


def render(data: Data, template: str, options: Optional[RenderOptions] = None) -> str:
    """Render ``template`` with ``data`` bound as ``data``."""

    environment = build_environment(options or DEFAULT_OPTIONS)
    try:
        compiled = environment.from_string(template)
    except jinja2.TemplateSyntaxError as exc:
        raise RenderError.inherit(exc, "Failed to add template") from exc

    logger.debug("Rendering {} plans", len(data.plans))
    try:
        return compiled.render(data=data)
    except Exception as exc:
        raise RenderError.inherit(exc, "Failed to render template") from exc


__all__ = ["GITHUB_MARKDOWN_TEMPLATE", "build_environment", "render", "render_changes"]
