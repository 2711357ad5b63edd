"""Render Terraform plan JSON into human-readable diff reports."""

from __future__ import annotations

from loguru import logger

from .actions import Action, ResultAction, classify, classify_strings
from .config import RenderOptions
from .constants import PACKAGE_NAME, PACKAGE_VERSION
from .diff import diff_lines, render_diff
from .errors import (
    ActionParseError,
    MaskShapeMismatch,
    PlanFormatError,
    RenderError,
    TemplateEngineError,
    TfPlanFormatError,
)
from .masking import mask, mask_map
from .models import Change, Data, Plan, unique_actions
from .template import GITHUB_MARKDOWN_TEMPLATE, Engine, render, render_github, render_plans
from .values import SENSITIVE, Sensitive

logger.disable(PACKAGE_NAME)

__version__ = PACKAGE_VERSION

__all__ = [
    "Action",
    "ResultAction",
    "classify",
    "classify_strings",
    "RenderOptions",
    "diff_lines",
    "render_diff",
    "TfPlanFormatError",
    "PlanFormatError",
    "ActionParseError",
    "MaskShapeMismatch",
    "TemplateEngineError",
    "RenderError",
    "mask",
    "mask_map",
    "Change",
    "Data",
    "Plan",
    "unique_actions",
    "Engine",
    "GITHUB_MARKDOWN_TEMPLATE",
    "render",
    "render_github",
    "render_plans",
    "Sensitive",
    "SENSITIVE",
]
