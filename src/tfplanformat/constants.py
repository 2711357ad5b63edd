"""Shared constants for tfplanformat."""

PACKAGE_NAME = "tfplanformat"
PACKAGE_VERSION = "0.1.0"

INDENT_UNIT = "  "
SENSITIVE_TOKEN = "sensitive"
NULL_TOKEN = "null"
CHANGE_ARROW = " -> "

ENV_SHOW_CHANGED_VALUES = "TFPLANFORMAT_SHOW_CHANGED_VALUES"
ENV_STRICT = "TFPLANFORMAT_STRICT"

__all__ = [
    "PACKAGE_NAME",
    "PACKAGE_VERSION",
    "INDENT_UNIT",
    "SENSITIVE_TOKEN",
    "NULL_TOKEN",
    "CHANGE_ARROW",
    "ENV_SHOW_CHANGED_VALUES",
    "ENV_STRICT",
]
