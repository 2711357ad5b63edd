"""Unit tests for environment-driven render options."""

import pytest

from tfplanformat.config import RenderOptions
from tfplanformat.env_flags import env_falsey, env_override, env_truthy


def test_defaults():
    options = RenderOptions()
    assert options.show_changed_values is True
    assert options.strict_masking is False


def test_from_env_without_overrides():
    assert RenderOptions.from_env({}) == RenderOptions()


@pytest.mark.parametrize("raw", ["0", "false", "No", " off "])
def test_from_env_hides_unchanged_values(raw):
    options = RenderOptions.from_env({"TFPLANFORMAT_SHOW_CHANGED_VALUES": raw})
    assert options.show_changed_values is False


@pytest.mark.parametrize("raw", ["1", "true", "YES", "on"])
def test_from_env_enables_strict_masking(raw):
    assert RenderOptions.from_env({"TFPLANFORMAT_STRICT": raw}).strict_masking is True


def test_from_env_ignores_unrecognised_values():
    options = RenderOptions.from_env(
        {"TFPLANFORMAT_SHOW_CHANGED_VALUES": "maybe", "TFPLANFORMAT_STRICT": ""}
    )
    assert options == RenderOptions()


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("TFPLANFORMAT_STRICT", "1")
    monkeypatch.delenv("TFPLANFORMAT_SHOW_CHANGED_VALUES", raising=False)
    assert RenderOptions.from_env() == RenderOptions(strict_masking=True)


def test_env_flag_parsing():
    assert env_truthy("On")
    assert not env_truthy(None)
    assert env_falsey("0")
    assert not env_falsey("1")
    assert env_override("MISSING", True, {}) is True
