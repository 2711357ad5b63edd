"""Global pytest configuration for tfplanformat tests."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
_SRC_ROOT = _REPO_ROOT / "src"

# Allow running the suite from a checkout without installing the package.
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from loguru import logger  # noqa: E402

DATA_ROOT = _REPO_ROOT / "tests" / "data"
PLANS_ROOT = DATA_ROOT / "plans"
RENDERS_ROOT = DATA_ROOT / "renders"


@pytest.fixture(scope="session")
def plan_payloads() -> Dict[str, Dict[str, Any]]:
    """Decoded fixture plans keyed by file name."""

    return {
        path.name: json.loads(path.read_text(encoding="utf-8"))
        for path in sorted(PLANS_ROOT.glob("*.json"))
    }


@pytest.fixture
def log_messages():
    """Capture tfplanformat log records for the duration of a test."""

    messages: List[str] = []
    logger.enable("tfplanformat")
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")
    try:
        yield messages
    finally:
        logger.remove(handler_id)
        logger.disable("tfplanformat")


def pytest_addoption(parser) -> None:
    """Register project-specific pytest flags."""

    parser.addoption(
        "--update-snapshots",
        action="store_true",
        default=False,
        help="Regenerate golden render fixtures under tests/data/renders.",
    )


@pytest.fixture(scope="session")
def snapshot_updater(pytestconfig):
    """Return a helper that rewrites golden renders when requested."""

    update_mode = pytestconfig.getoption("--update-snapshots")
    return SnapshotWriter(enabled=bool(update_mode), renders_root=RENDERS_ROOT)


class SnapshotWriter:
    """Rewrites golden render files with fresh output when enabled."""

    def __init__(self, *, enabled: bool, renders_root: Path) -> None:
        self.enabled = enabled
        self.renders_root = renders_root

    def maybe_write(self, name: str, rendered: str) -> None:
        if not self.enabled:
            return
        target_path = self.renders_root / name
        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.write_text(rendered, encoding="utf-8")
