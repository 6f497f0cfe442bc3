"""Shared pytest fixtures.

Run pytest from the project root; pythonpath in pyproject.toml puts src/ on
sys.path so pattern_catalog imports without installation.
"""

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from pattern_catalog.domain.entities import Category, Example, Result
from pattern_catalog.domain.registry import ExampleRegistry


def _passing(*lines: str) -> Callable[[], Result]:
    return lambda: Result.ok(lines)


def _raising(message: str) -> Callable[[], Result]:
    def action() -> Result:
        raise RuntimeError(message)
    return action


@pytest.fixture
def passing_action() -> Callable[..., Callable[[], Result]]:
    """Factory: passing_action("line") -> action returning Result.ok(("line",))."""
    return _passing


@pytest.fixture
def raising_action() -> Callable[[str], Callable[[], Result]]:
    """Factory: raising_action("boom") -> action raising RuntimeError("boom")."""
    return _raising


@pytest.fixture
def scenario_registry() -> ExampleRegistry:
    """Singleton (pass), Builder (pass), Adapter (fail: boom)."""
    registry = ExampleRegistry()
    registry.register(Example("Singleton", Category.CREATIONAL, _passing("one instance")))
    registry.register(Example("Builder", Category.CREATIONAL, _passing("built")))
    registry.register(Example("Adapter", Category.STRUCTURAL, _raising("boom")))
    return registry


@pytest.fixture
def telemetry() -> MagicMock:
    return MagicMock()
