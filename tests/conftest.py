"""Shared fixtures for the dashboard card tests."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from core import ui_config
from core.cards import CardConfig


def _make_card(**overrides: Any) -> CardConfig:
    data: dict[str, Any] = {
        "key": "test-card",
        "title": "Test Card",
        "route": "/test",
        "position": 10,
        "component": "TestCard",
        "ctas": [{"label": "Test CTA", "href": "/test"}],
        "last_updated": "2024-01-01T00:00:00Z",
    }
    data.update(overrides)
    return CardConfig(**data)


@pytest.fixture
def make_card() -> Callable[..., CardConfig]:
    """Factory for CardConfig records; keyword overrides use snake_case names."""
    return _make_card


@pytest.fixture(autouse=True)
def _builtin_card_source(monkeypatch: pytest.MonkeyPatch):
    """Never let a developer's DASHBOARD_CARDS_PATH leak into tests."""
    monkeypatch.setattr(ui_config, "DASHBOARD_CARDS_PATH", None)
    yield
