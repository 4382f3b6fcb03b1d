"""Card model and authoring-source validation."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from core import ui_config
from core.cards import ANALYTICS_TAGS, CardConfig, CardConfigError
from core.dashboard_layout import (
    DASHBOARD_CARDS,
    load_dashboard_cards,
    read_raw_cards,
    validate_cards,
)


def test_wire_names_and_python_names_both_accepted():
    wire = CardConfig.model_validate(
        {
            "key": "k",
            "title": "T",
            "position": 1,
            "component": "C",
            "lastUpdated": "2024-01-01T00:00:00Z",
            "analyticsTags": ["card_view"],
            "ariaLabel": "aria",
            "gridSpan": {"md": 2},
            "badges": [{"label": "Live", "className": "text-emerald-400"}],
        }
    )
    python = CardConfig(
        key="k",
        title="T",
        position=1,
        component="C",
        last_updated="2024-01-01T00:00:00Z",
        analytics_tags=["card_view"],
        aria_label="aria",
        grid_span={"md": 2},
        badges=[{"label": "Live", "class_name": "text-emerald-400"}],
    )

    assert wire == python
    assert wire.badges[0].class_name == "text-emerald-400"


def test_to_wire_uses_camel_case_and_drops_unset(make_card):
    wire = make_card(aria_label="Card", analytics_tags=["card_view"]).to_wire()

    assert wire["ariaLabel"] == "Card"
    assert wire["lastUpdated"] == "2024-01-01T00:00:00Z"
    assert wire["analyticsTags"] == ["card_view"]
    assert "subtitle" not in wire
    assert "chartConfigs" not in wire


def test_cards_are_immutable(make_card):
    card = make_card()
    with pytest.raises(ValidationError):
        card.title = "changed"


def test_unknown_analytics_tag_rejected(make_card):
    with pytest.raises(ValidationError):
        make_card(analytics_tags=["card_view", "hover"])


def test_analytics_vocabulary():
    assert set(ANALYTICS_TAGS) == {"card_view", "open_click", "secondary_click", "error", "empty_state"}


def test_validate_cards_wraps_errors_with_source():
    bad = [{"key": "k", "title": "T", "component": "C", "lastUpdated": "2024-01-01"}]

    with pytest.raises(CardConfigError, match="my-source"):
        validate_cards(bad, "my-source")


def test_builtin_layout_validates():
    cards = load_dashboard_cards()

    assert len(cards) == len(DASHBOARD_CARDS)
    assert {c.key for c in cards} >= {"hero-summary", "learning-paths", "chat-with-elin"}
    assert all(set(c.analytics_tags) <= set(ANALYTICS_TAGS) for c in cards)


def test_json_source_from_argument(tmp_path):
    path = tmp_path / "cards.json"
    path.write_text(json.dumps(DASHBOARD_CARDS[:2]), encoding="utf-8")

    cards = load_dashboard_cards(str(path))

    assert [c.key for c in cards] == ["hero-summary", "portfolio-overview"]


def test_json_source_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "cards.json"
    path.write_text(json.dumps(DASHBOARD_CARDS[3:4]), encoding="utf-8")
    monkeypatch.setattr(ui_config, "DASHBOARD_CARDS_PATH", str(path))

    raw, source = read_raw_cards()

    assert source == str(path)
    assert raw[0]["key"] == "live-market-feed"


@pytest.mark.parametrize(
    "content, message",
    [
        ("{not json", "Could not read"),
        ('{"key": "k"}', "must be a JSON list"),
        ('[{"key": "k", "title": "T", "position": 1, "component": "C", '
         '"lastUpdated": "2024-01-01", "analyticsTags": ["bogus"]}]', "Invalid dashboard cards"),
    ],
)
def test_broken_json_sources(tmp_path, content, message):
    path = tmp_path / "cards.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(CardConfigError, match=message):
        load_dashboard_cards(str(path))


def test_missing_json_source(tmp_path):
    with pytest.raises(CardConfigError, match="Could not read"):
        load_dashboard_cards(str(tmp_path / "missing.json"))
