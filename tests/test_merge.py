"""Field-level merge rules."""

from __future__ import annotations

from core.cards import BadgeConfig, CTAConfig
from core.dedupe import merge_analytics_tags, merge_badges, merge_cards, merge_ctas


def test_merge_ctas_matches_href_case_and_whitespace_insensitively():
    base = [CTAConfig(label="Open", href="/Portfolio")]
    other = [
        CTAConfig(label="View", href=" /portfolio "),
        CTAConfig(label="Rebalance", href="/portfolio/rebalance", variant="secondary"),
    ]

    merged = merge_ctas(base, other)

    assert [c.label for c in merged] == ["Open", "Rebalance"]
    assert merged[1].variant == "secondary"


def test_merge_ctas_keeps_base_order_and_skips_repeats_in_other():
    base = [CTAConfig(label="B", href="/b"), CTAConfig(label="A", href="/a")]
    other = [CTAConfig(label="C", href="/c"), CTAConfig(label="C again", href="/C")]

    assert [c.label for c in merge_ctas(base, other)] == ["B", "A", "C"]


def test_merge_ctas_from_empty_base():
    other = [CTAConfig(label="Go", href="/go")]
    assert merge_ctas([], other) == other


def test_merge_badges_label_is_case_insensitive_and_base_wins():
    base = [BadgeConfig(label="Live", variant="default", class_name="text-emerald-400")]
    other = [BadgeConfig(label="LIVE", variant="outline"), BadgeConfig(label="New")]

    merged = merge_badges(base, other)

    assert [b.label for b in merged] == ["Live", "New"]
    assert merged[0].class_name == "text-emerald-400"


def test_merge_analytics_tags_is_ordered_union():
    assert merge_analytics_tags(
        ["open_click", "card_view"],
        ["card_view", "error", "open_click", "empty_state"],
    ) == ["open_click", "card_view", "error", "empty_state"]


def test_merge_cards_shallow_merges_props_and_charts(make_card):
    base = make_card(
        props={"symbol": "SPY", "options": {"range": "1y"}},
        chart_configs={"type": "pie"},
    )
    other = make_card(
        props={"symbol": "QQQ", "limit": 5, "options": {"range": "5y", "log": True}},
        chart_configs={"type": "bar", "height": 60},
    )

    merged = merge_cards(base, other)

    assert merged.props == {"symbol": "SPY", "limit": 5, "options": {"range": "1y"}}
    assert merged.chart_configs == {"type": "pie", "height": 60}


def test_merge_cards_fills_optional_text_from_other(make_card):
    base = make_card(subtitle="", description=None, aria_label="Base label")
    other = make_card(subtitle="Other sub", description="Other desc", aria_label="Other label")

    merged = merge_cards(base, other)

    assert merged.subtitle == "Other sub"
    assert merged.description == "Other desc"
    assert merged.aria_label == "Base label"


def test_merge_cards_takes_scalars_from_base(make_card):
    base = make_card(
        key="base",
        title="Base",
        route="/base",
        position=3,
        component="BaseCard",
        grid_span={"default": 1, "md": 2},
        last_updated="2024-01-01T00:00:00Z",
    )
    other = make_card(
        key="other",
        title="Other",
        route="/other",
        position=99,
        component="OtherCard",
        grid_span={"xl": 4},
        last_updated="2030-01-01T00:00:00Z",
    )

    merged = merge_cards(base, other)

    assert (merged.key, merged.title, merged.route, merged.position, merged.component) == (
        "base", "Base", "/base", 3, "BaseCard",
    )
    assert merged.grid_span == base.grid_span
    assert merged.last_updated == "2024-01-01T00:00:00Z"


def test_merge_cards_returns_new_record(make_card):
    base = make_card(key="base", props={"a": 1})
    other = make_card(key="other", props={"b": 2})

    merged = merge_cards(base, other)

    assert merged is not base
    assert base.props == {"a": 1}
    assert other.props == {"b": 2}
