"""
core/dedupe.py
--------------
Dashboard card deduplication and merge engine.

Collapses card records that describe the same widget into one merged
record and returns the result sorted by `position`.

Pipeline
--------
1. Identity: route -> key -> title (lower-cased, trimmed).
2. Preference: newest -> has chart configs -> more badges
   -> more analytics tags -> first encountered.
3. Merge: the preferred record is the base; the other one only fills
   gaps (CTAs, badges, tags, props, chart configs, optional text).

This module must remain pure: no I/O, no caching. Callers memoize.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

from core.cards import AnalyticsTag, BadgeConfig, CardConfig, CTAConfig

logger = logging.getLogger(__name__)

ANONYMOUS_PREFIX = "__anonymous__:"


class _Entry(NamedTuple):
    order: int          # index of the group's first card in the input
    card: CardConfig


# --------------------------------------------------------------------------- #
# Identity
# --------------------------------------------------------------------------- #

def _norm(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def card_identity(card: CardConfig) -> str:
    """Return the normalized grouping key for a card ("" if it has none)."""
    return _norm(card.route) or _norm(card.key) or _norm(card.title)


# --------------------------------------------------------------------------- #
# Preference
# --------------------------------------------------------------------------- #

def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 `lastUpdated` value.

    Returns None when the value cannot be parsed. Naive values are read as UTC
    so they stay comparable with offset-aware ones.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _has_charts(card: CardConfig) -> bool:
    return bool(card.chart_configs)


def select_preferred_base(
    first: CardConfig,
    second: CardConfig,
    first_order: int = 0,
    second_order: int = 1,
) -> Tuple[CardConfig, CardConfig]:
    """
    Pick the merge base for two cards sharing an identity.

    `first_order` / `second_order` are the cards' positions in the original
    input; on a full tie the lower one wins, whatever the argument order.

    Returns
    -------
    (base, other)
    """
    pair = ((first, second), (second, first))

    # 1. Newest wins; an unparsable timestamp is older than any valid one
    t1 = parse_timestamp(first.last_updated)
    t2 = parse_timestamp(second.last_updated)
    for card, parsed in ((first, t1), (second, t2)):
        if parsed is None:
            logger.debug(
                "[Dashboard] Unparsable lastUpdated %r on card %r",
                card.last_updated, card.key,
            )
    if t1 != t2:
        if t2 is None or (t1 is not None and t1 > t2):
            return pair[0]
        return pair[1]

    # 2. Chart configs
    if _has_charts(first) != _has_charts(second):
        return pair[0] if _has_charts(first) else pair[1]

    # 3. Badge count
    if len(first.badges) != len(second.badges):
        return pair[0] if len(first.badges) > len(second.badges) else pair[1]

    # 4. Analytics tag count
    if len(first.analytics_tags) != len(second.analytics_tags):
        return pair[0] if len(first.analytics_tags) > len(second.analytics_tags) else pair[1]

    # 5. First encountered
    return pair[0] if first_order <= second_order else pair[1]


# --------------------------------------------------------------------------- #
# Field mergers
# --------------------------------------------------------------------------- #

def merge_ctas(base: Sequence[CTAConfig], other: Sequence[CTAConfig]) -> List[CTAConfig]:
    """Base CTAs in order, then other's CTAs with an unseen href."""
    merged = list(base)
    seen = {_norm(cta.href) for cta in base}
    for cta in other:
        href = _norm(cta.href)
        if href not in seen:
            seen.add(href)
            merged.append(cta)
    return merged


def merge_badges(base: Sequence[BadgeConfig], other: Sequence[BadgeConfig]) -> List[BadgeConfig]:
    """Union of badges keyed on lower-cased label; base wins."""
    merged = list(base)
    seen = {badge.label.lower() for badge in base}
    for badge in other:
        label = badge.label.lower()
        if label not in seen:
            seen.add(label)
            merged.append(badge)
    return merged


def merge_analytics_tags(
    base: Sequence[AnalyticsTag],
    other: Sequence[AnalyticsTag],
) -> List[AnalyticsTag]:
    return list(dict.fromkeys([*base, *other]))


def merge_cards(base: CardConfig, other: CardConfig) -> CardConfig:
    """
    Merge `other` into `base` and return a new record.

    Scalars (key, title, route, position, component, grid span, lastUpdated)
    come from base untouched. `props` and `chart_configs` are merged one
    level deep only.
    """
    chart_configs: Dict[str, Any] = {**(other.chart_configs or {}), **(base.chart_configs or {})}
    return base.model_copy(
        update={
            "ctas": merge_ctas(base.ctas, other.ctas),
            "badges": merge_badges(base.badges, other.badges),
            "analytics_tags": merge_analytics_tags(base.analytics_tags, other.analytics_tags),
            "chart_configs": chart_configs,
            "props": {**other.props, **base.props},
            "subtitle": base.subtitle or other.subtitle,
            "description": base.description or other.description,
            "aria_label": base.aria_label or other.aria_label,
        }
    )


# --------------------------------------------------------------------------- #
# Collector / sorter
# --------------------------------------------------------------------------- #

def dedupe_cards(cards: Sequence[CardConfig]) -> List[CardConfig]:
    """
    Deduplicate dashboard cards and sort them by position.

    Parameters
    ----------
    cards : sequence of CardConfig
        Raw card records, in authoring order. Not modified.

    Returns
    -------
    list[CardConfig]
        One record per identity, ascending by `position`. Equal positions
        keep the order in which their identity was first seen.
    """
    groups: Dict[str, _Entry] = {}

    for index, card in enumerate(cards):
        identity = card_identity(card)
        if not identity:
            identity = f"{ANONYMOUS_PREFIX}{index}"
            logger.warning(
                "[Dashboard] Card #%d (component=%r) has no route, key or title; "
                "it will not be merged with any other card.",
                index, card.component,
            )

        existing = groups.get(identity)
        if existing is None:
            groups[identity] = _Entry(index, card)
            continue

        base, other = select_preferred_base(existing.card, card, existing.order, index)
        logger.debug(
            "[Dashboard] Merging duplicate %r: keeping %r, folding in %r",
            identity, base.key, other.key,
        )
        groups[identity] = _Entry(existing.order, merge_cards(base, other))

    merged = [entry.card for entry in groups.values()]
    if len(merged) < len(cards):
        logger.info("[Dashboard] Collapsed %d cards into %d", len(cards), len(merged))
    return sorted(merged, key=lambda card: card.position)
