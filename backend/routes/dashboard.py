"""
Dashboard Router
================

Serves the deduplicated dashboard card layout to the rendering layer.

Endpoints:
----------
- GET  /dashboard/cards          → merged, position-sorted built-in layout
- POST /dashboard/cards/refresh  → drop the memoized layout and reload it
- POST /dashboard/dedupe         → merge an ad-hoc card list
- GET  /dashboard/duplicates     → authoring duplicates in the layout

Design:
-------
• The merge engine (core.dedupe) is pure; memoization lives here.
• The layout is validated once per refresh; a broken source is a 500.
• Responses use the camelCase wire format and omit unset fields.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, List, Tuple

from fastapi import APIRouter, HTTPException

from core.cards import CardConfig, CardConfigError
from core.dashboard_layout import load_dashboard_cards
from core.dedupe import dedupe_cards
from core.duplicate_check import find_config_duplicates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


# --------------------------------------------------------------------------- #
# Memoized layout
# --------------------------------------------------------------------------- #

@lru_cache(maxsize=1)
def get_dashboard_cards() -> Tuple[Tuple[CardConfig, ...], Tuple[CardConfig, ...]]:
    """
    Load the raw layout and its deduplicated form.

    Cached until `refresh_dashboard_cards()`; the card source only changes
    on deploy or explicit refresh.

    Returns
    -------
    (raw_cards, merged_cards)
    """
    raw = load_dashboard_cards()
    merged = dedupe_cards(raw)
    logger.info("[Dashboard] Loaded %d cards (%d after merge)", len(raw), len(merged))
    return tuple(raw), tuple(merged)


def refresh_dashboard_cards() -> None:
    get_dashboard_cards.cache_clear()


def _load_or_500() -> Tuple[Tuple[CardConfig, ...], Tuple[CardConfig, ...]]:
    try:
        return get_dashboard_cards()
    except CardConfigError as e:
        logger.error("[Dashboard] %s", e)
        raise HTTPException(status_code=500, detail=str(e))


def _to_wire(cards: Any) -> List[Dict[str, Any]]:
    return [card.to_wire() for card in cards]


# --------------------------------------------------------------------------- #
# Routes
# --------------------------------------------------------------------------- #

@router.get("/cards")
async def get_cards():
    """Return the deduplicated layout, ascending by position."""
    _, merged = _load_or_500()
    return _to_wire(merged)


@router.post("/cards/refresh")
async def refresh_cards():
    """Reload the card source and report the new counts."""
    refresh_dashboard_cards()
    raw, merged = _load_or_500()
    return {"status": "ok", "raw_count": len(raw), "merged_count": len(merged)}


@router.post("/dedupe")
async def dedupe_endpoint(cards: List[CardConfig]):
    """
    Merge a caller-supplied card list.

    Request bodies are validated against CardConfig; unknown analytics tags
    or missing required fields are rejected with 422 before merging.
    """
    return _to_wire(dedupe_cards(cards))


@router.get("/duplicates")
async def get_duplicates():
    """Keys and routes authored more than once in the layout."""
    raw, merged = _load_or_500()
    duplicates = find_config_duplicates(raw)
    return {
        "raw_count": len(raw),
        "merged_count": len(merged),
        "duplicates": [d.as_dict() for d in duplicates],
    }
