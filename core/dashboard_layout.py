"""
core/dashboard_layout.py
------------------------
Authoring source for the dashboard cards.

`DASHBOARD_CARDS` is the built-in, version-controlled card list (raw dicts in
the camelCase wire format). `load_dashboard_cards()` validates it, or a JSON
file configured via DASHBOARD_CARDS_PATH, into `CardConfig` models.

Validation happens here, at the boundary: unknown analytics tags, missing
positions etc. raise `CardConfigError` before the merge engine ever runs.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError

from core.cards import CardConfig, CardConfigError
from core import ui_config

_CARD_LIST = TypeAdapter(List[CardConfig])

DASHBOARD_CARDS: List[Dict[str, Any]] = [
    {
        "key": "hero-summary",
        "title": "Portfolio Summary",
        "subtitle": "Your investment overview",
        "route": "/dashboard",
        "position": 5,
        "component": "HeroSummaryCard",
        "ctas": [
            {"label": "Take Risk Quiz", "href": "/risk-quiz", "variant": "primary", "analytics": "hero_risk_quiz_click"},
        ],
        "analyticsTags": ["card_view"],
        "lastUpdated": "2024-01-15T00:00:00Z",
        "ariaLabel": "Portfolio summary and risk assessment",
    },
    {
        "key": "portfolio-overview",
        "title": "Portfolio Overview",
        "subtitle": "Asset allocation and performance",
        "route": "/portfolio",
        "position": 10,
        "component": "PortfolioOverviewCard",
        "ctas": [
            {"label": "View Details", "href": "/portfolio", "variant": "primary", "analytics": "portfolio_details_click"},
            {"label": "Rebalance", "href": "/portfolio/rebalance", "variant": "secondary", "analytics": "portfolio_rebalance_click"},
        ],
        "badges": [{"label": "Updated", "variant": "secondary", "icon": "Clock"}],
        "analyticsTags": ["card_view", "open_click"],
        "chartConfigs": {"type": "pie", "showLegend": True, "responsive": True},
        "lastUpdated": "2024-01-15T00:00:00Z",
        "ariaLabel": "Portfolio allocation and performance overview",
    },
    {
        "key": "ai-portfolio-simulator",
        "title": "AI Portfolio Simulator",
        "subtitle": "Model scenarios and visualize risk",
        "description": "Test different allocation strategies with AI-powered scenario analysis",
        "route": "/portfolio-simulator",
        "position": 15,
        "component": "AIPortfolioSimulatorCard",
        "ctas": [
            {"label": "Start Simulation", "href": "/portfolio-simulator", "variant": "primary", "icon": "Play", "analytics": "simulator_start_click"},
            {"label": "View Scenarios", "href": "/portfolio-simulator/scenarios", "variant": "outline", "analytics": "simulator_scenarios_click"},
        ],
        "badges": [
            {"label": "New", "variant": "default", "icon": "Sparkles"},
            {"label": "Educational", "variant": "outline", "icon": "ShieldCheck"},
        ],
        "analyticsTags": ["card_view", "open_click", "secondary_click"],
        "chartConfigs": {"type": "sparkline", "showTooltip": True, "height": 60},
        "gridSpan": {"default": 1, "md": 2, "xl": 2},
        "lastUpdated": "2024-01-15T00:00:00Z",
        "ariaLabel": "AI-powered portfolio simulation and scenario modeling",
    },
    {
        "key": "live-market-feed",
        "title": "Live Market Feed",
        "subtitle": "Real-time market data",
        "route": "/markets",
        "position": 20,
        "component": "LiveMarketFeed",
        "ctas": [
            {"label": "View Markets", "href": "/markets", "variant": "outline", "analytics": "markets_view_click"},
        ],
        "badges": [{"label": "Live", "variant": "default", "className": "text-emerald-400"}],
        "analyticsTags": ["card_view"],
        "lastUpdated": "2024-01-15T00:00:00Z",
        "ariaLabel": "Live market data and ticker information",
    },
    {
        "key": "credit-card-helper",
        "title": "Credit Card AI Helper",
        "subtitle": "Smart payment recommendations",
        "description": "AI-powered credit card payment optimization",
        "route": "/cards",
        "position": 22,
        "component": "CreditCardHelperCard",
        "ctas": [
            {"label": "Connect Cards", "href": "/cards/connect", "variant": "primary", "icon": "CreditCard", "analytics": "cards_connect_click"},
            {"label": "View History", "href": "/cards/history", "variant": "outline", "analytics": "cards_history_click"},
        ],
        "badges": [{"label": "AI Powered", "variant": "default", "icon": "Brain"}],
        "analyticsTags": ["card_view", "open_click"],
        "gridSpan": {"default": 1, "lg": 1},
        "lastUpdated": "2024-01-15T00:00:00Z",
        "ariaLabel": "AI-powered credit card payment recommendations",
    },
    {
        "key": "recent-activity",
        "title": "Recent Activity",
        "subtitle": "Your latest actions and insights",
        "route": "/activity",
        "position": 25,
        "component": "RecentActivityCard",
        "ctas": [
            {"label": "View All", "href": "/activity", "variant": "outline", "analytics": "activity_view_all_click"},
        ],
        "analyticsTags": ["card_view"],
        "lastUpdated": "2024-01-15T00:00:00Z",
        "ariaLabel": "Recent portfolio activities and AI insights",
    },
    {
        "key": "ai-insights",
        "title": "AI Insights",
        "subtitle": "Personalized recommendations",
        "description": "AI-driven suggestions for portfolio optimization",
        "route": "/insights",
        "position": 30,
        "component": "AIInsightsCard",
        "ctas": [
            {"label": "View Recommendation", "href": "/insights", "variant": "primary", "analytics": "insights_view_click"},
            {"label": "Request Analysis", "href": "/insights/analyze", "variant": "outline", "icon": "Brain", "analytics": "insights_analyze_click"},
        ],
        "badges": [{"label": "AI Powered", "variant": "default", "icon": "Brain"}],
        "analyticsTags": ["card_view", "open_click"],
        "gridSpan": {"default": 1, "lg": 1},
        "lastUpdated": "2024-01-15T00:00:00Z",
        "ariaLabel": "AI-powered investment insights and recommendations",
    },
    {
        "key": "learning-paths",
        "title": "Learning Paths",
        "subtitle": "Structured investment education",
        "description": "Master investing with our comprehensive course library",
        "route": "/learn",
        "position": 35,
        "component": "LearningPathsCard",
        "ctas": [
            {"label": "Continue Learning", "href": "/learn", "variant": "primary", "icon": "Play", "analytics": "learning_continue_click"},
            {"label": "Browse Courses", "href": "/learn/browse", "variant": "outline", "analytics": "learning_browse_click"},
        ],
        "badges": [{"label": "Level 7", "variant": "secondary", "icon": "Trophy"}],
        "analyticsTags": ["card_view", "open_click"],
        "chartConfigs": {"type": "progress", "animated": True, "showPercentage": True},
        "gridSpan": {"default": 1, "lg": 1},
        "lastUpdated": "2024-01-15T00:00:00Z",
        "ariaLabel": "Investment education learning paths and progress",
    },
    {
        "key": "sec-filings",
        "title": "SEC Filings Explorer",
        "subtitle": "Financial document analysis",
        "description": "AI-powered SEC filing search and analysis",
        "route": "/filings",
        "position": 40,
        "component": "SECFilingsExplorer",
        "ctas": [
            {"label": "Search Filings", "href": "/filings", "variant": "primary", "icon": "Search", "analytics": "filings_search_click"},
            {"label": "Watchlist", "href": "/filings/watchlist", "variant": "outline", "analytics": "filings_watchlist_click"},
        ],
        "badges": [{"label": "Live Data", "variant": "outline", "icon": "Activity"}],
        "analyticsTags": ["card_view", "open_click"],
        "lastUpdated": "2024-01-15T00:00:00Z",
        "ariaLabel": "SEC filings search and AI-powered document analysis",
    },
    {
        "key": "chat-with-elin",
        "title": "Chat with ELIN",
        "subtitle": "Your AI investment mentor",
        "description": "Get personalized investment guidance and answers",
        "route": "/chat",
        "position": 45,
        "component": "ChatCard",
        "ctas": [
            {"label": "Start Chat", "href": "/chat", "variant": "primary", "icon": "MessageSquare", "analytics": "chat_start_click"},
            {"label": "View History", "href": "/chat/history", "variant": "outline", "analytics": "chat_history_click"},
        ],
        "badges": [{"label": "24/7 Available", "variant": "secondary", "icon": "Clock"}],
        "analyticsTags": ["card_view", "open_click"],
        "lastUpdated": "2024-01-15T00:00:00Z",
        "ariaLabel": "Chat with ELIN AI investment mentor",
    },
]


def validate_cards(raw: Any, source: str = "<input>") -> List[CardConfig]:
    """Validate a list of raw card dicts, raising CardConfigError on failure."""
    try:
        return _CARD_LIST.validate_python(raw)
    except ValidationError as e:
        raise CardConfigError(f"Invalid dashboard cards in {source}: {e}") from e


def read_raw_cards(path: Optional[str] = None) -> tuple[List[Dict[str, Any]], str]:
    """
    Return the raw card list and a label naming where it came from.

    Uses `path`, else DASHBOARD_CARDS_PATH, else the built-in list.
    """
    path = path or ui_config.DASHBOARD_CARDS_PATH
    if not path:
        return DASHBOARD_CARDS, "built-in"

    try:
        with open(path, encoding="utf-8") as fh:
            raw = json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        raise CardConfigError(f"Could not read dashboard cards from {path}: {e}") from e

    if not isinstance(raw, list):
        raise CardConfigError(f"Dashboard cards in {path} must be a JSON list")
    return raw, path


def load_dashboard_cards(path: Optional[str] = None) -> List[CardConfig]:
    """Load and validate the raw (not yet deduplicated) dashboard cards."""
    raw, source = read_raw_cards(path)
    return validate_cards(raw, source)
