"""
Dashboard Cards Backend API
===========================

FastAPI backend serving the dashboard card layout and health endpoints.

Design Intent
-------------
• Card layout
    - Built-in layout (core.dashboard_layout) or a JSON file from
      DASHBOARD_CARDS_PATH, validated at load time.
    - Duplicates collapsed by the pure merge engine (core.dedupe).
    - Memoized per process; refreshed explicitly.

• Routers
    - `backend.routes.dashboard` under /dashboard.

• Diagnostics
    - /health   → process metrics + card source check (core.health).
    - /status/summary → version and card counts for dashboards & agents.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from core import ui_config
from core.cards import CardConfigError
from core.health import system_health
from core.metadata import get_metadata
from backend.routes.dashboard import router as dashboard_router, get_dashboard_cards

logging.basicConfig(
    level=ui_config.LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# FastAPI App
# --------------------------------------------------------------------------- #

app = FastAPI(
    title="Dashboard Cards Backend API",
    version=ui_config.BACKEND_VERSION,
    description=(
        "Backend for the dashboard card layout.\n"
        "- Validated card authoring source.\n"
        "- Duplicate cards merged into one canonical record.\n"
        "- Build-time duplicate report."
    ),
)

app.include_router(dashboard_router)

# --------------------------------------------------------------------------- #
# Core Routes
# --------------------------------------------------------------------------- #

@app.get("/")
async def root():
    """
    Basic liveness probe.
    """
    return {
        "status": "ok",
        "message": "Dashboard Cards Backend is live.",
        "version": app.version,
        "metadata": get_metadata(),
    }


@app.get("/health")
async def health():
    """
    System health endpoint.

    Delegates to core.health.system_health which:
    - Validates the dashboard card source
    - Reports runtime and process metrics
    """
    return system_health()


@app.get("/status/summary")
async def status_summary():
    """
    High-level status summary for dashboards & agents.
    """
    try:
        raw, merged = get_dashboard_cards()
        cards = {"raw": len(raw), "merged": len(merged), "error": None}
    except CardConfigError as e:
        logger.warning("[Backend] Card source failed to load: %s", e)
        cards = {"raw": None, "merged": None, "error": str(e)}

    return {
        "backend_version": app.version,
        "cards_source": ui_config.DASHBOARD_CARDS_PATH or "built-in",
        "cards": cards,
    }


@app.on_event("startup")
def on_startup():
    logger.info("[Backend] Dashboard Cards API started (version %s)", app.version)
