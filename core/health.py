"""
core/health.py
--------------
Process health diagnostics for the dashboard backend.

Purpose
-------
- Used by the FastAPI `/health` endpoint and the Streamlit inspector.
- Confirms the dashboard card source loads and validates.
- Reports backend uptime, version and CPU/memory usage.
- Returns JSON-safe dict ready for serialization.
"""

from __future__ import annotations

import time
import platform
import psutil
from typing import Dict, Any

from core import ui_config
from core.cards import CardConfigError
from core.dashboard_layout import load_dashboard_cards


# Cache the process start time for uptime calculation
START_TIME = time.time()


def system_health() -> Dict[str, Any]:
    """
    Return structured backend health diagnostics.

    Returns
    -------
    dict
        JSON-safe health report.
    """
    status = "ok"
    message = "Backend operational."
    cards_loaded = None

    # --- Card source check ---
    try:
        cards_loaded = len(load_dashboard_cards())
    except CardConfigError as e:
        status = "degraded"
        message = f"Dashboard card source invalid: {e.__class__.__name__}"

    # --- System metrics ---
    try:
        cpu_load = psutil.cpu_percent(interval=0.2)
        memory_usage = round(psutil.virtual_memory().used / (1024 * 1024), 2)
    except Exception:
        cpu_load = None
        memory_usage = None

    # --- Construct report ---
    uptime_sec = round(time.time() - START_TIME, 2)

    return {
        "status": status,
        "message": message,
        "version": ui_config.BACKEND_VERSION,
        "cards_loaded": cards_loaded,
        "cards_source": ui_config.DASHBOARD_CARDS_PATH or "built-in",
        "cpu_load": cpu_load,
        "memory_usage": memory_usage,
        "uptime_sec": uptime_sec,
        "system": platform.system(),
        "release": platform.release(),
    }
