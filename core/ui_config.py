"""
core/ui_config.py
-----------------
Central configuration hub for the dashboard backend, CLI and Streamlit UI.

- Reads backend URL, card source and cache settings from environment variables.
- Provides global constants for API access.
- Includes lightweight health check.
"""

from __future__ import annotations
import os
import requests

# ---------------------------------------------------------------------------
# Backend configuration
# ---------------------------------------------------------------------------

BACKEND_URL: str = os.getenv("BACKEND_URL", "http://127.0.0.1:8000").rstrip("/")
BACKEND_VERSION: str = os.getenv("BACKEND_VERSION", "1.0")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Dashboard cards
# ---------------------------------------------------------------------------

# Optional JSON file replacing the built-in card list (core.dashboard_layout)
DASHBOARD_CARDS_PATH: str | None = os.getenv("DASHBOARD_CARDS_PATH") or None

# Seconds the Streamlit inspector caches backend responses
DASHBOARD_CACHE_TTL: int = int(os.getenv("DASHBOARD_CACHE_TTL", "60"))

# ---------------------------------------------------------------------------
# Connectivity check
# ---------------------------------------------------------------------------

def check_backend_health() -> dict:
    """Ping the backend /health endpoint and return its JSON."""
    try:
        resp = requests.get(f"{BACKEND_URL}/health", timeout=4)
        return resp.json()
    except Exception as e:
        return {"status": "error", "detail": str(e)}
