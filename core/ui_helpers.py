"""
core/ui_helpers.py
------------------
Backend request helpers for the Streamlit card inspector.
Ensures consistent error handling and caching.
"""

from __future__ import annotations
import requests
import streamlit as st
from core.ui_config import BACKEND_URL, DASHBOARD_CACHE_TTL


@st.cache_data(ttl=DASHBOARD_CACHE_TTL)
def fetch_backend(endpoint: str, params: dict | None = None) -> dict | list:
    """
    Unified safe fetch for GET endpoints.
    Automatically prefixes BACKEND_URL and handles JSON decoding.
    """
    url = f"{BACKEND_URL.rstrip('/')}/{endpoint.lstrip('/')}"
    try:
        resp = requests.get(url, params=params, timeout=10)
        resp.raise_for_status()
        return resp.json()
    except Exception as e:
        st.error(f"Backend request failed: {e}")
        return {}


def post_backend(endpoint: str, payload: dict | list | None = None) -> dict | list:
    """Unified POST helper (not cached)."""
    url = f"{BACKEND_URL.rstrip('/')}/{endpoint.lstrip('/')}"
    try:
        resp = requests.post(url, json=payload, timeout=30)
        resp.raise_for_status()
        return resp.json()
    except Exception as e:
        st.error(f"Backend POST failed: {e}")
        return {}
