"""
Card Inspector

Shows the dashboard layout as the rendering layer receives it.
Backed by:
- /dashboard/cards       (merged, position-sorted)
- /dashboard/duplicates  (authoring duplicates)
- /dashboard/cards/refresh

This page uses the unified backend fetch layer:
- core.ui_helpers.fetch_backend / post_backend
- core.ui_config.BACKEND_URL
"""

import os
import sys
from typing import Any, Dict, List

import pandas as pd
import streamlit as st

# Ensure project root is on sys.path when running via `streamlit run ui/overview.py`
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if ROOT_DIR not in sys.path:
    sys.path.append(ROOT_DIR)

from core.ui_helpers import fetch_backend, post_backend
from core.ui_config import BACKEND_URL

st.set_page_config(page_title="Card Inspector", layout="wide")

st.title("🧩 Card Inspector")
st.caption(f"Merged dashboard layout from {BACKEND_URL}")

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
with st.sidebar:
    st.header("Layout")
    if st.button("🔄 Reload card source"):
        result = post_backend("/dashboard/cards/refresh")
        if result:
            st.success(f"Reloaded: {result.get('raw_count')} → {result.get('merged_count')} cards")
        fetch_backend.clear()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _cards_frame(cards: List[Dict[str, Any]]) -> pd.DataFrame:
    rows = [
        {
            "position": c.get("position"),
            "key": c.get("key"),
            "title": c.get("title"),
            "route": c.get("route", ""),
            "component": c.get("component"),
            "ctas": ", ".join(cta.get("href", "") for cta in c.get("ctas", [])),
            "badges": ", ".join(b.get("label", "") for b in c.get("badges", [])),
            "tags": ", ".join(c.get("analyticsTags", [])),
            "lastUpdated": c.get("lastUpdated"),
        }
        for c in cards
    ]
    return pd.DataFrame(rows)


# ---------------------------------------------------------------------------
# Merged layout
# ---------------------------------------------------------------------------
cards = fetch_backend("/dashboard/cards")
report = fetch_backend("/dashboard/duplicates")

if not cards:
    st.warning("No cards returned by the backend.")
    st.stop()

col1, col2, col3 = st.columns(3)
col1.metric("Authored cards", report.get("raw_count", "–") if report else "–")
col2.metric("Rendered cards", len(cards))
col3.metric("Duplicate keys/routes", len(report.get("duplicates", [])) if report else "–")

st.subheader("📋 Rendered layout")
st.dataframe(_cards_frame(cards), use_container_width=True, hide_index=True)

# ---------------------------------------------------------------------------
# Authoring duplicates
# ---------------------------------------------------------------------------
st.subheader("⚠️ Authoring duplicates")
duplicates = report.get("duplicates", []) if report else []
if duplicates:
    st.dataframe(pd.DataFrame(duplicates), use_container_width=True, hide_index=True)
else:
    st.success("No duplicate keys or routes in the card source ✅")

with st.expander("Raw JSON"):
    st.json(cards)
