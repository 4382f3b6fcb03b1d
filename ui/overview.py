"""
Dashboard Cards: Streamlit Launcher
------------------------------------
Main entrypoint for the card inspector multipage app.
This file ensures Streamlit loads all pages under ui/pages/.
"""

import os
import sys

import streamlit as st

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.append(ROOT_DIR)

from core.ui_config import BACKEND_URL, check_backend_health

st.set_page_config(page_title="Dashboard Cards", layout="wide")

st.title("🗂️ Dashboard Cards")
st.caption("Inspect the merged dashboard layout served to the app")

st.markdown("""
Use the sidebar to navigate:
- **Card Inspector**: merged layout, merge summary and authoring duplicates
""")

health = check_backend_health()
if health.get("status") == "ok":
    st.success(f"Backend reachable at {BACKEND_URL} ✅ ({health.get('cards_loaded')} cards configured)")
else:
    st.error(f"Backend not healthy at {BACKEND_URL} ❌: {health.get('detail') or health.get('message')}")

st.markdown("---")
st.info("Start exploring via the left sidebar navigation.")
