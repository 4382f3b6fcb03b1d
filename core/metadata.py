"""
Dashboard Cards Core Metadata
-----------------------------
Global metadata for versioning, shared by the backend banner and the
status summary.
"""

from datetime import date

__project__ = "dashboard-cards"
__version__ = "1.0.0"
__maintainer__ = "Ruïz Verbeke"
__updated__ = date.today().isoformat()

CORE_METADATA = {
    "project": __project__,
    "version": __version__,
    "maintainer": __maintainer__,
    "updated": __updated__,
    "description": (
        "Dashboard card configuration service: validates the card layout, "
        "collapses duplicate cards into one merged record, and serves the "
        "position-sorted result to the rendering layer."
    ),
}

def get_metadata() -> dict:
    """Return current system metadata as a dict."""
    return CORE_METADATA
