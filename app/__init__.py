"""
Streamlit dashboard. `launch` backs the ``fintrack-dashboard`` console script.
"""

from __future__ import annotations

import sys
from pathlib import Path

APP_SCRIPT = Path(__file__).with_name("streamlit_app.py")


def launch() -> None:
    """Equivalent to ``streamlit run app/streamlit_app.py`` plus any extra CLI args."""
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(APP_SCRIPT), *sys.argv[1:]]
    sys.exit(stcli.main())
