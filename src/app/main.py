"""Main Streamlit application entry point."""

import logging
import sys
from pathlib import Path

# Add project root to path for direct execution
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st

from src.app.pages import squad_builder

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def main() -> None:
    """Run the main application."""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    st.set_page_config(
        page_title="Football Squad Builder",
        page_icon="⚽",
        layout="wide",
    )

    squad_builder.render()


if __name__ == "__main__":
    main()
