"""Main application entry point.

Runs the NiceGUI chat interface against the configured backend.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point."""
    from nicegui import ui

    from pdfqa.config import get_client_config
    from pdfqa.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    config = get_client_config()

    logger.info(f"Starting PDF Q&A client on http://localhost:{config.port}")
    logger.info(f"Using backend at {config.api_base_url}")

    ui.run(
        title=config.title,
        host=config.host,
        port=config.port,
        storage_secret=config.storage_secret,
        reload=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
