"""
main.py - Topic Quiz API server entry point

Streamlit UI: streamlit run topic_quiz/app.py
"""

import logging
import os
import sys

# ── Package path (must come first) ───────────────────────────────────────────
_BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if _BASE_DIR not in sys.path:
    sys.path.insert(0, _BASE_DIR)

from config import DEFAULT_HOST, DEFAULT_PORT, LOG_FILE, LOG_LEVEL


def setup_logging() -> None:
    try:
        logging.basicConfig(
            level=LOG_LEVEL,
            format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            handlers=[
                logging.FileHandler(LOG_FILE, encoding='utf-8'),
                logging.StreamHandler(sys.stdout)
            ]
        )
    except PermissionError:
        # log file not writable: console only
        logging.basicConfig(level=LOG_LEVEL)


logger = logging.getLogger(__name__)


def run_server(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    import uvicorn
    from api.app import create_app

    logger.info(f"Starting uvicorn on http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level="warning")


if __name__ == "__main__":
    setup_logging()
    logger.info("=== Topic Quiz started ===")
    try:
        run_server()
    except KeyboardInterrupt:
        logger.info("Stopped by user.")
