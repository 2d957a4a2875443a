"""
Run the web app with uvicorn.

Host, port and log level come from web.config (HOST, PORT, LOG_LEVEL env vars,
.env supported). Default: http://localhost:3001
"""

import logging
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn

from web import config
from web.main import app

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def run_server(host: str = config.HOST, port: int = config.PORT) -> None:
    """
    Start the API server and block until it stops.

    Args:
        host: Interface to bind.
        port: TCP port to bind.
    """
    logger.info(f"API server running at http://localhost:{port}")
    uvicorn.run(app, host=host, port=port, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run_server()
