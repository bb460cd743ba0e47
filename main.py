"""
Gustanto POS Backend - Web Server Entry Point
=============================================

Run this to start the API:
    python main.py

Host, port and log level come from HOST, PORT and LOG_LEVEL (see .env).
"""

import logging

import uvicorn

from gustanto_pos.infrastructure.config import get_settings


def main():
    """Start the web server."""
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s'
    )
    logger = logging.getLogger(__name__)
    logger.info(f"Gustanto POS Backend running at http://localhost:{settings.port}")

    uvicorn.run(
        "gustanto_pos.web.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
