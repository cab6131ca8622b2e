"""Run the API with uvicorn: ``python -m postboard``."""
from __future__ import annotations

import logging

from uvicorn import run

from postboard.core.config import get_settings
from postboard.main import app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logger.info("Server running on http://%s:%s", settings.host, settings.port)
    run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
