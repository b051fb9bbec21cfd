"""Application entry point: configure logging and serve the API."""

import logging

import uvicorn

from fitplan.config import SETTINGS
from fitplan.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging(SETTINGS.LOG_LEVEL)
    logger.info("Starting fitplan API on %s:%s", SETTINGS.HOST, SETTINGS.PORT)
    uvicorn.run("fitplan.server.main:app", host=SETTINGS.HOST, port=SETTINGS.PORT)


if __name__ == "__main__":
    main()
