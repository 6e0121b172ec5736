"""
Employee API - server entry point.
Loads .env, then serves the FastAPI application with uvicorn.

Command: employee-api  (or: uvicorn employee_api.main:app --port 3000)
"""
import logging
import sys

import uvicorn
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def main() -> None:
    # Environment must be loaded before settings are first read
    load_dotenv()

    from employee_api.config import get_settings
    from employee_api.main import create_app

    settings = get_settings()
    config = uvicorn.Config(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        lifespan="on",
        log_config=None
    )
    server = uvicorn.Server(config)
    server.run()

    if not server.started:
        logger.critical("Employee API failed to start")
        sys.exit(1)


if __name__ == "__main__":
    main()
