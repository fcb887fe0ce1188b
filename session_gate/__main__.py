"""
Run the service with uvicorn.

    SEED_EMAIL=test@example.com SEED_PASSWORD=password python -m session_gate
"""

import logging

import uvicorn

from session_gate.adapters.password_guard import PasswordGuardAdapter
from session_gate.config import get_settings
from session_gate.logging_config import setup_logging
from session_gate.web.app import create_app


def main():
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_DIR)
    logger = logging.getLogger("session_gate")

    guard = PasswordGuardAdapter()
    if settings.SEED_EMAIL and settings.SEED_PASSWORD:
        guard.register(settings.SEED_EMAIL, settings.SEED_PASSWORD, name=settings.SEED_NAME)
        logger.info(f"Seeded principal {settings.SEED_EMAIL}")

    app = create_app(settings=settings, guard=guard)

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
