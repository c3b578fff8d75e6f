"""
Main application entry point.
"""

from skillhand_admin.api.app import create_app
from skillhand_admin.config.logging import configure_logging, get_logger
from skillhand_admin.config.settings import settings

configure_logging()
logger = get_logger(__name__)

app = create_app()


def run() -> None:
    import uvicorn

    logger.info("Starting SkillHand admin console", port=settings.API_PORT)
    uvicorn.run(
        "skillhand_admin.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
