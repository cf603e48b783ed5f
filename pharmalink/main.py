"""
ASGI entry point: `uvicorn pharmalink.main:app` or the `pharmalink` script.
"""

import logging

import sentry_sdk

from pharmalink.config.settings import Settings, get_settings
from pharmalink.core.app_factory import create_app
from pharmalink.core.shared.logger import configure_logging

settings = get_settings()
configure_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT, environment=settings.ENVIRONMENT)

logger = logging.getLogger(__name__)


def init_sentry(settings: Settings) -> bool:
    """Error reporting is opt-in through SENTRY_DSN."""
    if not settings.SENTRY_DSN:
        return False
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        release=f"pharmalink@{settings.VERSION}",
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        send_default_pii=False,
    )
    return True


if init_sentry(settings):
    logger.info("Sentry error reporting enabled")

app = create_app(settings)


def run() -> None:
    import uvicorn

    logger.info(f"Starting PharmaLink API on {settings.HOST}:{settings.PORT} ({settings.ENVIRONMENT})")
    uvicorn.run("pharmalink.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
