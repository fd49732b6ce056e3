import inspect
import logging
import sys

import uvicorn
from loguru import logger

from tracker.api import settings


class _LoguruHandler(logging.Handler):
    """Forward stdlib log records (ours and uvicorn's) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1
        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str = settings.LOG_LEVEL) -> int:
    """Send loguru and stdlib logging to stdout; return the loguru sink id."""
    # Log to stdout so server sessions show requests and errors.
    logger.remove()
    sink_id = logger.add(sys.stdout, level=level)
    logging.basicConfig(handlers=[_LoguruHandler()], level=level, force=True)
    return sink_id


def main() -> None:
    configure_logging()
    logger.info("Starting API on {}:{}", settings.API_HOST, settings.API_PORT)
    uvicorn.run(
        "tracker.api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
