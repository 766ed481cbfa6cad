"""Service-wide logging identity and sink configuration."""
from __future__ import annotations

import sys

from loguru import logger

SERVICE_NAME = "netlayer"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[service_name]}</cyan>:<cyan>{extra[event]}</cyan> - "
    "<level>{message}</level> {extra}"
)


def configure_logging(log_level: str = "INFO") -> None:
    """Replace loguru's default sink with a stderr sink at ``log_level``.

    Records emitted without a bound event still render: ``service_name`` and
    ``event`` default to the service name and an empty string.
    """
    logger.remove()
    logger.configure(extra={"service_name": SERVICE_NAME, "event": ""})
    logger.add(sys.stderr, level=log_level.upper(), format=LOG_FORMAT)
