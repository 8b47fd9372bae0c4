"""Logging helpers."""
import logging
import os

DEFAULT_SERVICE_NAME = "voyage-client"


def configure_logging(service_name: str = DEFAULT_SERVICE_NAME) -> None:
    """Configure pipe-delimited logging for an application using the client."""

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format=f"%(asctime)s | {service_name} | %(levelname)s | %(name)s | %(message)s",
    )
