"""
Observability setup: logfire tracing and standard logging.

Call `configure_observability()` once at process start. Spans and metrics
emitted by the engine are only exported when a logfire token is present.
"""

import logging
from typing import Optional

import logfire
from dotenv import load_dotenv

from src.core.config import Settings, settings as default_settings


def configure_observability(settings: Optional[Settings] = None) -> Settings:
    """
    Configure logfire and the root logging level from settings.

    Args:
        settings: Settings to use; defaults to the global instance

    Returns:
        The settings that were applied
    """
    # Expose .env values to GeneticConfig.from_env as well
    load_dotenv()
    settings = settings or default_settings

    logfire.configure(
        send_to_logfire="if-token-present",
        console=None if settings.logfire_console else False,
        **settings.get_logfire_settings()
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        version=settings.app_version
    )
    return settings
