"""
Monitoring Configuration Module.

This module provides opt-in integration with Pydantic Logfire for the
database layer. When enabled, every statement issued through the SQLAlchemy
engine is reported to Logfire, which is useful when tracking down slow
listing queries or unexpected full-text search plans.

Logfire stays off unless ``LOGFIRE_ENABLED`` is true and ``LOGFIRE_TOKEN`` is set.
"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from baremetal_db.core.config import LogfireConfig, settings

logger = logging.getLogger(__name__)


def initialize_logfire(engine: Optional[AsyncEngine] = None, config: Optional[LogfireConfig] = None) -> bool:
    """
    Initialize Pydantic Logfire and instrument SQLAlchemy.

    Args:
        engine: Async engine to instrument. When omitted, every engine
            created after this call is instrumented.
        config: Logfire configuration; defaults to the one from settings.

    Returns:
        True when Logfire was configured, False when it was skipped.
    """
    config = config or settings.logfire

    if not config.enabled:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not config.token:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    import logfire

    logfire.configure(
        token=config.token,
        service_name=config.service_name,
        environment=config.environment,
    )

    if engine is not None:
        logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    else:
        logfire.instrument_sqlalchemy()

    logger.info(f"Logfire monitoring initialized: service={config.service_name}, environment={config.environment}")
    return True
