"""Health service for basic health checks"""
import logging
from datetime import datetime, timezone

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from service.dto import HealthResponseDTO

logger = logging.getLogger(__name__)

SERVICE_VERSION = "1.0.0"


def get_health(session: Session) -> HealthResponseDTO:
    """
    Get service health including a database ping.

    Args:
        session: Database session used for the ping

    Returns:
        HealthResponseDTO: Health check result
    """
    logger.info("Health check requested")

    try:
        session.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError as e:
        logger.warning("Database ping failed", extra={"error_type": type(e).__name__})
        database = "disconnected"

    return HealthResponseDTO(
        ok=database == "connected",
        database=database,
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=SERVICE_VERSION
    )
