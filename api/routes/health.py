"""Health check and utility routes"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
import logging

from api.dependencies import get_database
from domain.models import Database

router = APIRouter(tags=["Health"])
logger = logging.getLogger("tabsplit.api.health")


@router.get("/health-check")
def health_check(request: Request, database: Database = Depends(get_database)):
    """Basic health check endpoint, including a database round trip"""
    try:
        with database.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "ok"
    except SQLAlchemyError as e:
        logger.warning(f"health_check database_unreachable error={e.__class__.__name__}")
        db_status = "unavailable"
    return {
        "status": "ok",
        "service": request.app.state.settings.app_name,
        "version": request.app.state.settings.app_version,
        "database": db_status,
    }
