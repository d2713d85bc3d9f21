"""
Cron Routes

GET /cron/check-database - Scheduled read-only database health check
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from experience_board.api.dependencies import get_store
from experience_board.core.auth import require_cron
from experience_board.core.config import Settings, get_settings
from experience_board.db.store import ExperienceStore
from experience_board.schemas.schemas import HealthReport
from experience_board.services.health import run_database_checks

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cron", tags=["Cron"], dependencies=[Depends(require_cron)])


@router.get("/check-database", response_model=HealthReport)
def check_database(
    store: ExperienceStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Run the database probes. Requires Authorization: Bearer <CRON_SECRET>."""
    try:
        return run_database_checks(store, settings)
    except Exception as e:
        logger.exception("Database check error")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": str(e) or type(e).__name__,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )
