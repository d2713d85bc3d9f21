"""
Database Health Check - read-only probes run on an external schedule.

Each probe is reported on its own; the overall status is 'unhealthy'
if any probe failed. Nothing is written and nothing is retried.
"""

import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional

from experience_board.core.config import Settings
from experience_board.core.errors import StoreError
from experience_board.db.store import ExperienceStore
from experience_board.schemas.schemas import HealthReport, ProbeResult

logger = logging.getLogger(__name__)


def _probe(check: Callable[[], Optional[int]]) -> ProbeResult:
    try:
        count = check()
    except StoreError as exc:
        return ProbeResult(status="failed", error=exc.message)
    return ProbeResult(status="passed", count=count)


def run_database_checks(store: ExperienceStore, settings: Settings,
                        now: Optional[datetime] = None) -> HealthReport:
    """Run every probe and aggregate the results."""
    now = now or datetime.now(timezone.utc)
    recent_since = now - timedelta(days=settings.health_recent_window_days)
    retention_cutoff = now - timedelta(days=settings.retention_days)

    checks: Dict[str, ProbeResult] = {
        "connectivity": _probe(store.ping),
        "total_submissions": _probe(store.count_total),
        "recent_submissions": _probe(lambda: store.count_created_since(recent_since)),
        "missing_required_fields": _probe(store.count_missing_required),
        "stale_submissions": _probe(lambda: store.count_created_before(retention_cutoff)),
    }

    failed = [name for name, result in checks.items() if result.status == "failed"]
    report = HealthReport(
        status="unhealthy" if failed else "healthy",
        timestamp=now,
        checks=checks,
    )

    logger.info("Database check results: %s", json.dumps(report.model_dump(mode="json"), indent=2))
    if failed:
        logger.error("Database health check failed: %s", ", ".join(failed))

    return report
