#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the database is reachable and see the same
report the cron health check produces.
Usage: python scripts/check_connections.py
"""
import sys

from experience_board.core.config import get_settings
from experience_board.db.postgres import check_db_connection, create_db_engine
from experience_board.db.store import ExperienceStore
from experience_board.services.health import run_database_checks


def main():
    settings = get_settings()
    print("=" * 50)
    print("INTERVIEW EXPERIENCE BOARD - CONNECTION CHECK")
    print("=" * 50)

    engine = create_db_engine(settings)
    host = engine.url.render_as_string(hide_password=True)

    print("\n[1] Testing database...")
    print(f"    URL: {host}")
    if not check_db_connection(engine):
        print("    ❌ Database: FAILED")
        return 1
    print("    ✅ Database: CONNECTED")

    print("\n[2] Running health probes...")
    report = run_database_checks(ExperienceStore(engine), settings)
    for name, result in report.checks.items():
        mark = "✅" if result.status == "passed" else "❌"
        detail = result.count if result.error is None else result.error
        print(f"    {mark} {name}: {detail}")

    print("\n[3] Shared secrets...")
    print(f"    Admin secret: {'set' if settings.admin_password else '⚠️  NOT SET (admin locked)'}")
    print(f"    Cron secret:  {'set' if settings.cron_secret else '⚠️  NOT SET (cron locked)'}")

    print("\n" + "=" * 50)
    print(f"Overall: {report.status.upper()}")
    print("=" * 50)
    return 0 if report.status == "healthy" else 1


if __name__ == "__main__":
    sys.exit(main())
