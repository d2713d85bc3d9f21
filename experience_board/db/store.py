"""
Experience Record Store - CRUD over the interview_experiences table.

One ExperienceStore wraps the process-wide engine and is handed to
route handlers through a dependency. Each public method runs in its
own session: commit on success, rollback on failure. SQLAlchemy errors
are re-raised as StoreError carrying a caller-safe message.

SQL runs on PostgreSQL and SQLite; only the case-insensitive match
differs (ILIKE on PostgreSQL).
"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, bindparam, column, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from experience_board.core.errors import NotFoundError, StoreError

logger = logging.getLogger(__name__)

TABLE = "interview_experiences"

# Result columns in SELECT order, typed so JSON/bool/datetime come back as Python values
EXPERIENCE_COLUMNS = [
    column("id", String),
    column("student_name", String),
    column("linkedin_url", String),
    column("company", String),
    column("position", String),
    column("interview_dates", JSON),
    column("phone_screens", Integer),
    column("technical_interviews", Integer),
    column("behavioral_interviews", Integer),
    column("other_interviews", Integer),
    column("interview_questions", String),
    column("advice_tips", String),
    column("is_anonymous", Boolean),
    column("status", String),
    column("created_at", DateTime(timezone=True)),
    column("updated_at", DateTime(timezone=True)),
]
COLUMN_NAMES = [c.name for c in EXPERIENCE_COLUMNS]

# Fields a submission provides; id/status/timestamps are set here
INSERT_FIELDS = [
    "student_name", "linkedin_url", "company", "position", "interview_dates",
    "phone_screens", "technical_interviews", "behavioral_interviews",
    "other_interviews", "interview_questions", "advice_tips", "is_anonymous",
]
UPDATABLE_FIELDS = INSERT_FIELDS + ["status"]

INSERT_DEFAULTS = {
    "interview_dates": [],
    "phone_screens": 0,
    "technical_interviews": 0,
    "behavioral_interviews": 0,
    "other_interviews": 0,
    "is_anonymous": False,
}

REQUIRED_TEXT_FIELDS = [
    "student_name", "linkedin_url", "company", "position",
    "interview_questions", "advice_tips",
]

KEYWORD_FIELDS = ["interview_questions", "advice_tips", "position", "company"]

# Bind types for parameters that need conversion on the way in
TYPED_PARAMS = {
    "interview_dates": JSON,
    "is_anonymous": Boolean,
    "created_at": DateTime(timezone=True),
    "updated_at": DateTime(timezone=True),
    "since": DateTime(timezone=True),
    "before": DateTime(timezone=True),
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _like_pattern(term: str) -> str:
    """Case-folded %term% pattern with LIKE wildcards escaped."""
    escaped = term.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def contains_clause(dialect_name: str, field: str, param: str) -> str:
    """
    Case-insensitive substring match against :param (a _like_pattern value).
    PostgreSQL uses ILIKE, which folds non-ASCII letters too. SQLite has no
    ILIKE and its LOWER() only folds ASCII.
    """
    if dialect_name == "postgresql":
        return f"{field} ILIKE :{param} ESCAPE '\\'"
    return f"LOWER({field}) LIKE :{param} ESCAPE '\\'"


def _statement(sql: str, params: Dict[str, Any]):
    """Build a text() statement, attaching bind types for known params."""
    stmt = text(sql)
    typed = [bindparam(name, type_=TYPED_PARAMS[name]) for name in params if name in TYPED_PARAMS]
    if typed:
        stmt = stmt.bindparams(*typed)
    return stmt


def _select_sql(where: str = "") -> str:
    sql = f"SELECT {', '.join(COLUMN_NAMES)} FROM {TABLE}"
    if where:
        sql += f" WHERE {where}"
    return sql


class ExperienceStore:
    """
    Persistent table of submissions. Records are plain dicts keyed by
    column name.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    @contextmanager
    def _session(self, error_message: str):
        """
        Session scope for one store operation.
        Usage:
            with self._session("Failed to ...") as db:
                db.execute(text("SELECT ..."))
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("%s: %s", error_message, exc)
            raise StoreError(error_message) from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def _fetch(self, db, sql: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        params = params or {}
        stmt = _statement(sql, params).columns(*EXPERIENCE_COLUMNS)
        result = db.execute(stmt, params)
        return [dict(row._mapping) for row in result.fetchall()]

    def _scalar(self, sql: str, params: Optional[Dict[str, Any]] = None,
                error_message: str = "Failed to query submissions") -> int:
        params = params or {}
        with self._session(error_message) as db:
            value = db.execute(_statement(sql, params), params).scalar()
        return int(value or 0)

    # ============================================================
    # WRITES
    # ============================================================

    def create(self, data: Dict[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Insert a new submission. Status is always 'pending' regardless
        of what the caller passes.
        """
        now = now or _utcnow()
        params = {field: data.get(field) for field in INSERT_FIELDS}
        for field, default in INSERT_DEFAULTS.items():
            if params[field] is None:
                params[field] = default
        params.update({"id": str(uuid4()), "created_at": now, "updated_at": now})

        columns = ["id"] + INSERT_FIELDS + ["status", "created_at", "updated_at"]
        values = [f":{name}" if name != "status" else "'pending'" for name in columns]
        sql = f"INSERT INTO {TABLE} ({', '.join(columns)}) VALUES ({', '.join(values)})"

        with self._session("Failed to submit experience") as db:
            db.execute(_statement(sql, params), params)
            rows = self._fetch(db, _select_sql("id = :id"), {"id": params["id"]})
        return rows[0]

    def update(self, record_id: str, fields: Dict[str, Any],
               now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Apply a partial update. Only whitelisted columns can be set;
        updated_at is always refreshed.
        Raises NotFoundError if no record has this id.
        """
        unknown = set(fields) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        params = dict(fields)
        params.update({"id": record_id, "updated_at": now or _utcnow()})
        assignments = [f"{field} = :{field}" for field in fields]
        assignments.append("updated_at = :updated_at")
        sql = f"UPDATE {TABLE} SET {', '.join(assignments)} WHERE id = :id"

        with self._session("Failed to update submission") as db:
            result = db.execute(_statement(sql, params), params)
            if result.rowcount == 0:
                raise NotFoundError()
            rows = self._fetch(db, _select_sql("id = :id"), {"id": record_id})
        return rows[0]

    def delete(self, record_id: str) -> None:
        """Remove a record. Raises NotFoundError if no record has this id."""
        with self._session("Failed to delete submission") as db:
            result = db.execute(text(f"DELETE FROM {TABLE} WHERE id = :id"), {"id": record_id})
            if result.rowcount == 0:
                raise NotFoundError()

    # ============================================================
    # READS
    # ============================================================

    def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        with self._session("Failed to fetch submission") as db:
            rows = self._fetch(db, _select_sql("id = :id"), {"id": record_id})
        return rows[0] if rows else None

    def list_approved(self, keyword: Optional[str] = None, company: Optional[str] = None,
                      error_message: str = "Failed to fetch experiences") -> List[Dict[str, Any]]:
        """
        Approved records, newest first.
        company: case-insensitive substring of company
        keyword: case-insensitive substring of any KEYWORD_FIELDS column
        Both filters combine with AND.
        """
        clauses = ["status = 'approved'"]
        params: Dict[str, Any] = {}

        if company:
            clauses.append(contains_clause(self.engine.dialect.name, "company", "company"))
            params["company"] = _like_pattern(company)
        if keyword:
            matches = [contains_clause(self.engine.dialect.name, field, "keyword") for field in KEYWORD_FIELDS]
            clauses.append(f"({' OR '.join(matches)})")
            params["keyword"] = _like_pattern(keyword)

        sql = _select_sql(" AND ".join(clauses)) + " ORDER BY created_at DESC"
        with self._session(error_message) as db:
            return self._fetch(db, sql, params)

    def list_all(self, status: Optional[str] = None) -> List[Dict[str, Any]]:
        """Every record (or only one status), newest first."""
        params: Dict[str, Any] = {}
        where = ""
        if status:
            where = "status = :status"
            params["status"] = status

        sql = _select_sql(where) + " ORDER BY created_at DESC"
        with self._session("Failed to fetch submissions") as db:
            return self._fetch(db, sql, params)

    def count_by_status(self) -> Dict[str, int]:
        """Counts per status plus total. Missing statuses count as 0."""
        counts = {"pending": 0, "approved": 0, "rejected": 0}
        with self._session("Failed to fetch submission stats") as db:
            result = db.execute(text(f"SELECT status, COUNT(*) FROM {TABLE} GROUP BY status"))
            for status_value, count in result.fetchall():
                counts[status_value] = int(count)
        counts["total"] = sum(counts.values())
        return counts

    # ============================================================
    # HEALTH PROBES (read-only)
    # ============================================================

    def ping(self) -> None:
        """Touch the table; raises StoreError if unreachable."""
        with self._session("Database connectivity check failed") as db:
            db.execute(text(f"SELECT id FROM {TABLE} LIMIT 1")).fetchall()

    def count_total(self) -> int:
        return self._scalar(f"SELECT COUNT(*) FROM {TABLE}")

    def count_created_since(self, since: datetime) -> int:
        return self._scalar(
            f"SELECT COUNT(*) FROM {TABLE} WHERE created_at >= :since", {"since": since}
        )

    def count_created_before(self, before: datetime) -> int:
        return self._scalar(
            f"SELECT COUNT(*) FROM {TABLE} WHERE created_at < :before", {"before": before}
        )

    def count_missing_required(self) -> int:
        """Records with a null in any required text column."""
        nulls = " OR ".join(f"{field} IS NULL" for field in REQUIRED_TEXT_FIELDS)
        return self._scalar(f"SELECT COUNT(*) FROM {TABLE} WHERE {nulls}")
