import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from experience_board.core.config import Settings

logger = logging.getLogger(__name__)

# Column types chosen so the same DDL runs on PostgreSQL and SQLite
SCHEMA_SQL = """
    CREATE TABLE IF NOT EXISTS interview_experiences (
        id VARCHAR(36) PRIMARY KEY,
        student_name TEXT NOT NULL,
        linkedin_url TEXT NOT NULL,
        company TEXT NOT NULL,
        position TEXT NOT NULL,
        interview_dates JSON NOT NULL,
        phone_screens INTEGER NOT NULL DEFAULT 0,
        technical_interviews INTEGER NOT NULL DEFAULT 0,
        behavioral_interviews INTEGER NOT NULL DEFAULT 0,
        other_interviews INTEGER NOT NULL DEFAULT 0,
        interview_questions TEXT NOT NULL,
        advice_tips TEXT NOT NULL,
        is_anonymous BOOLEAN NOT NULL DEFAULT FALSE,
        status VARCHAR(16) NOT NULL DEFAULT 'pending'
            CHECK (status IN ('pending', 'approved', 'rejected')),
        created_at TIMESTAMP WITH TIME ZONE NOT NULL,
        updated_at TIMESTAMP WITH TIME ZONE NOT NULL
    )
"""

INDEX_SQL = [
    "CREATE INDEX IF NOT EXISTS idx_experiences_status_created "
    "ON interview_experiences (status, created_at)",
]


def create_db_engine(settings: Settings) -> Engine:
    """
    Create the process-wide engine (connection pool).
    pool_size: connections kept ready
    max_overflow: extra connections allowed under load
    """
    return create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.debug  # Log SQL queries in debug mode
    )


def init_schema(engine: Engine) -> None:
    """Create the interview_experiences table and its index if missing."""
    with engine.begin() as conn:
        conn.execute(text(SCHEMA_SQL))
        for statement in INDEX_SQL:
            conn.execute(text(statement))
    logger.info("Schema for interview_experiences is ready")


def check_db_connection(engine: Engine) -> bool:
    """
    Test if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with engine.connect() as conn:
            return conn.execute(text("SELECT 1")).scalar() == 1
    except Exception as e:
        logger.warning("Database connection failed: %s", e)
        return False
