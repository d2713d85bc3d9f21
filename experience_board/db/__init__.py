"""
Database module - PostgreSQL engine and the experience record store.
"""
from experience_board.db.postgres import create_db_engine, init_schema, check_db_connection
from experience_board.db.store import ExperienceStore

__all__ = [
    "create_db_engine",
    "init_schema",
    "check_db_connection",
    "ExperienceStore",
]
