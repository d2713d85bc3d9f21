"""
Interview Experience Board
Students share interview experiences, a moderator reviews them,
and the public browses the approved ones.

Architecture:
- PostgreSQL: single interview_experiences table (source of truth)
- FastAPI: public submission/listing, admin moderation, cron health check
"""

__version__ = "1.0.0"
