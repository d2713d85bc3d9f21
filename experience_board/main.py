"""
Interview Experience Board - Main Application

FastAPI backend with:
- PostgreSQL for interview experience records
- Public submission and browsing
- Shared-secret admin moderation and CSV export
- Cron-triggered database health check

Run: uvicorn experience_board.main:app --reload
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from experience_board import __version__
from experience_board.api.dependencies import get_store
from experience_board.api.routes import api_router
from experience_board.core.config import Settings, get_settings
from experience_board.core.errors import register_exception_handlers
from experience_board.core.logging import configure_logging
from experience_board.db.postgres import check_db_connection, create_db_engine, init_schema
from experience_board.db.store import ExperienceStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Interview Experience Board",
        description="""
        Students share interview experiences; a moderator reviews them.

        ## Features
        - **Submissions**: Public form, stored as pending until reviewed
        - **Experiences**: Approved entries with keyword/company search
        - **Admin**: List, edit, approve, reject, delete, export CSV
        - **Cron**: Scheduled read-only database health check
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    # Startup event
    @app.on_event("startup")
    def startup_event():
        """Create the connection pool and the store shared by all requests."""
        engine = create_db_engine(settings)
        app.state.store = ExperienceStore(engine)
        if settings.auto_create_schema:
            try:
                init_schema(engine)
            except Exception as e:
                logger.warning("Schema initialization failed: %s", e)

    @app.on_event("shutdown")
    def shutdown_event():
        store = getattr(app.state, "store", None)
        if store is not None:
            store.engine.dispose()

    @app.get("/health", tags=["Health"])
    def health_check(store: ExperienceStore = Depends(get_store)):
        """Liveness check with database connectivity."""
        return {
            "status": "healthy",
            "database": "connected" if check_db_connection(store.engine) else "disconnected",
        }

    return app


app = create_app()
