"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from experience_board.api.routes.submission_routes import router as submission_router
from experience_board.api.routes.experience_routes import router as experience_router
from experience_board.api.routes.admin_routes import router as admin_router
from experience_board.api.routes.cron_routes import router as cron_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(submission_router)
api_router.include_router(experience_router)
api_router.include_router(admin_router)
api_router.include_router(cron_router)
