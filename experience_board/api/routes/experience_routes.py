"""
Experience Routes

GET /experiences - Browse approved experiences with keyword/company filters
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from experience_board.api.dependencies import get_store
from experience_board.db.store import ExperienceStore
from experience_board.schemas.schemas import PublicExperienceList
from experience_board.services.masking import mask_for_public

router = APIRouter(prefix="/experiences", tags=["Experiences"])


@router.get("", response_model=PublicExperienceList)
def list_experiences(
    keyword: Optional[str] = Query(None, description="Search questions, tips, position and company"),
    company: Optional[str] = Query(None, description="Filter by company name"),
    store: ExperienceStore = Depends(get_store),
):
    """List approved experiences, newest first. Anonymous posts are masked."""
    records = store.list_approved(keyword=keyword, company=company)
    return {"data": [mask_for_public(r) for r in records]}
