"""
Submission Routes

POST /submissions - Submit an interview experience (public, stored as pending)
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from experience_board.api.dependencies import get_store
from experience_board.db.store import ExperienceStore
from experience_board.schemas.schemas import SubmissionResponse
from experience_board.services.validation import validate_submission

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/submissions", tags=["Submissions"])


@router.post("", response_model=SubmissionResponse, status_code=201)
def create_submission(
    payload: Dict[str, Any] = Body(..., description="Submission form fields"),
    store: ExperienceStore = Depends(get_store),
):
    """
    Submit an interview experience.

    Every field is validated before anything touches the database;
    all failures are returned together. consent_given must be true
    and is not stored. The entry is published only after review.
    """
    submission = validate_submission(payload)
    record = store.create(submission.to_record())
    logger.info("New submission %s for %s", record["id"], record["company"])

    return {
        "message": "Submission successful! Your entry will be reviewed before being published.",
        "data": record,
    }
