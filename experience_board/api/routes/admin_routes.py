"""
Admin Routes (all require Authorization: Bearer <ADMIN_PASSWORD>)

GET /admin/submissions - List submissions, optionally by status
GET /admin/stats - Submission counts per status
PATCH /admin/submissions - Edit a submission (any field, status included)
POST /admin/submissions/{id}/approve - Approve a pending submission
POST /admin/submissions/{id}/reject - Reject a pending submission
DELETE /admin/submissions?id= - Delete a submission
GET /admin/export - Download approved submissions as CSV
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import Response

from experience_board.api.dependencies import get_store
from experience_board.core.auth import require_admin
from experience_board.db.store import ExperienceStore
from experience_board.schemas.schemas import (
    ExperienceList, ExperienceUpdate, MessageResponse, StatsResponse,
    StatusFilter, SubmissionResponse
)
from experience_board.services import moderation
from experience_board.services.exporter import build_csv, export_filename
from experience_board.services.validation import validate_update

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


@router.get("/submissions", response_model=ExperienceList)
def list_submissions(
    status: StatusFilter = Query("all", description="all, pending, approved or rejected"),
    store: ExperienceStore = Depends(get_store),
):
    """List submissions regardless of status, newest first."""
    records = store.list_all(None if status == "all" else status)
    return {"data": records}


@router.get("/stats", response_model=StatsResponse)
def submission_stats(store: ExperienceStore = Depends(get_store)):
    """Counts for the moderation dashboard."""
    return {"data": store.count_by_status()}


async def update_body(request: Request) -> ExperienceUpdate:
    """
    Read the edit body inside a dependency so it is only parsed after
    require_admin has accepted the request.
    """
    return validate_update(await request.body())


@router.patch("/submissions", response_model=SubmissionResponse)
def update_submission(
    data: ExperienceUpdate = Depends(update_body),
    store: ExperienceStore = Depends(get_store),
):
    """Update a submission. Only provided fields are updated."""
    if not data.id:
        raise HTTPException(status_code=400, detail="ID is required")

    changes = data.changes()
    if not changes:
        raise HTTPException(status_code=400, detail="No fields to update")

    record = moderation.edit(store, data.id, changes)
    return {"message": "Updated successfully", "data": record}


@router.post("/submissions/{record_id}/approve", response_model=SubmissionResponse)
def approve_submission(record_id: str, store: ExperienceStore = Depends(get_store)):
    """Approve a pending submission. Approving it again is a no-op."""
    record = moderation.approve(store, record_id)
    return {"message": "Submission approved", "data": record}


@router.post("/submissions/{record_id}/reject", response_model=SubmissionResponse)
def reject_submission(record_id: str, store: ExperienceStore = Depends(get_store)):
    """Reject a pending submission. Rejecting it again is a no-op."""
    record = moderation.reject(store, record_id)
    return {"message": "Submission rejected", "data": record}


@router.delete("/submissions", response_model=MessageResponse)
def delete_submission(
    id: Optional[str] = Query(None, description="Submission id"),
    store: ExperienceStore = Depends(get_store),
):
    """Delete a submission permanently."""
    if not id:
        raise HTTPException(status_code=400, detail="ID is required")

    moderation.remove(store, id)
    return {"message": "Deleted successfully"}


@router.get("/export")
def export_submissions(store: ExperienceStore = Depends(get_store)):
    """Download approved submissions as CSV. 404 when there is nothing to export."""
    records = store.list_approved(error_message="Failed to fetch data for export")
    csv_text = build_csv(records)
    today = datetime.now(timezone.utc).date()

    return Response(
        content=csv_text,
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename(today)}"'
        },
    )
