"""
Moderation State Machine

    pending --approve--> approved
    pending --reject---> rejected

approve/reject are strict: repeating the action a record is already in
is accepted (status unchanged, still written and logged), anything else
raises InvalidTransitionError.

edit() is the permissive path used by the admin edit form: it may set
status to any valid value alongside other field changes.

Callers are responsible for authenticating the moderator first.
"""

import logging
from typing import Any, Dict

from experience_board.core.errors import InvalidTransitionError, NotFoundError
from experience_board.db.store import ExperienceStore
from experience_board.schemas.schemas import ExperienceStatus

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {
    ExperienceStatus.pending: {ExperienceStatus.approved, ExperienceStatus.rejected},
    ExperienceStatus.approved: {ExperienceStatus.approved},
    ExperienceStatus.rejected: {ExperienceStatus.rejected},
}


def check_transition(current: ExperienceStatus, target: ExperienceStatus) -> None:
    """Raise InvalidTransitionError unless current -> target is allowed."""
    if target not in ALLOWED_TRANSITIONS[current]:
        raise InvalidTransitionError(
            f"Cannot change status from {current.value} to {target.value}"
        )


def _transition(store: ExperienceStore, record_id: str, target: ExperienceStatus) -> Dict[str, Any]:
    record = store.get(record_id)
    if record is None:
        raise NotFoundError()

    current = ExperienceStatus(record["status"])
    check_transition(current, target)

    updated = store.update(record_id, {"status": target.value})
    logger.info(
        "Moderation: submission %s %s -> %s", record_id, current.value, target.value
    )
    return updated


def approve(store: ExperienceStore, record_id: str) -> Dict[str, Any]:
    return _transition(store, record_id, ExperienceStatus.approved)


def reject(store: ExperienceStore, record_id: str) -> Dict[str, Any]:
    return _transition(store, record_id, ExperienceStatus.rejected)


def edit(store: ExperienceStore, record_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
    """Apply a free-form field edit, status included."""
    updated = store.update(record_id, changes)
    logger.info(
        "Moderation: submission %s edited (%s), status=%s",
        record_id, ", ".join(sorted(changes)), updated["status"],
    )
    return updated


def remove(store: ExperienceStore, record_id: str) -> None:
    store.delete(record_id)
    logger.info("Moderation: submission %s deleted", record_id)
