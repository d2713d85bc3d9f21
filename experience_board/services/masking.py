"""
Anonymous display masking for the public listing.
"""

from typing import Any, Dict

from experience_board.schemas.schemas import ANONYMOUS_NAME


def mask_for_public(record: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy with the name and LinkedIn link hidden if the post is anonymous."""
    if not record.get("is_anonymous"):
        return dict(record)
    masked = dict(record)
    masked["student_name"] = ANONYMOUS_NAME
    masked["linkedin_url"] = None
    return masked
