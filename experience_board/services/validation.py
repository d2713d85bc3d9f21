"""
Submission Validator - turns an untrusted payload into a normalized
submission, or raises with every violated field listed.
Admin edit bodies go through the same error formatting.
"""

from typing import Any, Dict

from pydantic import ValidationError

from experience_board.core.errors import SubmissionValidationError, format_validation_issues
from experience_board.schemas.schemas import ExperienceUpdate, SubmissionCreate


def validate_submission(payload: Dict[str, Any]) -> SubmissionCreate:
    """
    Validate a raw submission dict. Nothing is persisted here.

    Raises:
        SubmissionValidationError: with one detail per failing field
    """
    if not isinstance(payload, dict):
        raise SubmissionValidationError(
            [{"field": "body", "message": "Submission must be a JSON object", "type": "dict_type"}]
        )
    try:
        return SubmissionCreate.model_validate(payload)
    except ValidationError as exc:
        raise SubmissionValidationError(format_validation_issues(exc.errors())) from exc


def validate_update(raw_body: bytes) -> ExperienceUpdate:
    """
    Parse and validate an admin edit body (raw JSON bytes).

    Raises:
        SubmissionValidationError: malformed JSON or invalid field values
    """
    try:
        return ExperienceUpdate.model_validate_json(raw_body or b"")
    except ValidationError as exc:
        raise SubmissionValidationError(format_validation_issues(exc.errors())) from exc
