"""
Schemas module - Request/Response schemas for API endpoints.
"""
from experience_board.schemas.schemas import (
    ExperienceStatus, InterviewDate, SubmissionCreate, ExperienceUpdate,
    ExperienceResponse, PublicExperience, HealthReport, ProbeResult,
)

__all__ = [
    "ExperienceStatus",
    "InterviewDate",
    "SubmissionCreate",
    "ExperienceUpdate",
    "ExperienceResponse",
    "PublicExperience",
    "HealthReport",
    "ProbeResult",
]
