"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Validation messages are written for display next to the form field.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, StrictBool, field_validator
from pydantic_core import PydanticCustomError


# ============================================================
# ENUMS
# ============================================================

class ExperienceStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


StatusFilter = Literal["all", "pending", "approved", "rejected"]

MIN_TEXT_LENGTH = 10
ANONYMOUS_NAME = "Anonymous"


# ============================================================
# FIELD RULES (shared by create and update)
# ============================================================

REQUIRED_MESSAGES = {
    "student_name": "Student name is required",
    "company": "Company name is required",
    "position": "Position is required",
}

LONG_TEXT_MESSAGES = {
    "interview_questions": "Please provide interview questions (minimum 10 characters)",
    "advice_tips": "Please provide advice/tips (minimum 10 characters)",
}


def _check_required_text(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise PydanticCustomError("required", REQUIRED_MESSAGES[field])
    return value.strip()


def _check_long_text(value: Optional[str], field: str) -> str:
    if value is None or len(value) < MIN_TEXT_LENGTH:
        raise PydanticCustomError("too_short", LONG_TEXT_MESSAGES[field])
    return value


def _check_linkedin_url(value: Optional[HttpUrl]) -> HttpUrl:
    """HttpUrl has already checked the URL is well-formed."""
    if value is None:
        raise PydanticCustomError("url", "Must be a valid LinkedIn URL")
    if "linkedin.com" not in str(value):
        raise PydanticCustomError("linkedin_url", "Must be a LinkedIn URL")
    return value


# ============================================================
# SUBMISSION SCHEMAS
# ============================================================

class InterviewDate(BaseModel):
    label: str
    date: str


class SubmissionCreate(BaseModel):
    """Public submission form. consent_given is checked here and never stored."""

    student_name: str
    linkedin_url: HttpUrl
    company: str
    position: str
    interview_dates: List[InterviewDate] = []
    phone_screens: int = Field(0, ge=0)
    technical_interviews: int = Field(0, ge=0)
    behavioral_interviews: int = Field(0, ge=0)
    other_interviews: int = Field(0, ge=0)
    interview_questions: str
    advice_tips: str
    is_anonymous: bool = False
    consent_given: StrictBool

    @field_validator("student_name", "company", "position")
    @classmethod
    def required_text(cls, value, info):
        return _check_required_text(value, info.field_name)

    @field_validator("interview_questions", "advice_tips")
    @classmethod
    def long_text(cls, value, info):
        return _check_long_text(value, info.field_name)

    @field_validator("linkedin_url")
    @classmethod
    def linkedin_url_rule(cls, value):
        return _check_linkedin_url(value)

    @field_validator("consent_given")
    @classmethod
    def consent_required(cls, value):
        if value is not True:
            raise PydanticCustomError("consent_required", "You must give consent to proceed")
        return value

    def to_record(self) -> Dict[str, Any]:
        """Normalized values ready for insertion (consent dropped)."""
        return self.model_dump(mode="json", exclude={"consent_given"})


class ExperienceUpdate(BaseModel):
    """
    Admin edit. Only the fields present in the body are applied.
    status may be set to any valid value here.
    """

    model_config = ConfigDict(extra="forbid")

    id: Optional[str] = None
    student_name: Optional[str] = None
    linkedin_url: Optional[HttpUrl] = None
    company: Optional[str] = None
    position: Optional[str] = None
    interview_dates: Optional[List[InterviewDate]] = None
    phone_screens: Optional[int] = Field(None, ge=0)
    technical_interviews: Optional[int] = Field(None, ge=0)
    behavioral_interviews: Optional[int] = Field(None, ge=0)
    other_interviews: Optional[int] = Field(None, ge=0)
    interview_questions: Optional[str] = None
    advice_tips: Optional[str] = None
    is_anonymous: Optional[bool] = None
    status: Optional[ExperienceStatus] = None

    @field_validator("student_name", "company", "position")
    @classmethod
    def required_text(cls, value, info):
        return _check_required_text(value, info.field_name)

    @field_validator("interview_questions", "advice_tips")
    @classmethod
    def long_text(cls, value, info):
        return _check_long_text(value, info.field_name)

    @field_validator("linkedin_url")
    @classmethod
    def linkedin_url_rule(cls, value):
        return _check_linkedin_url(value)

    @field_validator(
        "interview_dates", "phone_screens", "technical_interviews",
        "behavioral_interviews", "other_interviews", "is_anonymous", "status",
    )
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise PydanticCustomError("not_null", "Field cannot be null")
        return value

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly sent by the client, minus the id."""
        return self.model_dump(mode="json", exclude_unset=True, exclude={"id"})


# ============================================================
# RESPONSE SCHEMAS
# ============================================================

class ExperienceResponse(BaseModel):
    """Full record as the admin sees it."""

    id: str
    student_name: str
    linkedin_url: str
    company: str
    position: str
    interview_dates: List[InterviewDate] = []
    phone_screens: int = 0
    technical_interviews: int = 0
    behavioral_interviews: int = 0
    other_interviews: int = 0
    interview_questions: str
    advice_tips: str
    is_anonymous: bool = False
    status: ExperienceStatus
    created_at: datetime
    updated_at: datetime


class PublicExperience(ExperienceResponse):
    """Record as the public sees it; linkedin_url is hidden for anonymous posts."""

    linkedin_url: Optional[str] = None


class SubmissionResponse(BaseModel):
    message: str
    data: ExperienceResponse


class PublicExperienceList(BaseModel):
    data: List[PublicExperience]


class ExperienceList(BaseModel):
    data: List[ExperienceResponse]


class StatusCounts(BaseModel):
    pending: int
    approved: int
    rejected: int
    total: int


class StatsResponse(BaseModel):
    data: StatusCounts


# ============================================================
# HEALTH SCHEMAS
# ============================================================

class ProbeResult(BaseModel):
    status: Literal["passed", "failed"]
    count: Optional[int] = None
    error: Optional[str] = None


class HealthReport(BaseModel):
    success: bool = True
    status: Literal["healthy", "unhealthy"]
    timestamp: datetime
    checks: Dict[str, ProbeResult]


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
