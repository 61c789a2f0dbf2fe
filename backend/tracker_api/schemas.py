"""Pydantic request/response schemas used by the API.

Write schemas mirror the table columns a client may set. Server-managed
columns (creation and review/attempt stamps, `resolved_at`) are not part
of any write schema. Incoming datetimes are stored as UTC; values
without an offset are read as UTC. `id` is ignored on create and must
match the path on update.
"""

from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from .models import as_utc, utcnow


class TopicIn(BaseModel):
    """Fields shared by every topic write payload."""
    id: Optional[int] = None
    title: str
    category: str = ""
    difficulty: str = ""
    status: str = "Learning"
    notes: Optional[str] = None
    key_concepts: Optional[str] = None
    lesson: Optional[str] = None
    resources: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    is_favorite: bool = False
    row_version: Optional[int] = None


class StudyTopicIn(TopicIn):
    code_example: Optional[str] = None


class CSharpTopicIn(StudyTopicIn):
    dot_net_version: Optional[str] = None


class DesignPatternTopicIn(StudyTopicIn):
    use_cases: Optional[str] = None


class EntityFrameworkTopicIn(StudyTopicIn):
    problem_scenario: Optional[str] = None
    ef_version: Optional[str] = None


class AzureTopicIn(StudyTopicIn):
    azure_service: Optional[str] = None


class SystemDesignTopicIn(TopicIn):
    confidence_level: Optional[int] = Field(default=None, ge=1, le=5)
    diagram_url: Optional[str] = None


class StudySessionIn(BaseModel):
    id: Optional[int] = None
    type: str = ""
    topic: str = ""
    duration_minutes: int = Field(default=0, ge=0)
    productivity_score: int = Field(default=0, ge=0, le=5)
    notes: Optional[str] = None
    session_date: datetime = Field(default_factory=utcnow)
    row_version: Optional[int] = None

    @field_validator("session_date")
    @classmethod
    def _session_date_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class DSAProblemIn(BaseModel):
    id: Optional[int] = None
    title: str
    category: str = ""
    difficulty: str = ""
    platform: str = ""
    problem_url: Optional[str] = None
    leetcode_number: Optional[int] = None
    status: str = "NotStarted"
    time_taken_minutes: int = Field(default=0, ge=0)
    solved_optimally: bool = False
    notes: Optional[str] = None
    solution_approach: Optional[str] = None
    time_complexity: Optional[str] = None
    space_complexity: Optional[str] = None
    attempt_count: int = Field(default=1, ge=0)
    tags: List[str] = Field(default_factory=list)
    is_favorite: bool = False
    next_review_date: Optional[datetime] = None
    row_version: Optional[int] = None

    @field_validator("next_review_date")
    @classmethod
    def _next_review_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class MockInterviewIn(BaseModel):
    id: Optional[int] = None
    type: str = ""
    company: str = ""
    interview_date: datetime = Field(default_factory=utcnow)
    duration_minutes: int = Field(default=0, ge=0)
    overall_score: int = Field(default=0, ge=0, le=10)
    communication_score: int = Field(default=0, ge=0, le=10)
    problem_solving_score: int = Field(default=0, ge=0, le=10)
    technical_score: int = Field(default=0, ge=0, le=10)
    feedback: Optional[str] = None
    strengths: Optional[str] = None
    areas_to_improve: Optional[str] = None
    questions_asked: Optional[str] = None
    passed: bool = False
    row_version: Optional[int] = None

    @field_validator("interview_date")
    @classmethod
    def _interview_date_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class WeakAreaIn(BaseModel):
    """`is_resolved` is writable; `resolved_at` is only set by the resolve operation."""
    id: Optional[int] = None
    area: str
    category: str = ""
    severity: str = "Medium"
    description: Optional[str] = None
    improvement_plan: Optional[str] = None
    is_resolved: bool = False
    row_version: Optional[int] = None


class AttemptIn(BaseModel):
    """Payload for recording one attempt at a practice problem."""
    time_taken_minutes: int = Field(default=0, ge=0)
    solved_optimally: bool = False
    status: str = "Solved"
    notes: Optional[str] = None


class ReviewIn(BaseModel):
    """Payload for recording a system design review."""
    confidence_level: int = Field(ge=1, le=5)
    status: str = "Learning"
    notes: Optional[str] = None


class ClearOut(BaseModel):
    deleted: int
    message: str


class SeedOut(BaseModel):
    created: int
    message: str


class ResourceInfo(BaseModel):
    """Capabilities advertised for one resource by `GET /api/resources`."""
    key: str
    label: str
    path: str
    favorites: bool
    clearable: bool
    categories: bool
    seedable: bool
    seed_mode: Optional[str] = None
    reviews: bool
    favorites_view: bool
    attempts: bool
    resolves: bool
