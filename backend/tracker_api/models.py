"""SQLModel data models.

Each study resource maps to its own table. Topic tables share the
columns declared on `TopicBase`; the concrete classes only add their
per-technology extras. No table references another.
"""

from typing import List, Optional
from sqlmodel import SQLModel, Field
from sqlalchemy import JSON
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Return `value` as an aware UTC datetime; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TopicBase(SQLModel):
    """Columns shared by every topic table.

    `row_version` starts at 1 and is bumped by every write; guarded
    updates compare it to detect concurrent modification.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    category: str = Field(default="", index=True)
    difficulty: str = ""
    status: str = Field(default="Learning", index=True)
    notes: Optional[str] = None
    key_concepts: Optional[str] = None
    lesson: Optional[str] = None
    resources: Optional[str] = None
    tags: List[str] = Field(default_factory=list, sa_type=JSON)
    is_favorite: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    last_reviewed_at: Optional[datetime] = None
    row_version: int = 1


class StudyTopicBase(TopicBase):
    """Topics whose lessons ship a code sample."""
    code_example: Optional[str] = None


class AspNetCoreTopic(StudyTopicBase, table=True):
    pass


class CSharpTopic(StudyTopicBase, table=True):
    dot_net_version: Optional[str] = None


class DesignPatternTopic(StudyTopicBase, table=True):
    use_cases: Optional[str] = None


class EntityFrameworkTopic(StudyTopicBase, table=True):
    problem_scenario: Optional[str] = None
    ef_version: Optional[str] = None


class OOPTopic(StudyTopicBase, table=True):
    pass


class AzureTopic(StudyTopicBase, table=True):
    azure_service: Optional[str] = None


class SystemDesignTopic(TopicBase, table=True):
    """A system design topic.

    `confidence_level` (1-5) may be sent on create and update and is
    overwritten by every review.
    """
    confidence_level: Optional[int] = None
    diagram_url: Optional[str] = None


class StudySession(SQLModel, table=True):
    """A logged study session; sessions are never favorited or seeded."""
    id: Optional[int] = Field(default=None, primary_key=True)
    type: str = Field(default="", index=True)
    topic: str = ""
    duration_minutes: int = 0
    productivity_score: int = 0
    notes: Optional[str] = None
    session_date: datetime = Field(default_factory=utcnow, index=True)
    row_version: int = 1


class DSAProblem(SQLModel, table=True):
    """A practice problem with a spaced-repetition review schedule.

    `attempt_count`, `last_attempted_at` and `next_review_date` are moved
    forward by the attempt operation.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    category: str = Field(default="", index=True)
    difficulty: str = Field(default="", index=True)
    platform: str = ""
    problem_url: Optional[str] = None
    leetcode_number: Optional[int] = None
    status: str = Field(default="NotStarted", index=True)
    time_taken_minutes: int = 0
    solved_optimally: bool = False
    notes: Optional[str] = None
    solution_approach: Optional[str] = None
    time_complexity: Optional[str] = None
    space_complexity: Optional[str] = None
    attempt_count: int = 1
    tags: List[str] = Field(default_factory=list, sa_type=JSON)
    is_favorite: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    last_attempted_at: Optional[datetime] = None
    next_review_date: Optional[datetime] = Field(default=None, index=True)
    row_version: int = 1


class MockInterview(SQLModel, table=True):
    """A practice interview; scores are 0-10 with 0 meaning unscored."""
    id: Optional[int] = Field(default=None, primary_key=True)
    type: str = Field(default="", index=True)
    company: str = ""
    interview_date: datetime = Field(default_factory=utcnow, index=True)
    duration_minutes: int = 0
    overall_score: int = 0
    communication_score: int = 0
    problem_solving_score: int = 0
    technical_score: int = 0
    feedback: Optional[str] = None
    strengths: Optional[str] = None
    areas_to_improve: Optional[str] = None
    questions_asked: Optional[str] = None
    passed: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    row_version: int = 1


class WeakArea(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    area: str
    category: str = ""
    severity: str = "Medium"
    description: Optional[str] = None
    improvement_plan: Optional[str] = None
    is_resolved: bool = Field(default=False, index=True)
    identified_at: datetime = Field(default_factory=utcnow)
    resolved_at: Optional[datetime] = None
    row_version: int = 1
