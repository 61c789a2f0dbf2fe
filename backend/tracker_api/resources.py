"""Resource registry.

Every HTTP resource is one `ResourceSpec`: a table, its write schema,
the query filters it accepts, its list ordering and the optional
capabilities layered on top of the shared CRUD set (favorites, clear,
categories, seed, reviews, attempts, resolve). The router factory in
`main.py` and `services.ResourceService` read nothing else.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Annotated, Callable, Dict, List, Optional, Type

from fastapi import Query
from pydantic import BaseModel
from sqlalchemy import case, func
from sqlmodel import SQLModel

from . import models, schemas, seed_data
from .models import as_utc

SEED_REPLACE = "replace"
SEED_EMPTY_ONLY = "empty_only"


class TopicFilters:
    """Query parameters accepted by topic listings.

    Empty strings are treated as absent.
    """
    def __init__(self, category: Optional[str] = None, status: Optional[str] = None):
        self.category = category
        self.status = status

    def clauses(self, model) -> list:
        out = []
        if self.category:
            out.append(model.category == self.category)
        if self.status:
            out.append(model.status == self.status)
        return out


class SystemDesignFilters(TopicFilters):
    def __init__(self, category: Optional[str] = None, status: Optional[str] = None, favorite: Optional[bool] = None):
        super().__init__(category, status)
        self.favorite = favorite

    def clauses(self, model) -> list:
        out = super().clauses(model)
        if self.favorite is not None:
            out.append(model.is_favorite == self.favorite)
        return out


class DSAFilters(SystemDesignFilters):
    def __init__(
        self,
        category: Optional[str] = None,
        difficulty: Optional[str] = None,
        status: Optional[str] = None,
        favorite: Optional[bool] = None,
    ):
        super().__init__(category, status, favorite)
        self.difficulty = difficulty

    def clauses(self, model) -> list:
        out = super().clauses(model)
        if self.difficulty:
            out.append(model.difficulty == self.difficulty)
        return out


class SessionFilters:
    """Session type plus an inclusive `from`/`to` window on `session_date`.

    Bounds without an offset are read as UTC.
    """
    def __init__(
        self,
        session_type: Annotated[Optional[str], Query(alias="type")] = None,
        date_from: Annotated[Optional[datetime], Query(alias="from")] = None,
        date_to: Annotated[Optional[datetime], Query(alias="to")] = None,
    ):
        self.session_type = session_type
        self.date_from = as_utc(date_from)
        self.date_to = as_utc(date_to)

    def clauses(self, model) -> list:
        out = []
        if self.session_type:
            out.append(model.type == self.session_type)
        if self.date_from is not None:
            out.append(model.session_date >= self.date_from)
        if self.date_to is not None:
            out.append(model.session_date <= self.date_to)
        return out


class InterviewFilters:
    """Exact interview type; `company` matches any substring."""
    def __init__(
        self,
        interview_type: Annotated[Optional[str], Query(alias="type")] = None,
        company: Optional[str] = None,
    ):
        self.interview_type = interview_type
        self.company = company

    def clauses(self, model) -> list:
        out = []
        if self.interview_type:
            out.append(model.type == self.interview_type)
        if self.company:
            out.append(model.company.contains(self.company))
        return out


class WeakAreaFilters:
    def __init__(self, resolved: Optional[bool] = None):
        self.resolved = resolved

    def clauses(self, model) -> list:
        if self.resolved is None:
            return []
        return [model.is_resolved == self.resolved]


# Orderings always end on the primary key so ties come back in a stable order.

def topic_order(model) -> tuple:
    """Favorites first, then category and title ascending."""
    return (model.is_favorite.desc(), model.category.asc(), model.title.asc(), model.id.asc())


def recency_order(model) -> tuple:
    """Favorites first, then most recently reviewed (or created) first."""
    recency = func.coalesce(model.last_reviewed_at, model.created_at)
    return (model.is_favorite.desc(), recency.desc(), model.id.asc())


def attempt_order(model) -> tuple:
    """Favorites first, then most recently attempted (or created) first."""
    recency = func.coalesce(model.last_attempted_at, model.created_at)
    return (model.is_favorite.desc(), recency.desc(), model.id.asc())


def session_order(model) -> tuple:
    return (model.session_date.desc(), model.id.asc())


def interview_order(model) -> tuple:
    return (model.interview_date.desc(), model.id.asc())


def severity_order(model) -> tuple:
    """High, then Medium, then any other severity; newest first within each."""
    rank = case((model.severity == "High", 0), (model.severity == "Medium", 1), else_=2)
    return (rank.asc(), model.identified_at.desc(), model.id.asc())


def catalogue_order(model) -> tuple:
    return (model.category.asc(), model.title.asc(), model.id.asc())


def review_due_order(model) -> tuple:
    return (model.next_review_date.asc(), model.id.asc())


@dataclass(frozen=True)
class ResourceSpec:
    """One table plus the operations mounted on it.

    `created_field` is stamped on create and seed, `touched_field` on
    every update; either may be None. `reviews` adds the review
    operation, `attempts` the attempt operation and the due-for-review
    view, `resolves` the resolve operation.
    """
    key: str
    label: str
    model: Type[SQLModel]
    schema: Type[BaseModel]
    filters: Type = TopicFilters
    order_by: Callable = topic_order
    created_field: Optional[str] = "created_at"
    touched_field: Optional[str] = "last_reviewed_at"
    favorites: bool = True
    favorites_view: bool = False
    clearable: bool = True
    categories: bool = True
    seed: Optional[Callable[[], List[dict]]] = None
    seed_mode: str = SEED_REPLACE
    reviews: bool = False
    attempts: bool = False
    resolves: bool = False
    noun: str = "topic"

    @property
    def path(self) -> str:
        return f"/api/{self.key}"

    @property
    def seedable(self) -> bool:
        return self.seed is not None

    def describe(self, item_id=None) -> str:
        """Human label, e.g. "C# topic 7" or "study sessions"."""
        if item_id is None:
            return f"{self.label} {self.noun}s"
        return f"{self.label} {self.noun} {item_id}"


def _topic(key: str, label: str, model, schema, seed) -> ResourceSpec:
    return ResourceSpec(key=key, label=label, model=model, schema=schema, seed=seed)


RESOURCES: Dict[str, ResourceSpec] = {
    spec.key: spec
    for spec in (
        _topic("aspnetcore", "ASP.NET Core", models.AspNetCoreTopic, schemas.StudyTopicIn,
               seed_data.aspnetcore_topics),
        _topic("csharp", "C#", models.CSharpTopic, schemas.CSharpTopicIn, seed_data.csharp_topics),
        _topic("designpattern", "Design Pattern", models.DesignPatternTopic, schemas.DesignPatternTopicIn,
               seed_data.design_pattern_topics),
        _topic("entityframework", "Entity Framework", models.EntityFrameworkTopic,
               schemas.EntityFrameworkTopicIn, seed_data.entity_framework_topics),
        _topic("oop", "OOP", models.OOPTopic, schemas.StudyTopicIn, seed_data.oop_topics),
        _topic("azure", "Azure", models.AzureTopic, schemas.AzureTopicIn, seed_data.azure_topics),
        ResourceSpec(
            key="systemdesign",
            label="System Design",
            model=models.SystemDesignTopic,
            schema=schemas.SystemDesignTopicIn,
            filters=SystemDesignFilters,
            order_by=recency_order,
            favorites_view=True,
            clearable=False,
            seed=seed_data.system_design_topics,
            seed_mode=SEED_EMPTY_ONLY,
            reviews=True,
        ),
        ResourceSpec(
            key="dsa",
            label="DSA",
            noun="problem",
            model=models.DSAProblem,
            schema=schemas.DSAProblemIn,
            filters=DSAFilters,
            order_by=attempt_order,
            touched_field="last_attempted_at",
            favorites_view=True,
            clearable=False,
            seed=seed_data.dsa_problems,
            seed_mode=SEED_EMPTY_ONLY,
            attempts=True,
        ),
        ResourceSpec(
            key="studysession",
            label="study",
            noun="session",
            model=models.StudySession,
            schema=schemas.StudySessionIn,
            filters=SessionFilters,
            order_by=session_order,
            created_field=None,
            touched_field=None,
            favorites=False,
            categories=False,
        ),
        ResourceSpec(
            key="interview",
            label="mock",
            noun="interview",
            model=models.MockInterview,
            schema=schemas.MockInterviewIn,
            filters=InterviewFilters,
            order_by=interview_order,
            touched_field=None,
            favorites=False,
            clearable=False,
            categories=False,
        ),
        ResourceSpec(
            key="weakarea",
            label="weak",
            noun="area",
            model=models.WeakArea,
            schema=schemas.WeakAreaIn,
            filters=WeakAreaFilters,
            order_by=severity_order,
            created_field="identified_at",
            touched_field=None,
            favorites=False,
            clearable=False,
            categories=False,
            resolves=True,
        ),
    )
}
