"""Business logic services used by HTTP controllers.

`ResourceService` implements the shared operation set once for every
resource. It owns the rules the repository does not know about:
timestamps, the path/body id check, optimistic-concurrency outcomes and
the two seeding policies. Optional operations check the resource's
capabilities before touching the table.
"""

import logging
from datetime import datetime, timedelta
from typing import List

from sqlmodel import Session

from . import repositories, schemas
from .errors import BadRequestError, ConflictError, NotFoundError
from .models import utcnow
from .resources import SEED_EMPTY_ONLY, ResourceSpec

logger = logging.getLogger("tracker_api.services")

_CLIENT_IGNORED = {"id", "row_version"}

# days until the next review after the 1st, 2nd, ... attempt
REVIEW_INTERVALS = (1, 3, 7, 14, 30)


def next_review_date(attempt_count: int, solved_optimally: bool, now: datetime) -> datetime:
    """Spaced repetition: walk up `REVIEW_INTERVALS`, halving the step after a non-optimal solve."""
    index = min(max(attempt_count, 1) - 1, len(REVIEW_INTERVALS) - 1)
    days = REVIEW_INTERVALS[index]
    if not solved_optimally:
        days = max(1, days // 2)
    return now + timedelta(days=days)


class ResourceService:
    """List, read and mutate the rows of one resource."""
    def __init__(self, session: Session, spec: ResourceSpec):
        self.session = session
        self.spec = spec
        self.repo = repositories.ResourceRepository(session, spec)

    def _require(self, capability: str, operation: str):
        if not getattr(self.spec, capability):
            raise BadRequestError(f"{self.spec.describe()} do not support {operation}")

    def _not_found(self, item_id: int) -> NotFoundError:
        return NotFoundError(f"{self.spec.label} {self.spec.noun}", item_id)

    def list(self, filters=None) -> list:
        """Return matching rows; an empty list when nothing matches."""
        return self.repo.list(filters)

    def get(self, item_id: int):
        item = self.repo.get(item_id)
        if item is None:
            raise self._not_found(item_id)
        return item

    def create(self, payload):
        """Insert a new row from `payload`; any client id is discarded."""
        item = self.spec.model(**payload.model_dump(exclude=_CLIENT_IGNORED))
        if self.spec.created_field:
            setattr(item, self.spec.created_field, utcnow())
        return self.repo.create(item)

    def update(self, item_id: int, payload) -> None:
        """Replace every client-writable column of row `item_id`.

        The body must carry the same id as the path. A `row_version` in
        the body must match the stored one; otherwise the version read
        here guards the write.
        """
        if payload.id != item_id:
            raise BadRequestError(f"path id {item_id} does not match body id {payload.id}")
        current = self.get(item_id)
        expected = current.row_version
        if payload.row_version is not None and payload.row_version != expected:
            logger.warning("update_conflict resource=%s id=%s sent=%s stored=%s",
                           self.spec.key, item_id, payload.row_version, expected)
            raise ConflictError(f"{self.spec.describe(item_id)} was modified by another request")
        values = payload.model_dump(exclude=_CLIENT_IGNORED)
        if self.spec.touched_field:
            values[self.spec.touched_field] = utcnow()
        self._write_back(item_id, expected, values)

    def _write_back(self, item_id: int, expected_version: int, values: dict) -> None:
        if self.repo.replace(item_id, expected_version, values):
            return
        # nothing matched: either the row vanished or its version moved on
        if not self.repo.exists(item_id):
            raise self._not_found(item_id)
        logger.warning("update_conflict resource=%s id=%s expected=%s", self.spec.key, item_id, expected_version)
        raise ConflictError(f"{self.spec.describe(item_id)} was modified by another request")

    def delete(self, item_id: int) -> None:
        self.repo.delete(self.get(item_id))

    def toggle_favorite(self, item_id: int):
        """Flip `is_favorite` and return the updated row."""
        self._require("favorites", "favorites")
        if not self.repo.toggle_favorite(item_id):
            raise self._not_found(item_id)
        return self.get(item_id)

    def clear(self) -> dict:
        self._require("clearable", "clear")
        deleted = self.repo.clear()
        logger.info("cleared resource=%s deleted=%s", self.spec.key, deleted)
        return {"deleted": deleted, "message": f"Cleared {deleted} {self.spec.describe()}"}

    def seed(self) -> dict:
        """Load the resource's fixed record set.

        Replace-mode resources drop their existing rows first. Empty-only
        resources refuse to seed while any row exists.
        """
        self._require("seedable", "seeding")
        empty_only = self.spec.seed_mode == SEED_EMPTY_ONLY
        if empty_only and self.repo.count() > 0:
            raise ConflictError(f"{self.spec.describe()} already exist; clear the table before seeding")
        now = utcnow()
        items = []
        for record in self.spec.seed():
            item = self.spec.model(**record)
            if self.spec.created_field:
                setattr(item, self.spec.created_field, now)
            items.append(item)
        created = self.repo.reseed(items, clear_first=not empty_only)
        logger.info("seeded resource=%s created=%s", self.spec.key, created)
        return {"created": created, "message": f"Seeded {created} {self.spec.describe()}"}

    def categories(self) -> List[str]:
        self._require("categories", "categories")
        return self.repo.categories()

    def record_review(self, item_id: int, review: schemas.ReviewIn):
        """Stamp a review: confidence and status always, notes only when given."""
        self._require("reviews", "reviews")
        current = self.get(item_id)
        values = {
            "last_reviewed_at": utcnow(),
            "confidence_level": review.confidence_level,
            "status": review.status,
        }
        if review.notes:
            values["notes"] = review.notes
        self._write_back(item_id, current.row_version, values)
        return self.get(item_id)

    def favorites(self) -> list:
        self._require("favorites_view", "the favorites view")
        return self.repo.favorites()

    def record_attempt(self, item_id: int, attempt: schemas.AttemptIn):
        """Count an attempt and schedule the next review from it."""
        self._require("attempts", "attempts")
        current = self.get(item_id)
        now = utcnow()
        attempt_count = current.attempt_count + 1
        values = {
            "attempt_count": attempt_count,
            "last_attempted_at": now,
            "time_taken_minutes": attempt.time_taken_minutes,
            "solved_optimally": attempt.solved_optimally,
            "status": attempt.status,
            "next_review_date": next_review_date(attempt_count, attempt.solved_optimally, now),
        }
        if attempt.notes:
            values["notes"] = attempt.notes
        self._write_back(item_id, current.row_version, values)
        return self.get(item_id)

    def needs_review(self) -> list:
        self._require("attempts", "the review queue")
        return self.repo.due_for_review(utcnow())

    def resolve(self, item_id: int):
        """Mark the row resolved and stamp `resolved_at`."""
        self._require("resolves", "resolve")
        current = self.get(item_id)
        self._write_back(item_id, current.row_version, {"is_resolved": True, "resolved_at": utcnow()})
        return self.get(item_id)
