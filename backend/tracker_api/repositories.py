"""Repository encapsulating database operations for one resource table.

A single `ResourceRepository` class serves every table: it is handed a
`ResourceSpec` and reads the model, filters and ordering from it.
Repositories return SQLModel objects and perform commits/refreshes where
appropriate. Writes to existing rows go through explicit UPDATE
statements guarded by `row_version` instead of implicit change tracking.
"""

from typing import Iterable, List
from sqlmodel import Session, select
from sqlalchemy import delete, func, not_, update

from .resources import ResourceSpec, catalogue_order, review_due_order


class ResourceRepository:
    """CRUD operations for the table described by `spec`."""
    def __init__(self, session: Session, spec: ResourceSpec):
        self.session = session
        self.spec = spec
        self.model = spec.model

    def list(self, filters=None) -> list:
        """Return rows matching every clause of `filters`, in the resource's order."""
        stmt = select(self.model)
        if filters is not None:
            for clause in filters.clauses(self.model):
                stmt = stmt.where(clause)
        stmt = stmt.order_by(*self.spec.order_by(self.model))
        return self.session.exec(stmt).all()

    def get(self, item_id: int):
        """Fetch a row by primary key or `None`."""
        return self.session.get(self.model, item_id)

    def exists(self, item_id: int) -> bool:
        stmt = select(self.model.id).where(self.model.id == item_id)
        return self.session.exec(stmt).first() is not None

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(self.model)).one()

    def create(self, item):
        """Persist a new row and return the managed instance."""
        self.session.add(item)
        self.session.commit()
        self.session.refresh(item)
        return item

    def replace(self, item_id: int, expected_version: int, values: dict) -> bool:
        """Overwrite the row's columns with `values` if its version is unchanged.

        Returns False when no row matched, either because the row is gone
        or because someone else wrote it since `expected_version` was read.
        """
        stmt = (
            update(self.model)
            .where(self.model.id == item_id, self.model.row_version == expected_version)
            .values(**values, row_version=self.model.row_version + 1)
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        self.session.commit()
        return result.rowcount == 1

    def toggle_favorite(self, item_id: int) -> bool:
        """Flip `is_favorite` in one statement; False if the row is absent."""
        stmt = (
            update(self.model)
            .where(self.model.id == item_id)
            .values(is_favorite=not_(self.model.is_favorite), row_version=self.model.row_version + 1)
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        self.session.commit()
        return result.rowcount == 1

    def delete(self, item) -> None:
        self.session.delete(item)
        self.session.commit()

    def clear(self) -> int:
        """Delete every row and return how many were removed."""
        result = self.session.execute(delete(self.model).execution_options(synchronize_session=False))
        self.session.commit()
        return result.rowcount

    def reseed(self, items: Iterable, clear_first: bool) -> int:
        """Insert `items`, optionally wiping the table first, in one commit."""
        items = list(items)
        if clear_first:
            self.session.execute(delete(self.model).execution_options(synchronize_session=False))
        self.session.add_all(items)
        self.session.commit()
        return len(items)

    def categories(self) -> List[str]:
        """Distinct non-null categories, ascending."""
        stmt = (
            select(self.model.category)
            .where(self.model.category.is_not(None))
            .distinct()
            .order_by(self.model.category.asc())
        )
        return self.session.exec(stmt).all()

    def favorites(self) -> list:
        """Favorited rows ordered by category then title."""
        stmt = select(self.model).where(self.model.is_favorite.is_(True)).order_by(*catalogue_order(self.model))
        return self.session.exec(stmt).all()

    def due_for_review(self, now) -> list:
        """Rows whose `next_review_date` is set and not after `now`, earliest first."""
        stmt = (
            select(self.model)
            .where(self.model.next_review_date.is_not(None), self.model.next_review_date <= now)
            .order_by(*review_due_order(self.model))
        )
        return self.session.exec(stmt).all()
