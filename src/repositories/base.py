"""Shared write path for the SQLAlchemy repositories."""

from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.services.exceptions import ConflictRetry


class Repository:
    """Session-backed repository; every write commits on its own."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, row: Any) -> Any:
        """Insert a row, raising ConflictRetry if a unique constraint rejects it."""
        self.db.add(row)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictRetry(str(exc.orig)) from exc
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(row)
        return row

    def save(self, row: Any) -> Any:
        """Persist pending changes on an already loaded row."""
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(row)
        return row

    def delete(self, row: Any) -> Any:
        """Delete a row; its loaded attributes stay readable afterwards."""
        self.db.delete(row)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return row
