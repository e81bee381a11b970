"""
Base repository.

Uniform CRUD contract shared by the table repositories.  Lists are
returned newest first; ids break ties between rows created within the
same clock tick.
"""

from typing import Any, Generic, Optional, TypeVar

from sqlmodel import Session, SQLModel, select

ModelT = TypeVar("ModelT", bound=SQLModel)


class BaseRepository(Generic[ModelT]):
    """CRUD operations for a single SQLModel table."""

    model: type[ModelT]

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, entity: ModelT) -> ModelT:
        """
        Insert a new row.

        Returns:
            The entity with its generated id and defaults
        """
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def get_by_id(self, entity_id: Any) -> Optional[ModelT]:
        return self.session.get(self.model, entity_id)

    def get_all(self) -> list[ModelT]:
        """Return every row, newest first."""
        return list(self.session.exec(self._newest_first(select(self.model))).all())

    def update(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def delete(self, entity_id: Any) -> bool:
        """
        Hard-delete a row by id.

        Returns:
            True if deleted, False if not found
        """
        entity = self.get_by_id(entity_id)
        if entity:
            self.session.delete(entity)
            self.session.commit()
            return True
        return False

    def _newest_first(self, statement):
        return statement.order_by(self.model.created_at.desc(), self.model.id.desc())
