"""
Portfolio service.

Business logic for portfolio items.  An optional image is stored
through the :class:`UploadHandler` before the item is persisted, so the
saved record already points at the file.
"""

import datetime
from typing import Optional

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.errors import NotFound
from app.core.log import logger
from app.db.repositories.portfolio import PortfolioItemRepository
from app.models.portfolio_item import PortfolioItem
from app.schemas.portfolio import PortfolioItemCreate, PortfolioItemUpdate
from app.schemas.upload import StoredUpload
from app.services.upload_service import UploadHandler

IMAGE_PREFIX = "portfolio"


class PortfolioService:
    """Service for portfolio item business logic."""

    def __init__(self, session: Session, uploads: Optional[UploadHandler] = None):
        self.repository = PortfolioItemRepository(session)
        self.uploads = uploads

    def get_all(self) -> list[PortfolioItem]:
        return self.repository.get_all()

    def get_featured(self) -> list[PortfolioItem]:
        return self.repository.get_featured()

    def get_by_id(self, item_id: int) -> PortfolioItem:
        item = self.repository.get_by_id(item_id)
        if not item:
            raise NotFound("Portfolio item not found")
        return item

    def create(self, data: PortfolioItemCreate, image: Optional[UploadFile] = None) -> PortfolioItem:
        item = PortfolioItem(**data.model_dump())
        stored = self._store_image(image)
        if stored:
            item.image_url = stored.url
        try:
            item = self.repository.create(item)
        except SQLAlchemyError:
            self._discard_image(stored)
            raise
        logger.info("Created portfolio item %s", item.id)
        return item

    def update(self, item_id: int, data: PortfolioItemUpdate, image: Optional[UploadFile] = None) -> PortfolioItem:
        """Apply only the fields that were sent; ``updated_at`` is always refreshed."""
        item = self.get_by_id(item_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(item, key, value)

        stored = self._store_image(image)
        if stored:
            item.image_url = stored.url

        item.updated_at = datetime.datetime.utcnow()
        try:
            return self.repository.update(item)
        except SQLAlchemyError:
            self._discard_image(stored)
            raise

    def delete(self, item_id: int) -> None:
        if not self.repository.delete(item_id):
            raise NotFound("Portfolio item not found")
        logger.info("Deleted portfolio item %s", item_id)

    def _store_image(self, image: Optional[UploadFile]) -> Optional[StoredUpload]:
        if image is None or self.uploads is None:
            return None
        return self.uploads.save(image, IMAGE_PREFIX)

    def _discard_image(self, stored: Optional[StoredUpload]) -> None:
        if stored:
            self.uploads.delete(stored)
