"""
Case study service.

Same lifecycle as portfolio items: optional image stored first,
partial updates, hard delete.
"""

import datetime
from typing import Optional

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.errors import NotFound
from app.core.log import logger
from app.db.repositories.case_study import CaseStudyRepository
from app.models.case_study import CaseStudy
from app.schemas.case_study import CaseStudyCreate, CaseStudyUpdate
from app.schemas.upload import StoredUpload
from app.services.upload_service import UploadHandler

IMAGE_PREFIX = "case-study"


class CaseStudyService:
    """Service for case study business logic."""

    def __init__(self, session: Session, uploads: Optional[UploadHandler] = None):
        self.repository = CaseStudyRepository(session)
        self.uploads = uploads

    def get_all(self) -> list[CaseStudy]:
        return self.repository.get_all()

    def get_featured(self) -> list[CaseStudy]:
        return self.repository.get_featured()

    def get_by_id(self, study_id: int) -> CaseStudy:
        study = self.repository.get_by_id(study_id)
        if not study:
            raise NotFound("Case study not found")
        return study

    def create(self, data: CaseStudyCreate, image: Optional[UploadFile] = None) -> CaseStudy:
        study = CaseStudy(**data.model_dump())
        stored = self._store_image(image)
        if stored:
            study.image_url = stored.url
        try:
            study = self.repository.create(study)
        except SQLAlchemyError:
            self._discard_image(stored)
            raise
        logger.info("Created case study %s", study.id)
        return study

    def update(self, study_id: int, data: CaseStudyUpdate, image: Optional[UploadFile] = None) -> CaseStudy:
        study = self.get_by_id(study_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(study, key, value)

        stored = self._store_image(image)
        if stored:
            study.image_url = stored.url

        study.updated_at = datetime.datetime.utcnow()
        try:
            return self.repository.update(study)
        except SQLAlchemyError:
            self._discard_image(stored)
            raise

    def delete(self, study_id: int) -> None:
        if not self.repository.delete(study_id):
            raise NotFound("Case study not found")
        logger.info("Deleted case study %s", study_id)

    def _store_image(self, image: Optional[UploadFile]) -> Optional[StoredUpload]:
        if image is None or self.uploads is None:
            return None
        return self.uploads.save(image, IMAGE_PREFIX)

    def _discard_image(self, stored: Optional[StoredUpload]) -> None:
        if stored:
            self.uploads.delete(stored)
