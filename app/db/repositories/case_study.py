"""Case study repository."""

from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.models.case_study import CaseStudy


class CaseStudyRepository(BaseRepository[CaseStudy]):
    """Repository for CaseStudy database operations."""

    model = CaseStudy

    def get_featured(self) -> list[CaseStudy]:
        statement = select(CaseStudy).where(CaseStudy.featured == True)  # noqa: E712
        return list(self.session.exec(self._newest_first(statement)).all())
