"""Portfolio item repository."""

from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.models.portfolio_item import PortfolioItem


class PortfolioItemRepository(BaseRepository[PortfolioItem]):
    """Repository for PortfolioItem database operations."""

    model = PortfolioItem

    def get_featured(self) -> list[PortfolioItem]:
        statement = select(PortfolioItem).where(PortfolioItem.featured == True)  # noqa: E712
        return list(self.session.exec(self._newest_first(statement)).all())
