"""Database repositories."""

from app.db.repositories.user import UserRepository, UserSessionRepository
from app.db.repositories.portfolio import PortfolioItemRepository
from app.db.repositories.case_study import CaseStudyRepository
from app.db.repositories.contact_message import ContactMessageRepository
from app.db.repositories.admin_setting import AdminSettingRepository

__all__ = [
    "UserRepository",
    "UserSessionRepository",
    "PortfolioItemRepository",
    "CaseStudyRepository",
    "ContactMessageRepository",
    "AdminSettingRepository",
]
