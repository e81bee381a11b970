"""SQLModel database models."""

from app.models.user import User, UserSession
from app.models.portfolio_item import PortfolioItem
from app.models.case_study import CaseStudy
from app.models.contact_message import ContactMessage
from app.models.admin_setting import AdminSetting

__all__ = [
    "User",
    "UserSession",
    "PortfolioItem",
    "CaseStudy",
    "ContactMessage",
    "AdminSetting",
]
