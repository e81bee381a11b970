"""Business logic services."""

from app.services.auth_service import AuthService
from app.services.upload_service import UploadHandler
from app.services.portfolio_service import PortfolioService
from app.services.case_study_service import CaseStudyService
from app.services.message_service import MessageService
from app.services.settings_service import SettingsService

__all__ = [
    "AuthService",
    "UploadHandler",
    "PortfolioService",
    "CaseStudyService",
    "MessageService",
    "SettingsService",
]
