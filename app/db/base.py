"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User, UserSession  # noqa: F401
from app.models.portfolio_item import PortfolioItem  # noqa: F401
from app.models.case_study import CaseStudy  # noqa: F401
from app.models.contact_message import ContactMessage  # noqa: F401
from app.models.admin_setting import AdminSetting  # noqa: F401
