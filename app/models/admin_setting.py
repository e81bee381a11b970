"""Admin setting database model: a generic key/value bag for site-wide fields."""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class AdminSetting(SQLModel, table=True):
    """One site setting (name, contact info, social links, ...)."""

    __tablename__ = "admin_settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    key: str = Field(unique=True, index=True, max_length=100, nullable=False)
    value: Optional[str] = Field(default=None)

    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
