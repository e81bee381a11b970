"""Site settings service."""

from typing import Optional

from sqlmodel import Session

from app.db.repositories.admin_setting import AdminSettingRepository
from app.models.admin_setting import AdminSetting


class SettingsService:
    """Key/value site settings (name, contact info, social links)."""

    def __init__(self, session: Session):
        self.repository = AdminSettingRepository(session)

    def get_all(self) -> list[AdminSetting]:
        return self.repository.get_all()

    def upsert(self, key: str, value: Optional[str]) -> AdminSetting:
        return self.repository.upsert(key, value)
