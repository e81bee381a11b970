"""Admin setting repository."""

import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.models.admin_setting import AdminSetting


class AdminSettingRepository:
    """Repository for AdminSetting database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> list[AdminSetting]:
        statement = select(AdminSetting).order_by(AdminSetting.key)
        return list(self.session.exec(statement).all())

    def get_by_key(self, key: str) -> Optional[AdminSetting]:
        statement = select(AdminSetting).where(AdminSetting.key == key)
        return self.session.exec(statement).first()

    def upsert(self, key: str, value: Optional[str]) -> AdminSetting:
        """
        Insert the setting, or replace the value of the existing one.

        A concurrent insert of the same key is resolved by replacing the
        value it stored, so the last write wins.
        """
        setting = self.get_by_key(key)
        if setting is not None:
            return self._replace(setting, value)

        setting = AdminSetting(key=key, value=value)
        self.session.add(setting)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return self._replace(self.get_by_key(key), value)
        self.session.refresh(setting)
        return setting

    def _replace(self, setting: AdminSetting, value: Optional[str]) -> AdminSetting:
        setting.value = value
        setting.updated_at = datetime.datetime.utcnow()
        self.session.add(setting)
        self.session.commit()
        self.session.refresh(setting)
        return setting
