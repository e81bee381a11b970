"""
Site settings endpoints (admin only).
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.admin_setting import AdminSettingResponse, AdminSettingUpdate
from app.services.settings_service import SettingsService

admin_router = APIRouter()


@admin_router.get("", summary="List all site settings.", response_model=list[AdminSettingResponse])
def list_settings(db: Session = Depends(get_db)):
    return SettingsService(db).get_all()


@admin_router.put("", summary="Create or replace one site setting.", response_model=AdminSettingResponse)
def update_setting(data: AdminSettingUpdate, db: Session = Depends(get_db)):
    return SettingsService(db).upsert(data.key, data.value)
