"""Pydantic schemas for request/response validation."""

from app.schemas.base import APIModel
from app.schemas.user import LoginResponse, MessageResponse, UserLogin, UserResponse
from app.schemas.portfolio import (
    PortfolioItemCreate,
    PortfolioItemUpdate,
    PortfolioItemResponse,
)
from app.schemas.case_study import (
    CaseStudyCreate,
    CaseStudyUpdate,
    CaseStudyResponse,
)
from app.schemas.contact_message import (
    ContactMessageCreate,
    ContactMessageResponse,
    ContactSubmitResponse,
)
from app.schemas.admin_setting import AdminSettingUpdate, AdminSettingResponse
from app.schemas.upload import StoredUpload

__all__ = [
    "APIModel",
    "LoginResponse",
    "MessageResponse",
    "UserLogin",
    "UserResponse",
    "PortfolioItemCreate",
    "PortfolioItemUpdate",
    "PortfolioItemResponse",
    "CaseStudyCreate",
    "CaseStudyUpdate",
    "CaseStudyResponse",
    "ContactMessageCreate",
    "ContactMessageResponse",
    "ContactSubmitResponse",
    "AdminSettingUpdate",
    "AdminSettingResponse",
    "StoredUpload",
]
