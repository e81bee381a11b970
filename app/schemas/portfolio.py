"""
Portfolio item API schemas.

``technologies`` arrives as a JSON-encoded array inside multipart
forms; it is decoded in :mod:`app.api.forms` before reaching these
schemas.
"""

import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import APIModel


class PortfolioItemBase(APIModel):
    """Fields shared by create requests and responses."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    short_description: Optional[str] = None
    image_url: Optional[str] = None
    technologies: list[str] = Field(default_factory=list)
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    content: Optional[str] = None
    featured: bool = False


class PortfolioItemCreate(PortfolioItemBase):
    """Schema for creating a portfolio item."""


class PortfolioItemUpdate(APIModel):
    """Schema for a partial update; only fields that were sent are applied."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    short_description: Optional[str] = None
    image_url: Optional[str] = None
    technologies: Optional[list[str]] = None
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    content: Optional[str] = None
    featured: Optional[bool] = None


class PortfolioItemResponse(PortfolioItemBase):
    """Schema for a portfolio item in API responses."""

    id: int
    created_at: datetime.datetime
    updated_at: datetime.datetime
