"""
Case study API schemas.
"""

import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import APIModel


class CaseStudyBase(APIModel):
    title: str = Field(..., min_length=1, max_length=255)
    excerpt: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    image_url: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    client_name: Optional[str] = Field(None, max_length=255)
    project_duration: Optional[str] = Field(None, max_length=255)
    outcome: Optional[str] = None
    featured: bool = False


class CaseStudyCreate(CaseStudyBase):
    """Schema for creating a case study."""


class CaseStudyUpdate(APIModel):
    """Schema for a partial update of a case study."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    excerpt: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = None
    tags: Optional[list[str]] = None
    client_name: Optional[str] = Field(None, max_length=255)
    project_duration: Optional[str] = Field(None, max_length=255)
    outcome: Optional[str] = None
    featured: Optional[bool] = None


class CaseStudyResponse(CaseStudyBase):
    id: int
    created_at: datetime.datetime
    updated_at: datetime.datetime
