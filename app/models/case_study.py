"""
Case study database model.

A longer narrative write-up of a project, with optional client,
duration and outcome fields.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field, SQLModel


class CaseStudy(SQLModel, table=True):
    """A case study shown on the public site."""

    __tablename__ = "case_studies"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False, max_length=255)
    excerpt: str = Field(sa_column=Column(Text, nullable=False))
    content: str = Field(sa_column=Column(Text, nullable=False))

    image_url: Optional[str] = Field(default=None)
    tags: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    # Narrative fields
    client_name: Optional[str] = Field(default=None, max_length=255)
    project_duration: Optional[str] = Field(default=None, max_length=255)
    outcome: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    featured: bool = Field(default=False, nullable=False, index=True)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, index=True)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
