"""
Portfolio item database model.

A single public-facing project entry.  ``technologies`` is an ordered
list of strings stored as JSON.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field, SQLModel


class PortfolioItem(SQLModel, table=True):
    """A portfolio project shown on the public site."""

    __tablename__ = "portfolio_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False, max_length=255)
    description: str = Field(sa_column=Column(Text, nullable=False))

    # Card summary
    short_description: Optional[str] = Field(default=None)
    image_url: Optional[str] = Field(default=None)
    technologies: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    project_url: Optional[str] = Field(default=None)
    github_url: Optional[str] = Field(default=None)

    # Rich/HTML body for the detail view
    content: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    featured: bool = Field(default=False, nullable=False, index=True)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, index=True)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
