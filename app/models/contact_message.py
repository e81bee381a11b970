"""
Contact message database model.

Messages submitted through the public contact form.  ``read`` only
ever goes from false to true, through the mark-as-read operation.
"""

import datetime
from typing import Optional

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel


class ContactMessage(SQLModel, table=True):
    """A contact-form submission."""

    __tablename__ = "contact_messages"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=255)
    email: str = Field(nullable=False, max_length=255)
    message: str = Field(sa_column=Column(Text, nullable=False))

    # Set only when a file was uploaded with the submission
    attachment_url: Optional[str] = Field(default=None)
    attachment_name: Optional[str] = Field(default=None, max_length=255)

    read: bool = Field(default=False, nullable=False)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, index=True)
