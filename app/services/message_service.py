"""
Contact message service.

Public submissions and the admin inbox.  The attachment is stored
before the message row is inserted; an oversized attachment therefore
leaves no message behind.
"""

from typing import Optional

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.errors import NotFound
from app.core.log import logger
from app.db.repositories.contact_message import ContactMessageRepository
from app.models.contact_message import ContactMessage
from app.schemas.contact_message import ContactMessageCreate
from app.services.upload_service import UploadHandler

ATTACHMENT_PREFIX = "contact"


class MessageService:
    """Service for contact messages."""

    def __init__(self, session: Session, uploads: Optional[UploadHandler] = None):
        self.repository = ContactMessageRepository(session)
        self.uploads = uploads

    def submit(self, data: ContactMessageCreate, attachment: Optional[UploadFile] = None) -> ContactMessage:
        message = ContactMessage(name=data.name, email=str(data.email), message=data.message)

        stored = None
        if attachment is not None and self.uploads is not None:
            stored = self.uploads.save(attachment, ATTACHMENT_PREFIX)
            if stored:
                message.attachment_url = stored.url
                message.attachment_name = stored.original_name

        try:
            message = self.repository.create(message)
        except SQLAlchemyError:
            if stored:
                self.uploads.delete(stored)
            raise
        logger.info("Contact message %s received from %s", message.id, message.email)
        return message

    def get_all(self) -> list[ContactMessage]:
        return self.repository.get_all()

    def mark_as_read(self, message_id: int) -> ContactMessage:
        """Idempotent: marking an already-read message succeeds."""
        message = self.repository.mark_as_read(message_id)
        if message is None:
            raise NotFound("Message not found")
        return message

    def delete(self, message_id: int) -> None:
        if not self.repository.delete(message_id):
            raise NotFound("Message not found")
        logger.info("Deleted contact message %s", message_id)
