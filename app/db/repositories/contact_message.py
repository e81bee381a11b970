"""Contact message repository."""

from typing import Optional

from app.db.repositories.base import BaseRepository
from app.models.contact_message import ContactMessage


class ContactMessageRepository(BaseRepository[ContactMessage]):
    """Repository for ContactMessage database operations."""

    model = ContactMessage

    def mark_as_read(self, message_id: int) -> Optional[ContactMessage]:
        """
        Set ``read`` to true.  Repeating the call is a no-op.

        Returns:
            The message, or None if not found
        """
        message = self.get_by_id(message_id)
        if message is None:
            return None
        if not message.read:
            message.read = True
            message = self.update(message)
        return message
