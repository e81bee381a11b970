"""
Contact message endpoints.

The public contact form (multipart, optional ``attachment``) and the
admin inbox.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlmodel import Session

from app.api.dependencies import get_uploads
from app.api.forms import build_schema
from app.db.session import get_db
from app.schemas.contact_message import ContactMessageCreate, ContactMessageResponse, ContactSubmitResponse
from app.schemas.user import MessageResponse
from app.services.message_service import MessageService
from app.services.upload_service import UploadHandler

router = APIRouter()
admin_router = APIRouter()


@router.post("", summary="Submit the contact form.", response_model=ContactSubmitResponse)
def submit_contact(name: Optional[str] = Form(None), email: Optional[str] = Form(None),
                   message: Optional[str] = Form(None), attachment: Optional[UploadFile] = File(None),
                   db: Session = Depends(get_db), uploads: UploadHandler = Depends(get_uploads), ):
    """
    Store a contact message.

    Validation runs before anything is written; an attachment over the
    size cap is rejected with 413 and no message is stored.
    """
    data = build_schema(ContactMessageCreate, {"name": name, "email": email, "message": message})
    stored = MessageService(db, uploads).submit(data, attachment)
    return ContactSubmitResponse(message="Message sent successfully", id=stored.id)


@admin_router.get("", summary="List received messages, newest first.", response_model=list[ContactMessageResponse])
def list_messages(db: Session = Depends(get_db)):
    return MessageService(db).get_all()


@admin_router.put("/{message_id}/read", summary="Mark a message as read.", response_model=MessageResponse)
def mark_message_read(message_id: int, db: Session = Depends(get_db)):
    MessageService(db).mark_as_read(message_id)
    return MessageResponse(message="Message marked as read")


@admin_router.delete("/{message_id}", summary="Delete a message.", response_model=MessageResponse)
def delete_message(message_id: int, db: Session = Depends(get_db)):
    MessageService(db).delete(message_id)
    return MessageResponse(message="Message deleted successfully")
