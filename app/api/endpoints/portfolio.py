"""
Portfolio endpoints.

Public reads under ``/portfolio`` and admin CRUD under
``/admin/portfolio``.  Admin writes are multipart forms: camelCase text
fields, ``technologies`` as a JSON array string, optional ``image`` file.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlmodel import Session

from app.api.dependencies import get_uploads
from app.api.forms import build_schema, parse_string_list
from app.db.session import get_db
from app.schemas.portfolio import PortfolioItemCreate, PortfolioItemResponse, PortfolioItemUpdate
from app.schemas.user import MessageResponse
from app.services.portfolio_service import PortfolioService
from app.services.upload_service import UploadHandler

router = APIRouter()
admin_router = APIRouter()


def portfolio_form(title: Optional[str] = Form(None),
                   description: Optional[str] = Form(None),
                   short_description: Optional[str] = Form(None, alias="shortDescription"),
                   technologies: Optional[str] = Form(None, description="JSON array of strings"),
                   project_url: Optional[str] = Form(None, alias="projectUrl"),
                   github_url: Optional[str] = Form(None, alias="githubUrl"),
                   content: Optional[str] = Form(None),
                   featured: Optional[str] = Form(None), ) -> dict[str, Any]:
    """Collect the portfolio form fields; unsent fields stay None."""
    return {
        "title": title,
        "description": description,
        "short_description": short_description,
        "technologies": parse_string_list(technologies, "technologies"),
        "project_url": project_url,
        "github_url": github_url,
        "content": content,
        "featured": featured,
    }


# ----------------------------------------------------------------------
# Public
# ----------------------------------------------------------------------


@router.get("", summary="List portfolio items, newest first.", response_model=list[PortfolioItemResponse])
def list_items(db: Session = Depends(get_db)):
    return PortfolioService(db).get_all()


@router.get("/featured", summary="List featured portfolio items.", response_model=list[PortfolioItemResponse])
def list_featured_items(db: Session = Depends(get_db)):
    return PortfolioService(db).get_featured()


@router.get("/{item_id}", summary="Get a portfolio item.", response_model=PortfolioItemResponse)
def get_item(item_id: int, db: Session = Depends(get_db)):
    return PortfolioService(db).get_by_id(item_id)


# ----------------------------------------------------------------------
# Admin
# ----------------------------------------------------------------------


@admin_router.get("", summary="List portfolio items.", response_model=list[PortfolioItemResponse])
def admin_list_items(db: Session = Depends(get_db)):
    return PortfolioService(db).get_all()


@admin_router.get("/{item_id}", summary="Get a portfolio item.", response_model=PortfolioItemResponse)
def admin_get_item(item_id: int, db: Session = Depends(get_db)):
    return PortfolioService(db).get_by_id(item_id)


@admin_router.post("", summary="Create a portfolio item.", response_model=PortfolioItemResponse)
def create_item(fields: dict[str, Any] = Depends(portfolio_form), image: Optional[UploadFile] = File(None),
                db: Session = Depends(get_db), uploads: UploadHandler = Depends(get_uploads), ):
    data = build_schema(PortfolioItemCreate, fields)
    return PortfolioService(db, uploads).create(data, image)


@admin_router.put("/{item_id}", summary="Update a portfolio item.", response_model=PortfolioItemResponse)
def update_item(item_id: int, fields: dict[str, Any] = Depends(portfolio_form),
                image: Optional[UploadFile] = File(None), db: Session = Depends(get_db),
                uploads: UploadHandler = Depends(get_uploads), ):
    """Partial update: only the form fields that were sent are changed."""
    data = build_schema(PortfolioItemUpdate, fields)
    return PortfolioService(db, uploads).update(item_id, data, image)


@admin_router.delete("/{item_id}", summary="Delete a portfolio item.", response_model=MessageResponse)
def delete_item(item_id: int, db: Session = Depends(get_db)):
    PortfolioService(db).delete(item_id)
    return MessageResponse(message="Portfolio item deleted successfully")
