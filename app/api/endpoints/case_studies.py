"""
Case study endpoints.

Public reads under ``/case-studies`` and admin CRUD under
``/admin/case-studies``; ``tags`` is sent as a JSON array string.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlmodel import Session

from app.api.dependencies import get_uploads
from app.api.forms import build_schema, parse_string_list
from app.db.session import get_db
from app.schemas.case_study import CaseStudyCreate, CaseStudyResponse, CaseStudyUpdate
from app.schemas.user import MessageResponse
from app.services.case_study_service import CaseStudyService
from app.services.upload_service import UploadHandler

router = APIRouter()
admin_router = APIRouter()


def case_study_form(title: Optional[str] = Form(None),
                    excerpt: Optional[str] = Form(None),
                    content: Optional[str] = Form(None),
                    tags: Optional[str] = Form(None, description="JSON array of strings"),
                    client_name: Optional[str] = Form(None, alias="clientName"),
                    project_duration: Optional[str] = Form(None, alias="projectDuration"),
                    outcome: Optional[str] = Form(None),
                    featured: Optional[str] = Form(None), ) -> dict[str, Any]:
    return {
        "title": title,
        "excerpt": excerpt,
        "content": content,
        "tags": parse_string_list(tags, "tags"),
        "client_name": client_name,
        "project_duration": project_duration,
        "outcome": outcome,
        "featured": featured,
    }


@router.get("", summary="List case studies, newest first.", response_model=list[CaseStudyResponse])
def list_case_studies(db: Session = Depends(get_db)):
    return CaseStudyService(db).get_all()


@router.get("/featured", summary="List featured case studies.", response_model=list[CaseStudyResponse])
def list_featured_case_studies(db: Session = Depends(get_db)):
    return CaseStudyService(db).get_featured()


@router.get("/{study_id}", summary="Get a case study.", response_model=CaseStudyResponse)
def get_case_study(study_id: int, db: Session = Depends(get_db)):
    return CaseStudyService(db).get_by_id(study_id)


@admin_router.get("", summary="List case studies.", response_model=list[CaseStudyResponse])
def admin_list_case_studies(db: Session = Depends(get_db)):
    return CaseStudyService(db).get_all()


@admin_router.get("/{study_id}", summary="Get a case study.", response_model=CaseStudyResponse)
def admin_get_case_study(study_id: int, db: Session = Depends(get_db)):
    return CaseStudyService(db).get_by_id(study_id)


@admin_router.post("", summary="Create a case study.", response_model=CaseStudyResponse)
def create_case_study(fields: dict[str, Any] = Depends(case_study_form), image: Optional[UploadFile] = File(None),
                      db: Session = Depends(get_db), uploads: UploadHandler = Depends(get_uploads), ):
    data = build_schema(CaseStudyCreate, fields)
    return CaseStudyService(db, uploads).create(data, image)


@admin_router.put("/{study_id}", summary="Update a case study.", response_model=CaseStudyResponse)
def update_case_study(study_id: int, fields: dict[str, Any] = Depends(case_study_form),
                      image: Optional[UploadFile] = File(None), db: Session = Depends(get_db),
                      uploads: UploadHandler = Depends(get_uploads), ):
    data = build_schema(CaseStudyUpdate, fields)
    return CaseStudyService(db, uploads).update(study_id, data, image)


@admin_router.delete("/{study_id}", summary="Delete a case study.", response_model=MessageResponse)
def delete_case_study(study_id: int, db: Session = Depends(get_db)):
    CaseStudyService(db).delete(study_id)
    return MessageResponse(message="Case study deleted successfully")
