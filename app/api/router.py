"""
API router.

Aggregates all endpoints.  Everything under ``/admin`` shares a
router-level session gate, resolved before any endpoint code runs.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_current_user
from app.api.endpoints import auth, case_studies, messages, portfolio, settings

api_router = APIRouter()

# Public endpoints
api_router.include_router(
    auth.router, tags=["Authentication"]
)
api_router.include_router(
    portfolio.router, prefix="/portfolio", tags=["Portfolio"]
)
api_router.include_router(
    case_studies.router, prefix="/case-studies", tags=["Case studies"]
)
api_router.include_router(
    messages.router, prefix="/contact", tags=["Contact"]
)

# Admin endpoints
admin_router = APIRouter(dependencies=[Depends(get_current_user)])
admin_router.include_router(
    portfolio.admin_router, prefix="/portfolio", tags=["Admin: portfolio"]
)
admin_router.include_router(
    case_studies.admin_router, prefix="/case-studies", tags=["Admin: case studies"]
)
admin_router.include_router(
    messages.admin_router, prefix="/messages", tags=["Admin: messages"]
)
admin_router.include_router(
    settings.admin_router, prefix="/settings", tags=["Admin: settings"]
)

api_router.include_router(admin_router, prefix="/admin")
