from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from workspace_lite.core.database import get_db
from workspace_lite.schemas.page import PageResponse, PageType, TemplateRequest
from workspace_lite.services.template_service import list_templates, create_from_template

router = APIRouter(prefix="/templates", tags=["templates"])

@router.get("", response_model=List[PageResponse])
def list_templates_route(type: Optional[PageType] = Query(None), db: Session = Depends(get_db)):
    return list_templates(db, type)

@router.post("/instantiate", response_model=PageResponse, status_code=status.HTTP_201_CREATED)
def create_from_template_route(request: TemplateRequest, db: Session = Depends(get_db)):
    """Nouvelle page depuis un template (ou le template par défaut du type)"""
    return create_from_template(db, request.type, request.template_id)
