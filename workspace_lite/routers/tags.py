from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from workspace_lite.core.database import get_db
from workspace_lite.services.tag_service import list_tags

router = APIRouter(prefix="/tags", tags=["tags"])

@router.get("", response_model=List[str])
def list_tags_route(db: Session = Depends(get_db)):
    return list_tags(db)
