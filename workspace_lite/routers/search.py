from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from workspace_lite.core.database import get_db
from workspace_lite.schemas.page import SearchResultResponse
from workspace_lite.services.search_service import search_pages

router = APIRouter(prefix="/search", tags=["search"])

@router.get("", response_model=List[SearchResultResponse])
#recherche dans les titres/contenus
def search_route(q: str = Query(""), db: Session = Depends(get_db)):
    results = search_pages(db, q)
    return [r.to_dict() for r in results]
