from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from workspace_lite.core.database import get_db
from workspace_lite.schemas.page import PageCreate, PageUpdate, PageResponse, PageFilters, PageType, TaskStatus, SortBy
from workspace_lite.services.page_service import create_page, get_page, update_page, delete_page
from workspace_lite.services.query_service import list_pages
from typing import List, Optional

router = APIRouter(prefix="/pages", tags=["pages"])

# Crée une page
@router.post("", response_model=PageResponse, status_code=status.HTTP_201_CREATED)
def create_page_route(page_data: PageCreate, db: Session = Depends(get_db)):
    return create_page(db, page_data)

@router.get("", response_model=List[PageResponse])
def list_pages_route(
    db: Session = Depends(get_db),
    type: Optional[PageType] = Query(None),
    task_status: Optional[TaskStatus] = Query(None, alias="taskStatus"),
    tags: Optional[List[str]] = Query(None),
    sort_by: SortBy = Query("updatedAt", alias="sortBy")
):
    filters = PageFilters(type=type, task_status=task_status, tags=tags)
    return list_pages(db, filters, sort_by)

@router.get("/{page_id}", response_model=PageResponse)
def get_page_route(page_id: str, db: Session = Depends(get_db)):
    page = get_page(db, page_id)
    if not page:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found")
    return page

@router.put("/{page_id}", response_model=PageResponse)
def update_page_route(page_id: str, page_data: PageUpdate, db: Session = Depends(get_db)):
    # Maj partielle ; PageNotFoundError -> 404 (handler dans main)
    return update_page(db, page_id, page_data)

@router.delete("/{page_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_page_route(page_id: str, db: Session = Depends(get_db)):
    # idempotent : pas de 404 si déjà supprimée
    delete_page(db, page_id)
