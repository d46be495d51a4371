"""Filtres et tris sur les pages (lecture seule)"""

from sqlalchemy import case
from sqlalchemy.orm import Session
from typing import List, Optional

from workspace_lite.core.errors import InvalidQueryError
from workspace_lite.models.page import Page
from workspace_lite.schemas.page import PageFilters

# high < med < low < (aucune)
PRIORITY_RANK = case(
    (Page.task_priority == "high", 1),
    (Page.task_priority == "med", 2),
    (Page.task_priority == "low", 3),
    else_=4,
)

# Les pages épinglées passent toujours en premier
SORT_ORDERS = {
    "updatedAt": (Page.pinned.desc(), Page.updated_at.desc()),
    "createdAt": (Page.pinned.desc(), Page.created_at.desc()),
    # sans échéance -> à la fin
    "dueDate": (Page.pinned.desc(), Page.task_due_date.is_(None), Page.task_due_date.asc(), Page.updated_at.desc()),
    "priority": (Page.pinned.desc(), PRIORITY_RANK, Page.updated_at.desc()),
}


def matches_tags(page: Page, tags: List[str]) -> bool:
    # appartenance exacte sur la liste décodée, pas de LIKE sur le JSON
    page_tags = page.tags or []
    return any(tag in page_tags for tag in tags)


def list_pages(db: Session, filters: Optional[PageFilters] = None, sort_by: str = "updatedAt") -> List[Page]:
    if sort_by not in SORT_ORDERS:
        raise InvalidQueryError(f"Unknown sort mode: {sort_by!r}", sort_by=sort_by)

    query = db.query(Page)

    if filters and filters.type:
        query = query.filter(Page.type == filters.type)

    if filters and filters.task_status:
        query = query.filter(Page.task_status == filters.task_status)

    pages = query.order_by(*SORT_ORDERS[sort_by]).all()

    # tags : OU entre les tags demandés
    if filters and filters.tags:
        pages = [p for p in pages if matches_tags(p, filters.tags)]

    return pages
