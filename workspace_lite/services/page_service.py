"""
Service pages - CRUD et persistance (un commit par mutation)
"""

import logging
import time
import uuid
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from workspace_lite.core.database import write_guard
from workspace_lite.core.errors import PageNotFoundError, StorageError, InvalidPageTypeError
from workspace_lite.models.page import Page, PAGE_TYPES, TASK_STATUSES, TASK_PRIORITIES
from workspace_lite.schemas.page import PageCreate, PageUpdate

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


def new_page_id(now: int) -> str:
    return f"page_{now}_{uuid.uuid4().hex[:9]}"


def normalize_status(value: Optional[str]) -> Optional[str]:
    # valeur inconnue ou vide -> None, jamais d'erreur
    return value if value in TASK_STATUSES else None


def normalize_priority(value: Optional[str]) -> Optional[str]:
    return value if value in TASK_PRIORITIES else None


def commit(db: Session, action: str, page_id: str):
    """Écrit sur disque avant de rendre la main ; échec -> StorageError"""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Storage failure during {action} of {page_id}: {e}")
        raise StorageError(f"Could not persist {action}", page_id=page_id, action=action) from e


# func 1: create_page()
def create_page(db: Session, data: PageCreate) -> Page:
    if data.type not in PAGE_TYPES:
        raise InvalidPageTypeError(f"Unknown page type: {data.type!r}", type=data.type)

    with write_guard(db):
        now = now_ms()
        page = Page(
            id=new_page_id(now),
            type=data.type,
            title=data.title,
            content=data.content or "",
            tags=list(data.tags or []),
            pinned=False,
            created_at=now,
            updated_at=now,
            task_status=normalize_status(data.task_status),
            task_due_date=data.task_due_date,
            task_priority=normalize_priority(data.task_priority),
            doc_owner=data.doc_owner,
            doc_version=data.doc_version,
            doc_approved=data.doc_approved,
        )
        db.add(page)
        commit(db, "create", page.id)

    db.refresh(page)
    logger.debug(f"Created page {page.id} ({page.type})")
    return page


# func 2: get_page()
def get_page(db: Session, page_id: str) -> Optional[Page]:
    # absent -> None, ce n'est pas une erreur
    return db.query(Page).filter(Page.id == page_id).first()


# func 3: update_page()
def update_page(db: Session, page_id: str, data: PageUpdate) -> Page:
    with write_guard(db):
        page = get_page(db, page_id)
        if not page:
            raise PageNotFoundError(f"Page not found: {page_id}", page_id=page_id)

        update_data = data.model_dump(exclude_unset=True)
        if "task_status" in update_data:
            update_data["task_status"] = normalize_status(update_data["task_status"])
        if "task_priority" in update_data:
            update_data["task_priority"] = normalize_priority(update_data["task_priority"])
        if "tags" in update_data:
            update_data["tags"] = list(update_data["tags"] or [])
        # colonnes NOT NULL : un null explicite ne les efface pas
        for field in ("title", "content", "pinned"):
            if field in update_data and update_data[field] is None:
                del update_data[field]

        for field, value in update_data.items():
            setattr(page, field, value)

        # strictement croissant même dans la même milliseconde
        page.updated_at = max(now_ms(), page.updated_at + 1)
        commit(db, "update", page_id)

    db.refresh(page)
    logger.debug(f"Updated page {page_id}: {sorted(update_data)}")
    return page


# func 4: delete_page()
def delete_page(db: Session, page_id: str) -> None:
    # HARD DELETE, idempotent
    # db.delete() : le DELETE part au flush, donc dans commit()
    with write_guard(db):
        page = get_page(db, page_id)
        if not page:
            return
        db.delete(page)
        commit(db, "delete", page_id)

    logger.debug(f"Deleted page {page_id}")
