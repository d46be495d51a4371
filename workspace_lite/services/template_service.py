"""
Service templates - une page taguée "_template" sert de modèle
"""

import logging
from sqlalchemy.orm import Session
from typing import List, Optional

from workspace_lite.core.errors import InvalidPageTypeError
from workspace_lite.models.page import Page, PAGE_TYPES
from workspace_lite.schemas.page import PageCreate, PageFilters
from workspace_lite.services.page_service import create_page, get_page
from workspace_lite.services.query_service import list_pages

logger = logging.getLogger(__name__)

TEMPLATE_TAG = "_template"

# ============ TEMPLATES PAR DÉFAUT ============

DEFAULT_TEMPLATES = {
    "note": {
        "title": "Nouvelle note",
        "content": "# Titre\n\nCommencez à écrire...",
        "tags": [],
    },
    "task": {
        "title": "Nouvelle tâche",
        "content": "## Description\n\n...\n\n## Checklist\n\n- [ ] Point 1\n- [ ] Point 2",
        "tags": [],
        "task_status": "backlog",
        "task_priority": "med",
    },
    "doc": {
        "title": "Nouvelle instruction",
        "content": "# Nom de l'instruction\n\n## Description\n\n...\n\n## Procédure\n\n1. Étape 1\n2. Étape 2",
        "tags": [],
        "doc_version": "1.0",
        "doc_approved": False,
    },
}


def is_template(page: Page) -> bool:
    return TEMPLATE_TAG in (page.tags or [])


def list_templates(db: Session, page_type: Optional[str] = None) -> List[Page]:
    if page_type is not None and page_type not in PAGE_TYPES:
        raise InvalidPageTypeError(f"Unknown page type: {page_type!r}", type=page_type)
    filters = PageFilters(type=page_type, tags=[TEMPLATE_TAG])
    return list_pages(db, filters, "updatedAt")


def page_data_from_template(template: Page) -> PageCreate:
    return PageCreate(
        type=template.type,
        title=template.title,
        content=template.content,
        tags=[t for t in template.tags if t != TEMPLATE_TAG],
        task_status=template.task_status,
        task_due_date=template.task_due_date,
        task_priority=template.task_priority,
        doc_owner=template.doc_owner,
        doc_version=template.doc_version,
        doc_approved=template.doc_approved,
    )


def create_from_template(db: Session, page_type: str, template_id: Optional[str] = None) -> Page:
    """
    Crée une nouvelle page à partir d'un template.

    Ordre de résolution :
    1. le template demandé (s'il existe, est un template et a le bon type)
    2. le premier template enregistré du type (tri updatedAt)
    3. le template par défaut du type

    Le template lui-même n'est jamais modifié.
    """
    if page_type not in PAGE_TYPES:
        raise InvalidPageTypeError(f"Unknown page type: {page_type!r}", type=page_type)

    if template_id:
        template = get_page(db, template_id)
        if template and is_template(template) and template.type == page_type:
            return create_page(db, page_data_from_template(template))
        logger.info(f"Template {template_id} not usable for type {page_type}, falling back")

    saved_templates = list_templates(db, page_type)
    if saved_templates:
        return create_page(db, page_data_from_template(saved_templates[0]))

    return create_page(db, PageCreate(type=page_type, **DEFAULT_TEMPLATES[page_type]))
