from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, List, Literal

# Schemas pour les pages
# JSON en camelCase (createdAt, taskStatus...), snake_case accepté en entrée

PageType = Literal["note", "task", "doc"]
TaskStatus = Literal["backlog", "in_progress", "done"]
SortBy = Literal["updatedAt", "createdAt", "dueDate", "priority"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageCreate(CamelModel):
    type: str
    title: str
    content: Optional[str] = ""
    tags: Optional[List[str]] = None
    # statut/priorité invalides -> None (normalisés par le service, pas rejetés)
    task_status: Optional[str] = None
    task_due_date: Optional[int] = None
    task_priority: Optional[str] = None
    doc_owner: Optional[str] = None
    doc_version: Optional[str] = None
    doc_approved: Optional[bool] = None


class PageUpdate(CamelModel):
    """Mise à jour partielle : seuls les champs envoyés sont appliqués"""
    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None
    pinned: Optional[bool] = None
    task_status: Optional[str] = None
    task_due_date: Optional[int] = None
    task_priority: Optional[str] = None
    doc_owner: Optional[str] = None
    doc_version: Optional[str] = None
    doc_approved: Optional[bool] = None


class PageFilters(CamelModel):
    type: Optional[PageType] = None
    task_status: Optional[TaskStatus] = None
    tags: Optional[List[str]] = None  # OU : au moins un des tags


class PageResponse(CamelModel):
    id: str
    type: str
    title: str
    content: str
    tags: List[str]
    pinned: bool
    created_at: int
    updated_at: int
    task_status: Optional[str]
    task_due_date: Optional[int]
    task_priority: Optional[str]
    doc_owner: Optional[str]
    doc_version: Optional[str]
    doc_approved: Optional[bool]

    model_config = ConfigDict(from_attributes=True)


class SearchResultResponse(CamelModel):
    id: str
    title: str
    type: str
    snippet: str


class TemplateRequest(CamelModel):
    type: PageType
    template_id: Optional[str] = None
