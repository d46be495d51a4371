"""Page model"""

from sqlalchemy import Column, String, Text, BigInteger, Boolean, JSON
from workspace_lite.core.database import Base

PAGE_TYPES = ("note", "task", "doc")
TASK_STATUSES = ("backlog", "in_progress", "done")
TASK_PRIORITIES = ("low", "med", "high")


class Page(Base):
    __tablename__ = "pages"

    # noms de colonnes camelCase = format du fichier workspace.db
    id = Column(String, primary_key=True)
    type = Column(String, nullable=False, index=True)

    title = Column(String, nullable=False)
    content = Column(Text, nullable=False, default="")
    tags = Column(JSON, nullable=False, default=list)
    pinned = Column(Boolean, nullable=False, default=False, index=True)

    created_at = Column("createdAt", BigInteger, nullable=False, index=True)  # epoch ms
    updated_at = Column("updatedAt", BigInteger, nullable=False, index=True)

    # Champs tâches
    task_status = Column("taskStatus", String, nullable=True, index=True)
    task_due_date = Column("taskDueDate", BigInteger, nullable=True, index=True)
    task_priority = Column("taskPriority", String, nullable=True)

    # Champs instructions
    doc_owner = Column("docOwner", String, nullable=True)
    doc_version = Column("docVersion", String, nullable=True)
    doc_approved = Column("docApproved", Boolean, nullable=True)

    def __repr__(self):
        return f"<Page {self.id} type={self.type} title={self.title!r}>"
