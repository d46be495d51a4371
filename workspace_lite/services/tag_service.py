from sqlalchemy.orm import Session
from typing import List
from workspace_lite.models.page import Page


def list_tags(db: Session) -> List[str]:
    # tous les tags utilisés, sans doublons, triés
    tag_set = set()
    for (tags,) in db.query(Page.tags).all():
        tag_set.update(tags or [])
    return sorted(tag_set)
