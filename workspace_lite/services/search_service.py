import re
from sqlalchemy.orm import Session
from workspace_lite.models.page import Page
from typing import List

MIN_QUERY_LENGTH = 2
MAX_RESULTS = 20
SNIPPET_CONTEXT = 30  # caractères autour du match
PREVIEW_LENGTH = 100
ELLIPSIS = "..."
HIGHLIGHT_OPEN = "<mark>"
HIGHLIGHT_CLOSE = "</mark>"


class SearchResult:
    def __init__(self, id: str, title: str, type: str, snippet: str):
        self.id = id
        self.title = title
        self.type = type
        self.snippet = snippet

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "type": self.type, "snippet": self.snippet}


def query_pattern(query: str):
    # texte littéral, insensible à la casse
    return re.compile(re.escape(query), re.IGNORECASE)


def highlight(text: str, query: str) -> str:
    # chaque occurrence, casse d'origine conservée
    return query_pattern(query).sub(lambda m: f"{HIGHLIGHT_OPEN}{m.group(0)}{HIGHLIGHT_CLOSE}", text)


def build_snippet(content: str, query: str) -> str:
    # index dans le contenu d'origine (pas dans content.lower(), dont la longueur peut changer)
    match = query_pattern(query).search(content)

    if match is None:
        # match seulement dans le titre
        preview = content[:PREVIEW_LENGTH]
        if len(content) > PREVIEW_LENGTH:
            preview += ELLIPSIS
        return preview

    index = match.start()
    start = max(0, index - SNIPPET_CONTEXT)
    end = min(len(content), match.end() + SNIPPET_CONTEXT)
    snippet = highlight(content[start:end], query)
    if start > 0:
        snippet = ELLIPSIS + snippet
    if end < len(content):
        snippet += ELLIPSIS
    return snippet


def search_pages(db: Session, query: str) -> List[SearchResult]:
    """Recherche titre/contenu, les matchs dans le titre d'abord.

    Pas de LIKE : '%' et '_' sont cherchés littéralement et la casse
    est ignorée aussi hors ASCII.
    """
    query = (query or "").strip()
    if len(query) < MIN_QUERY_LENGTH:
        return []

    pattern = query_pattern(query)
    title_hits = []
    content_hits = []

    for page in db.query(Page).order_by(Page.updated_at.desc()).all():
        if pattern.search(page.title):
            title_hits.append(page)
        elif pattern.search(page.content or ""):
            content_hits.append(page)

    results = []
    for page in (title_hits + content_hits)[:MAX_RESULTS]:
        results.append(SearchResult(
            id=page.id,
            title=page.title,
            type=page.type,
            snippet=build_snippet(page.content or "", query)
        ))

    return results
