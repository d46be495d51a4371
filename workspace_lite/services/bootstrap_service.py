"""
Données d'exemple créées au premier lancement (table vide)
"""

import logging
from sqlalchemy.orm import Session

from workspace_lite.models.page import Page
from workspace_lite.services.page_service import commit, now_ms
from workspace_lite.core.database import write_guard

logger = logging.getLogger(__name__)

WELCOME_CONTENT = """# Bienvenue dans Workspace Lite !

Votre espace de travail personnel hors ligne pour organiser notes, tâches et documentation.

## 🚀 Fonctionnalités

### Notes
Créez et organisez vos idées et informations. Formatage Markdown supporté.

### Tâches
Gérez vos tâches avec :
- des statuts (Backlog, En cours, Terminé)
- des échéances
- des priorités (Basse, Moyenne, Haute)

### Instructions
Conservez la documentation de travail avec :
- un responsable
- un numéro de version
- un statut d'approbation

## 🏷️ Organisation

Utilisez les **tags** pour classer les pages et **épinglez** les documents importants.

---

*Toutes les données restent sur votre ordinateur. Aucune synchronisation cloud.*"""

EXAMPLE_TASK_CONTENT = """## Description

Découvrir les fonctions principales :

- [ ] Créer une nouvelle note
- [ ] Ajouter des tags à une page
- [ ] Essayer la recherche
- [ ] Changer le statut d'une tâche

## Notes

Workspace Lite fonctionne entièrement hors ligne. Les données sont stockées dans une base SQLite locale."""


def seed_initial_pages(db: Session) -> bool:
    """Insère la page d'accueil + une tâche d'exemple si la base est vide.

    Retourne True si les exemples ont été créés.
    """
    with write_guard(db):
        if db.query(Page).count() > 0:
            return False

        now = now_ms()
        welcome = Page(
            id="welcome-doc",
            type="doc",
            title="👋 Bienvenue dans Workspace Lite",
            content=WELCOME_CONTENT,
            tags=["guide", "démarrage"],
            pinned=True,
            created_at=now,
            updated_at=now,
            doc_owner="Système",
            doc_version="1.0",
            doc_approved=True,
        )
        example_task = Page(
            id="example-task",
            type="task",
            title="Découvrir Workspace Lite",
            content=EXAMPLE_TASK_CONTENT,
            tags=["exemple", "tutoriel"],
            pinned=False,
            created_at=now - 1000,
            updated_at=now - 1000,
            task_status="in_progress",
            task_priority="high",
        )
        db.add_all([welcome, example_task])
        commit(db, "seed", "welcome-doc")

    logger.info("Seeded workspace with example pages")
    return True
