import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

import itertools
import pytest
from fastapi.testclient import TestClient

from workspace_lite.core.database import Workspace
from workspace_lite.main import create_app
from workspace_lite.services import page_service


@pytest.fixture
def workspace(tmp_path):
    """Workspace isolé sur un fichier SQLite temporaire (sans exemples)"""
    ws = Workspace(f"sqlite:///{tmp_path / 'test.db'}", seed=False)
    ws.open()
    yield ws
    ws.close()


@pytest.fixture
def db(workspace):
    """Session DB pour les tests"""
    db = workspace.session()
    yield db
    db.close()


@pytest.fixture
def client(workspace):
    """Client de test FastAPI branché sur le workspace temporaire"""
    app = create_app(workspace)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def clock(monkeypatch):
    """Horloge déterministe : chaque appel avance d'une seconde"""
    ticks = itertools.count(start=1_700_000_000_000, step=1000)
    monkeypatch.setattr(page_service, "now_ms", lambda: next(ticks))
    return ticks
