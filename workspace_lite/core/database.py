import logging
import threading
from contextlib import contextmanager
from pathlib import Path

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from workspace_lite.core.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


class Workspace:
    """Un fichier SQLite de pages, ouvert/fermé par l'hôte.

    Pas de handle global : chaque Workspace a son engine, ses sessions
    et son verrou d'écriture, on peut donc en ouvrir plusieurs (tests).
    """

    def __init__(self, database_url: str = None, seed: bool = None):
        self.database_url = database_url or settings.DATABASE_URL
        self.seed = settings.SEED_ON_FIRST_RUN if seed is None else seed
        self.engine = None
        self.SessionLocal = None
        self._write_lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def open(self) -> "Workspace":
        if self.is_open:
            return self

        url = make_url(self.database_url)
        connect_args = {}
        if url.drivername.startswith("sqlite"):
            # FastAPI sert les routes sync dans un threadpool
            connect_args["check_same_thread"] = False
            # URI sqlite (file:...?mode=ro) : fichier déjà existant
            if url.database not in (None, "", ":memory:") and not url.query.get("uri"):
                Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(self.database_url, echo=False, connect_args=connect_args)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        # Les modèles doivent être importés avant create_all
        from workspace_lite.models import page  # noqa: F401
        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Workspace opened: {self.database_url}")

        if self.seed:
            from workspace_lite.services.bootstrap_service import seed_initial_pages
            with self.session() as db:
                seed_initial_pages(db)
        return self

    def close(self):
        if self.engine is not None:
            self.engine.dispose()
            logger.info(f"Workspace closed: {self.database_url}")
        self.engine = None
        self.SessionLocal = None

    def session(self) -> Session:
        if not self.is_open:
            raise RuntimeError("Workspace is not open")
        db = self.SessionLocal()
        db.info["write_lock"] = self._write_lock
        return db

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()


@contextmanager
def write_guard(db: Session):
    # Une seule mutation à la fois par workspace (mutation + commit)
    lock = db.info.get("write_lock")
    if lock is None:
        yield
        return
    with lock:
        yield


def get_db(request: Request):
    """Dépendance sessionDB"""
    db = request.app.state.workspace.session()
    try:
        yield db
    finally:
        db.close()
