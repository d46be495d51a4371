from os import getenv
from pathlib import Path

class Settings:
    DATA_DIR = Path(getenv("WORKSPACE_DATA_DIR", str(Path.home() / ".workspace-lite"))).expanduser()
    DATABASE_URL = getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'workspace.db'}")
    SEED_ON_FIRST_RUN = getenv("WORKSPACE_SEED", "1") not in ("0", "false", "no")  # exemples au 1er lancement
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
