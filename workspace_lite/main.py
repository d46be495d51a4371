import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from workspace_lite.core.config import settings
from workspace_lite.core.database import Workspace
from workspace_lite.core.errors import WorkspaceError, PageNotFoundError, StorageError, InvalidPageTypeError, InvalidQueryError
from workspace_lite.routers import health, pages, search, tags, templates

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    PageNotFoundError: 404,
    InvalidPageTypeError: 422,
    InvalidQueryError: 422,
    StorageError: 503,
}


def configure_logging(level: str = None):
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


async def workspace_error_handler(request: Request, exc: WorkspaceError):
    status_code = ERROR_STATUS.get(type(exc), 500)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=status_code, content={"detail": exc.message, **exc.to_dict()})


def create_app(workspace: Workspace = None) -> FastAPI:
    workspace = workspace or Workspace()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        # Init DB (+ exemples au premier lancement)
        workspace.open()
        yield
        workspace.close()

    app = FastAPI(
        title="Workspace Lite API",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.workspace = workspace
    app.add_exception_handler(WorkspaceError, workspace_error_handler)

    # Routes
    app.include_router(health.router, prefix="/health")
    app.include_router(pages.router)
    app.include_router(search.router)
    app.include_router(tags.router)
    app.include_router(templates.router)
    return app


app = create_app()
