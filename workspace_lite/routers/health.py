from fastapi import APIRouter, Request

router = APIRouter()

@router.get("/z")
def healthz(request: Request):
    # Check si l'API est up et la base ouverte
    workspace = request.app.state.workspace
    return {"status": "ok" if workspace.is_open else "closed"}
