from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])

@router.get("/health")
def health(request: Request):
    app = request.app
    return {"status": "ok", "app": app.title, "version": app.version}
