# package marker for app.api
# Re-export the FastAPI `app` and its factory.
from .main import app, create_app

__all__ = ["app", "create_app"]
