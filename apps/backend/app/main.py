"""
Name: Portfolio API ASGI Entrypoint (app.main)

Responsibilities:
  - Expose the FastAPI app at the path uvicorn is pointed to (app.main:app)

Collaborators:
  - app.api.main: builds the app (create_app) and owns the lifespan

Notes:
  - Thin on purpose: no configuration or IO here
"""

from app.api.main import app

__all__ = ["app"]
