"""Entry points for the Personas FastAPI app."""
from api.app import app, create_app

__all__ = ["app", "create_app"]
