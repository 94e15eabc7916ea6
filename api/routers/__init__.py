"""
FastAPI routers grouped by resource (person, verify-email).

Each module exposes an APIRouter that is included by the app factory
(app.py), keeping endpoint definitions close to their use cases.
"""
