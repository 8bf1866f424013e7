"""
FastAPI routers.

Each module exposes an APIRouter that app.py includes. Routers only marshal
arguments and map service exceptions to status codes.
"""
