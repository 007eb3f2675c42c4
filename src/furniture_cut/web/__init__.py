"""FastAPI REST API for sheet cutting.

Usage:
    uvicorn furniture_cut.web:app --reload
"""

from furniture_cut.web.app import app, create_app

__all__ = ["app", "create_app"]
