"""API routers for the REST API."""

from furniture_cut.web.routers.cut import router as cut_router

__all__ = ["cut_router"]
