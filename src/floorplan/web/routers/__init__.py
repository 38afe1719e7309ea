"""API routers for the REST API."""

from floorplan.web.routers.export import router as export_router
from floorplan.web.routers.plan import router as plan_router
from floorplan.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "plan_router",
    "validate_router",
]
