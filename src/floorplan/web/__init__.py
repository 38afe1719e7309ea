"""FastAPI REST API for floor plans.

Computes plans and board layouts from configuration documents, validates
configurations and exports drawings.

Usage:
    uvicorn floorplan.web:app --reload
"""

from floorplan.web.app import app, create_app

__all__ = ["app", "create_app"]
