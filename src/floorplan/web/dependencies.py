"""FastAPI dependency injection for floor plan services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from floorplan.application.commands import GenerateFloorPlanCommand


@lru_cache(maxsize=1)
def get_plan_command() -> GenerateFloorPlanCommand:
    """Shared command instance, so its result cache spans requests."""
    return GenerateFloorPlanCommand()


PlanCommandDep = Annotated[GenerateFloorPlanCommand, Depends(get_plan_command)]
