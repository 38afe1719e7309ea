"""Application layer - use cases and orchestration."""

from .commands import GenerateFloorPlanCommand
from .dtos import PlanOutput, WallInput, WallRecord

__all__ = [
    "GenerateFloorPlanCommand",
    "PlanOutput",
    "WallInput",
    "WallRecord",
]
