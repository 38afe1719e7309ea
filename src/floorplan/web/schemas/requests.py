"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PlanRequest(BaseModel):
    """Request carrying a full floor plan configuration.

    The configuration has the same shape as a configuration file.
    """

    config: dict[str, Any] = Field(..., description="Floor plan configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Floor plan configuration JSON")
