"""Configuration validation endpoints."""

from fastapi import APIRouter

from floorplan.application.config import load_config_from_dict, validate_config
from floorplan.web.schemas.requests import ConfigValidateRequest
from floorplan.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a configuration without computing a layout.

    Args:
        request: Request containing configuration to validate.

    Returns:
        Validation result with errors and warnings.

    Raises:
        ConfigError: If the configuration does not match the schema
            (mapped to 422).
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[
            {"message": e.message, "path": e.path, "value": e.value} for e in result.errors
        ],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
