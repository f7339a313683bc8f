"""Job validation endpoint."""

from fastapi import APIRouter

from glasscut.application.config import (
    ConfigError,
    config_to_panels,
    load_config_from_dict,
)
from glasscut.web.schemas.requests import ConfigValidateRequest
from glasscut.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a glass job without packing it."""
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[{"path": d["path"], "message": d["message"]} for d in e.details],
        )

    return ValidationResultSchema(
        is_valid=True,
        panel_count=len(config_to_panels(config)),
    )
