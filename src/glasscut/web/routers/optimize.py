"""Glass optimization endpoint."""

from fastapi import APIRouter

from glasscut.application.config import load_config_from_dict
from glasscut.infrastructure.formatters import JsonExporter
from glasscut.web.dependencies import OptimizeCommandDep
from glasscut.web.schemas.requests import OptimizeRequest
from glasscut.web.schemas.responses import ErrorResponseSchema, OptimizeResponseSchema

router = APIRouter(prefix="/optimize", tags=["optimize"])


@router.post(
    "",
    response_model=OptimizeResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def optimize_glass(
    request: OptimizeRequest,
    command: OptimizeCommandDep,
) -> OptimizeResponseSchema:
    """Pack a glass job and price the stock sheets.

    Packing failures (panels too large, invalid stock) are returned as
    error line items with ``is_valid`` false, not as HTTP errors.
    """
    config = load_config_from_dict(request.config)
    output = command.execute_config(config)

    data = JsonExporter().to_dict(output.summary)
    data.pop("has_errors")
    return OptimizeResponseSchema(is_valid=output.is_valid, **data)
