"""API endpoints for the swap router compiler."""

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from swap_router.api.models import ErrorResponse, SwapRequest, SwapResponse
from swap_router.config import RouterConfig
from swap_router.errors import RouterError
from swap_router.router import swap_call_parameters

logger = structlog.get_logger()

router = APIRouter()


def get_config() -> RouterConfig:
    """Dependency provider for the compiler configuration.

    Override this in tests to inject a custom config:
        app.dependency_overrides[get_config] = lambda: custom_config

    Returns:
        The configuration read from the environment.
    """
    return RouterConfig.from_env()


@router.post(
    "/swap",
    response_model=SwapResponse,
    responses={400: {"model": ErrorResponse}},
)
async def swap(
    request: SwapRequest,
    config: RouterConfig = Depends(get_config),
) -> SwapResponse | JSONResponse:
    """Compile quoted legs into router calldata.

    Error Handling:
        - Invalid request schema: Returns 422 Validation Error (Pydantic)
        - Router error (mismatched legs, invalid route, bad address): Returns 400
    """
    logger.info(
        "received_swap_request",
        chain_id=request.chain_id,
        trade_type=request.trade_type.value,
        legs=len(request.legs),
    )

    try:
        trades = request.to_trades()
        parameters = swap_call_parameters(trades, request.options.to_options(), config)
    except (RouterError, ValueError) as err:
        logger.warning("swap_request_rejected", error=type(err).__name__, detail=str(err))
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(detail=str(err), error=type(err).__name__).model_dump(),
        )

    logger.info(
        "returning_method_parameters",
        calls=len(parameters.calldatas),
        value=parameters.value,
    )
    return SwapResponse(
        calldata=parameters.calldata,
        value=parameters.value,
        calldatas=list(parameters.calldatas),
    )
