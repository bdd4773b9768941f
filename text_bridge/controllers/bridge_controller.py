"""Controllers for the bridge endpoint."""

from fastapi import APIRouter, Depends
from loguru import logger

from ..models.outcome import Failure, Success
from ..models.submit_request import SubmitRequest
from ..services.bridge_service import RequestBridge, get_request_bridge
from ..utils.error_handler import error_from_failure

router = APIRouter(prefix="", tags=["Bridge"])


@router.post("/submit", response_model=Success)
async def submit_endpoint(
    request: SubmitRequest,
    bridge: RequestBridge = Depends(get_request_bridge),
) -> Success:
    """Forward the submitted text and return the remote endpoint's body.

    Failures are raised as :class:`BridgeError` and rendered by the
    application's exception handler as a 502 (or 503 when cancelled)
    whose body is the serialised :class:`Failure`.
    """
    logger.info("Received submission of {} characters", len(request.text))
    outcome = await bridge.send(request.text)
    if isinstance(outcome, Failure):
        raise error_from_failure(outcome)
    return outcome
