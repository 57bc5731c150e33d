# backend/client_orders/api/endpoints/operator.py
"""
Endpoint de derivación a un operador humano.

Es un stub: valida la petición y comprueba que el cliente existe, pero no
contacta con ningún operador.
"""

import logging

from fastapi import APIRouter, Depends

from client_orders.api import deps
from client_orders.api.validation import require_fields
from client_orders.core.exceptions import NotFoundError
from client_orders.schemas.common_schema import MessageResponse
from client_orders.schemas.operator_schema import OperatorRequest, OperatorResponse
from client_orders.services.client_directory import ClientDirectory

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_FIELDS_MESSAGE = "Please provide email and request."
CLIENT_NOT_FOUND_MESSAGE = "Client not found"
FORWARDED_MESSAGE = "Your request has been forwarded to an operator. Please wait for a response."

@router.post(
    "/connect-operator",
    response_model=OperatorResponse,
    summary="Forward a request to an operator",
    responses={
        200: {"description": "Request forwarded to an operator"},
        400: {"model": MessageResponse, "description": "Email or request missing"},
        404: {"model": MessageResponse, "description": "Client not found"},
    },
)
async def connect_operator(
    payload: OperatorRequest,
    directory: ClientDirectory = Depends(deps.get_client_directory),
) -> OperatorResponse:
    data = payload.data
    require_fields(data, "email", "request", message=MISSING_FIELDS_MESSAGE)

    if await directory.lookup(data.email) is None:
        raise NotFoundError(CLIENT_NOT_FOUND_MESSAGE)

    logger.info(f"Solicitud de operador recibida de '{data.email}' (no se deriva: stub)")
    return OperatorResponse(message=FORWARDED_MESSAGE)
