# backend/client_orders/api/endpoints/clients.py
"""
Endpoint de registro de clientes.
"""

from fastapi import APIRouter, Depends

from client_orders.api import deps
from client_orders.api.validation import require_fields
from client_orders.schemas.client_schema import ClientCreateRequest, ClientCreateResponse
from client_orders.schemas.common_schema import MessageResponse
from client_orders.services.client_directory import ClientDirectory

router = APIRouter()

MISSING_FIELDS_MESSAGE = "Please provide email and name."
CLIENT_ADDED_MESSAGE = "User added successfully"

@router.post(
    "/add-client",
    response_model=ClientCreateResponse,
    summary="Add a new user",
    responses={
        200: {"description": "User added successfully"},
        400: {"model": MessageResponse, "description": "User already exists or data is missing"},
    },
)
async def add_client(
    payload: ClientCreateRequest,
    directory: ClientDirectory = Depends(deps.get_client_directory),
) -> ClientCreateResponse:
    """Registra un cliente con isNew=false. Responde 400 si el email ya existe."""
    data = payload.data
    require_fields(data, "email", "name", message=MISSING_FIELDS_MESSAGE)

    client = await directory.register(data.email, data.name)
    return ClientCreateResponse(message=CLIENT_ADDED_MESSAGE, client=client)
