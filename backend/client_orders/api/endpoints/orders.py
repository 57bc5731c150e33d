# backend/client_orders/api/endpoints/orders.py
"""
Endpoints de pedidos: consulta de pedidos de un cliente y creación de pedidos.
"""

from fastapi import APIRouter, Depends, Query

from client_orders.api import deps
from client_orders.api.validation import require_fields
from client_orders.core.exceptions import NotFoundError
from client_orders.schemas.common_schema import MessageResponse
from client_orders.schemas.order_schema import ClientOrdersResponse, OrderCreateRequest, OrderCreateResponse
from client_orders.services.client_directory import ClientDirectory
from client_orders.services.order_ledger import OrderLedger

router = APIRouter()

CLIENT_NOT_FOUND_MESSAGE = "Client not found"
USER_NOT_FOUND_MESSAGE = "User not found"
MISSING_FIELDS_MESSAGE = "Please provide email and order total."
ORDER_PLACED_MESSAGE = "Order placed successfully"

@router.get(
    "/get-client-orders",
    response_model=ClientOrdersResponse,
    summary="Get a client's orders by email",
    responses={
        200: {"description": "Success"},
        404: {"model": MessageResponse, "description": "Client not found"},
    },
)
async def get_client_orders(
    email: str = Query("", description="User email"),
    directory: ClientDirectory = Depends(deps.get_client_directory),
    ledger: OrderLedger = Depends(deps.get_order_ledger),
) -> ClientOrdersResponse:
    """Lista los pedidos de un cliente registrado."""
    if await directory.lookup(email) is None:
        raise NotFoundError(CLIENT_NOT_FOUND_MESSAGE)

    orders = await ledger.list_for_client(email)
    return ClientOrdersResponse(is_new_client=False, orders=orders)

@router.post(
    "/create-order",
    response_model=OrderCreateResponse,
    summary="Place a new order",
    responses={
        200: {"description": "Order placed successfully"},
        400: {"model": MessageResponse, "description": "Invalid order data"},
        404: {"model": MessageResponse, "description": "User not found"},
        500: {"model": MessageResponse, "description": "The order could not be stored"},
    },
)
async def create_order(
    payload: OrderCreateRequest,
    directory: ClientDirectory = Depends(deps.get_client_directory),
    ledger: OrderLedger = Depends(deps.get_order_ledger),
) -> OrderCreateResponse:
    """
    Crea un pedido en estado "processing" para un cliente existente.

    total=0 y total=null son válidos; solo se rechaza un total ausente.
    """
    data = payload.data
    require_fields(data, "email", "total", message=MISSING_FIELDS_MESSAGE, nullable=("total",))

    if await directory.lookup(data.email) is None:
        raise NotFoundError(USER_NOT_FOUND_MESSAGE)

    order = await ledger.place(data.email, data.total)
    return OrderCreateResponse(message=ORDER_PLACED_MESSAGE, order=order)
