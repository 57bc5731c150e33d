# backend/client_orders/services/order_ledger.py
"""
Servicio de libro de pedidos.

Consulta los pedidos de un cliente, asigna el siguiente order_id secuencial
y crea pedidos nuevos en estado "processing".

Asignación de order_id (ORDER_ID_STRATEGY):
- "max_plus_one": lee el pedido con mayor order_id y suma 1 (1 si no hay
  pedidos). La lectura y la inserción no son atómicas: dos peticiones
  concurrentes pueden obtener el mismo order_id.
- "counter": incrementa de forma atómica un contador en la base de datos,
  inicializado con el máximo existente la primera vez.
"""

import logging
from typing import List, Optional, Union

from client_orders.core.exceptions import PersistenceError
from client_orders.db.gateway import ORDERS, PersistenceGateway
from client_orders.schemas.order_schema import Order, OrderStatus

logger = logging.getLogger(__name__)

ORDER_ID_FIELD = "order_id"
MAX_PLUS_ONE = "max_plus_one"
COUNTER = "counter"


class OrderLedger:

    def __init__(self, gateway: PersistenceGateway, id_strategy: str = MAX_PLUS_ONE):
        if id_strategy not in (MAX_PLUS_ONE, COUNTER):
            raise ValueError(f"Estrategia de order_id desconocida: '{id_strategy}'")
        self.gateway = gateway
        self.id_strategy = id_strategy

    async def list_for_client(self, email: str) -> List[Order]:
        """Obtiene todos los pedidos de un cliente, en el orden nativo del almacén."""
        return await self.gateway.find_many(ORDERS, email=email)

    async def next_order_id(self) -> int:
        """Calcula el siguiente order_id como máximo existente + 1, o 1 si no hay pedidos."""
        last_order = await self.gateway.find_max_by_field(ORDERS, ORDER_ID_FIELD)
        return last_order.order_id + 1 if last_order is not None else 1

    async def _assign_order_id(self) -> int:
        if self.id_strategy == COUNTER:
            return await self.gateway.increment_counter(ORDER_ID_FIELD, ORDERS, ORDER_ID_FIELD)
        return await self.next_order_id()

    async def place(self, email: str, total: Optional[Union[int, float]]) -> Order:
        """
        Crea un pedido nuevo para `email`.

        PRECONDICIÓN: el llamante ya ha comprobado que el cliente existe.

        Raises:
            PersistenceError: si la lectura del máximo o la inserción fallan
        """
        try:
            order_id = await self._assign_order_id()
            order = await self.gateway.insert(
                ORDERS,
                Order(order_id=order_id, email=email, status=OrderStatus.PROCESSING.value, total=total),
            )
        except PersistenceError as e:
            logger.error(f"No se pudo crear el pedido para '{email}': {e.message}")
            raise PersistenceError("An error occurred while placing the order.") from e

        logger.info(f"Pedido {order.order_id} creado para '{email}' (total={order.total})")
        return order
