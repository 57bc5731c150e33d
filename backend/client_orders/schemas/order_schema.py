# backend/client_orders/schemas/order_schema.py
"""
Se encarga de definir los esquemas Pydantic para el modelo Order.
"""

from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
import enum

class OrderStatus(str, enum.Enum):
    """Estados de una orden. Solo existe el estado inicial."""
    PROCESSING = "processing"

class Order(BaseModel):
    """Registro de pedido tal y como se almacena y se expone en la API."""
    model_config = ConfigDict(from_attributes=True)

    order_id: int = Field(..., description="Identificador secuencial global")
    email: str = Field(..., description="Email del cliente")
    status: str = Field(OrderStatus.PROCESSING.value, description="Estado de la orden")
    total: Optional[Union[int, float]] = Field(None, description="Monto total de la orden")

    @field_validator("total")
    @classmethod
    def integral_total_as_int(cls, v):
        # La columna es de coma flotante: 50 se lee como 50.0
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v

class OrderCreateData(BaseModel):
    email: Optional[str] = Field(None, description="Email del usuario")
    total: Optional[Union[int, float]] = Field(None, description="Monto total de la orden (puede ser null)")

class OrderCreateRequest(BaseModel):
    data: Optional[OrderCreateData] = None

class OrderCreateResponse(BaseModel):
    status: str = "success"
    message: str
    order: Order

class ClientOrdersResponse(BaseModel):
    is_new_client: bool = False
    orders: List[Order] = []
