# backend/client_orders/schemas/client_schema.py
"""
Se encarga de definir los esquemas Pydantic para el modelo Client.

Client es el registro tipado que devuelve el gateway de persistencia; el
resto son los cuerpos de petición y respuesta de /add-client.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class Client(BaseModel):
    """Registro de cliente tal y como se almacena y se expone en la API."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    user_id: Optional[int] = Field(None, description="Identificador numérico (nunca asignado)")
    email: str = Field(..., description="Email del cliente, clave única")
    name: Optional[str] = Field(None, description="Nombre visible del cliente")
    is_new: bool = Field(False, alias="isNew", description="Creado automáticamente desde /company-info")

class ClientCreateData(BaseModel):
    """Datos de registro. La presencia de los campos se valida en el endpoint."""
    email: Optional[str] = Field(None, description="Email del usuario")
    name: Optional[str] = Field(None, description="Nombre del usuario")

class ClientCreateRequest(BaseModel):
    data: Optional[ClientCreateData] = None

class ClientCreateResponse(BaseModel):
    status: str = "success"
    message: str
    client: Client
