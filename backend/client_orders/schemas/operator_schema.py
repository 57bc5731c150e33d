# backend/client_orders/schemas/operator_schema.py
"""
Esquemas de /connect-operator.
"""

from typing import Optional
from pydantic import BaseModel, Field

class OperatorRequestData(BaseModel):
    email: Optional[str] = Field(None, description="Email del usuario")
    request: Optional[str] = Field(None, description="Descripción de la consulta del cliente")

class OperatorRequest(BaseModel):
    data: Optional[OperatorRequestData] = None

class OperatorResponse(BaseModel):
    status: str = "success"
    message: str
