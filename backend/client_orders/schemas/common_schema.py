# backend/client_orders/schemas/common_schema.py
from pydantic import BaseModel

class MessageResponse(BaseModel):
    """Cuerpo de todas las respuestas de error."""
    message: str
