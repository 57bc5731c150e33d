# backend/client_orders/api/validation.py
"""
Comprobaciones de presencia de campos en los cuerpos de petición.
"""

from typing import Iterable, Optional

from pydantic import BaseModel

from client_orders.core.exceptions import ValidationError

def require_fields(
    data: Optional[BaseModel],
    *fields: str,
    message: str,
    nullable: Iterable[str] = (),
) -> None:
    """
    Lanza ValidationError si falta `data` o alguno de los campos.

    Un campo se considera ausente si es None o una cadena vacía; el valor 0
    es un valor presente. Los campos de `nullable` solo están ausentes si la
    clave no aparece en el cuerpo: un null explícito es un valor.
    """
    if data is None:
        raise ValidationError(message)
    nullable = set(nullable)
    for field in fields:
        if field in nullable:
            if field not in data.model_fields_set:
                raise ValidationError(message)
            continue
        value = getattr(data, field, None)
        if value is None or value == "":
            raise ValidationError(message)
