# backend/client_orders/core/exceptions.py
"""
Excepciones de dominio de la aplicación.

Los servicios y el gateway de persistencia lanzan estas excepciones; la capa
de la API las captura en un único manejador y las traduce a una respuesta
JSON {"message": ...} con el código HTTP asociado a cada tipo.
"""

from typing import Optional


class ServiceError(Exception):
    """Error base de la aplicación. Cada subclase fija su código HTTP."""
    status_code: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ========================================
# ERRORES DE PETICIÓN
# ========================================

class ValidationError(ServiceError):
    """Faltan campos obligatorios en la petición."""
    status_code = 400
    default_message = "Invalid request"


class NotFoundError(ServiceError):
    """El cliente referenciado no existe."""
    status_code = 404
    default_message = "Client not found"


class ConflictError(ServiceError):
    """El recurso ya existe. Reutiliza el código 400 de validación."""
    status_code = 400
    default_message = "Resource already exists"


class ClientAlreadyExists(ConflictError):
    default_message = "User already exists"


# ========================================
# ERRORES DE PERSISTENCIA
# ========================================

class PersistenceError(ServiceError):
    """Fallo inesperado de una operación sobre el almacén."""
    status_code = 500
    default_message = "Storage operation failed"


class StoreUnavailable(PersistenceError):
    """No se puede contactar con la base de datos."""
    default_message = "Storage is unavailable"


class UniqueConstraintViolation(PersistenceError):
    """La inserción viola una restricción de unicidad (p. ej. email de cliente)."""
    default_message = "Unique constraint violated"
