# backend/client_orders/services/client_directory.py
"""
Servicio de directorio de clientes.

Resuelve clientes por email, los crea automáticamente en el primer contacto
(/company-info) y gestiona el registro explícito (/add-client).
"""

import logging
from typing import Optional, Tuple

from client_orders.core.exceptions import ClientAlreadyExists, UniqueConstraintViolation
from client_orders.db.gateway import CLIENTS, PersistenceGateway
from client_orders.schemas.client_schema import Client

logger = logging.getLogger(__name__)

DEFAULT_CLIENT_NAME = "New User"


class ClientDirectory:
    """
    Operaciones de negocio sobre clientes.

    El gateway se recibe en el constructor; el servicio no mantiene
    ningún otro estado.
    """

    def __init__(self, gateway: PersistenceGateway):
        self.gateway = gateway

    async def lookup(self, email: str) -> Optional[Client]:
        """Busca un cliente por email. Devuelve None si no existe."""
        return await self.gateway.find_one(CLIENTS, email=email)

    async def lookup_or_provision(self, email: str) -> Tuple[Client, bool]:
        """
        Busca un cliente por email y lo crea si no existe.

        Returns:
            Tupla (cliente, creado_ahora). El cliente creado lleva
            name="New User" e isNew=True.
        """
        client = await self.lookup(email)
        if client is not None:
            return client, False

        try:
            client = await self.gateway.insert(
                CLIENTS, Client(email=email, name=DEFAULT_CLIENT_NAME, is_new=True)
            )
        except UniqueConstraintViolation:
            # Otra petición lo creó entre la búsqueda y la inserción
            existing = await self.lookup(email)
            if existing is None:
                raise
            return existing, False

        logger.info(f"Cliente '{email}' creado automáticamente en el primer contacto")
        return client, True

    async def register(self, email: str, name: str) -> Client:
        """
        Registra un nuevo cliente con isNew=False.

        Raises:
            ClientAlreadyExists: si el email ya está registrado
        """
        if await self.lookup(email) is not None:
            raise ClientAlreadyExists()

        try:
            client = await self.gateway.insert(CLIENTS, Client(email=email, name=name, is_new=False))
        except UniqueConstraintViolation as e:
            raise ClientAlreadyExists() from e

        logger.info(f"Cliente '{email}' registrado")
        return client
