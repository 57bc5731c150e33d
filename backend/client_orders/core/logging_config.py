# backend/client_orders/core/logging_config.py
"""
Configuración del logging de la aplicación.

Se invoca una sola vez al arrancar el proceso; el resto de módulos
obtienen su logger con logging.getLogger(__name__).
"""

import logging

from client_orders.core.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configura el logger raíz con el nivel y formato definidos en settings."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=settings.LOG_FORMAT,
    )
