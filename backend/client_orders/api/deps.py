# backend/client_orders/api/deps.py
"""
Módulo de dependencias para FastAPI.

Centraliza las dependencias inyectables en los endpoints. El gateway de
persistencia y la configuración se crean una vez al arrancar la aplicación
(ver main.create_app) y se guardan en app.state; los servicios se construyen
por petición sobre ese gateway compartido.
"""

from fastapi import Depends, Request

from client_orders.core.config import Settings
from client_orders.db.gateway import PersistenceGateway
from client_orders.services.client_directory import ClientDirectory
from client_orders.services.order_ledger import OrderLedger

def get_settings(request: Request) -> Settings:
    """
    Dependencia de FastAPI para obtener el objeto de configuración.
    """
    return request.app.state.settings

def get_gateway(request: Request) -> PersistenceGateway:
    """
    Dependencia de FastAPI para obtener el gateway de persistencia del proceso.
    """
    return request.app.state.gateway

def get_client_directory(gateway: PersistenceGateway = Depends(get_gateway)) -> ClientDirectory:
    return ClientDirectory(gateway)

def get_order_ledger(
    gateway: PersistenceGateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
) -> OrderLedger:
    return OrderLedger(gateway, id_strategy=settings.ORDER_ID_STRATEGY)
