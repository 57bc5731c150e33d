# backend/client_orders/api/router.py
"""
Router principal de la API.

Registra los routers de cada dominio. Las rutas se publican en la raíz
(/company-info, /add-client, ...) sin prefijo de versión.
"""

from fastapi import APIRouter

from client_orders.api.endpoints import clients, company, operator, orders

api_router = APIRouter()

# INFORMACIÓN DE LA COMPAÑÍA (alta automática de clientes)
api_router.include_router(company.router, tags=["Company"])

# REGISTRO DE CLIENTES
api_router.include_router(clients.router, tags=["Clients"])

# PEDIDOS
api_router.include_router(orders.router, tags=["Orders"])

# DERIVACIÓN A OPERADOR (stub)
api_router.include_router(operator.router, tags=["Operator"])
