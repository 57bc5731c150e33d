# backend/client_orders/api/errors.py
"""
Traducción de errores de dominio a respuestas HTTP.

Todas las respuestas de error tienen la forma {"message": ...}.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from client_orders.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body."

async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> 400: {exc.errors()}")
    return JSONResponse(status_code=400, content={"message": INVALID_BODY_MESSAGE})

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
