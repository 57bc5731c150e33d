# backend/client_orders/api/endpoints/company.py
"""
Endpoint de información de la compañía.

Además de devolver la información estática de la compañía, da de alta
automáticamente al cliente la primera vez que se consulta su email.
"""

from fastapi import APIRouter, Depends, Query

from client_orders.api import deps
from client_orders.core.config import Settings
from client_orders.schemas.company_schema import CompanyInfo, CompanyInfoResponse
from client_orders.services.client_directory import ClientDirectory

router = APIRouter()

@router.get(
    "/company-info",
    response_model=CompanyInfoResponse,
    summary="Get company information by user email",
    responses={200: {"description": "Success"}},
)
async def get_company_info(
    email: str = Query("", description="User email"),
    directory: ClientDirectory = Depends(deps.get_client_directory),
    settings: Settings = Depends(deps.get_settings),
) -> CompanyInfoResponse:
    """
    Devuelve la información de la compañía e indica si el cliente es nuevo.

    Si el email no está registrado se crea un cliente con name="New User"
    e isNew=True, y la respuesta lleva is_new_client=true. El contenido de
    company_info no depende del cliente.
    """
    _, created = await directory.lookup_or_provision(email)
    return CompanyInfoResponse(
        is_new_client=created,
        company_info=CompanyInfo.from_settings(settings),
    )
