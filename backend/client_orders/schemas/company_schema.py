# backend/client_orders/schemas/company_schema.py
"""
Esquemas de /company-info.
"""

from pydantic import BaseModel

from client_orders.core.config import Settings

class CompanyInfo(BaseModel):
    name: str
    description: str
    contacts: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "CompanyInfo":
        return cls(
            name=settings.COMPANY_NAME,
            description=settings.COMPANY_DESCRIPTION,
            contacts=settings.COMPANY_CONTACTS,
        )

class CompanyInfoResponse(BaseModel):
    is_new_client: bool
    company_info: CompanyInfo
