# backend/client_orders/core/config.py
"""
Este archivo contiene la configuración de la aplicación.
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Configuración de la aplicación usando Pydantic BaseSettings.
    Variables sensibles desde .env, defaults seguros para el resto.
    """
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Configuración general del proyecto
    PROJECT_NAME: str = "Client Orders API"
    PROJECT_VERSION: str = "1.0.0"
    PROJECT_DESCRIPTION: str = "API for client and order management"
    DOCS_URL: str = "/api-docs"

    # Configuración de la base de datos
    DATABASE_URL: Optional[str] = None
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "user"
    POSTGRES_PASSWORD: str = "password"
    POSTGRES_DB: str = "orders_db"
    POSTGRES_PORT: int = 5432

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """URL de conexión a la base de datos asíncrona."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # Asignación de order_id: "max_plus_one" reproduce la lectura del máximo
    # seguida de inserción (no atómica); "counter" usa un contador atómico.
    ORDER_ID_STRATEGY: Literal["max_plus_one", "counter"] = "max_plus_one"

    # Información estática de la compañía devuelta por /company-info
    COMPANY_NAME: str = "Company name"
    COMPANY_DESCRIPTION: str = "Company description"
    COMPANY_CONTACTS: str = "Contact information"

    # Logging - Defaults seguros
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    @property
    def docs_link(self) -> str:
        host = "localhost" if self.HOST in ("0.0.0.0", "") else self.HOST
        return f"http://{host}:{self.PORT}{self.DOCS_URL}"

# Instancia global de la configuración
settings = Settings()
