# backend/client_orders/db/database.py

"""
Configuración principal de la base de datos para la aplicación.

Este módulo define los componentes básicos que serán utilizados por toda
la aplicación:
- Clase base para modelos (Base)
- Fábricas del motor asíncrono y del sessionmaker

A diferencia de una configuración con motor global, el motor se crea una
única vez al arrancar el proceso (ver main.py) y se inyecta en el gateway de
persistencia, de modo que los tests pueden sustituirlo por otro.
"""

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncEngine, AsyncSession
from sqlalchemy.orm import declarative_base

# Clase base declarativa para todos los modelos ORM
Base = declarative_base()


def create_engine(database_url: str, **kwargs) -> AsyncEngine:
    """Crea el motor de base de datos asíncrono compartido por todo el proceso."""
    kwargs.setdefault("pool_pre_ping", True)
    return create_async_engine(database_url, **kwargs)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False es importante para que los objetos sigan siendo
    # utilizables después de que la transacción se haya confirmado.
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
