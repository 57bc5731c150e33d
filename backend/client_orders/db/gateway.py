# backend/client_orders/db/gateway.py
"""
Gateway de persistencia.

Este módulo abstrae las dos colecciones de la aplicación (clients y orders)
detrás de cuatro operaciones simples: find_one, find_many, find_max_by_field
e insert. Todas las filas se convierten a registros Pydantic antes de salir
del gateway, de modo que los servicios nunca manipulan objetos ORM.

Los errores de SQLAlchemy se traducen a la taxonomía de
client_orders.core.exceptions:
- IntegrityError                         -> UniqueConstraintViolation
- OperationalError / InterfaceError / OSError -> StoreUnavailable
- cualquier otro SQLAlchemyError         -> PersistenceError

El gateway se construye una única vez al arrancar el proceso y se inyecta
en ClientDirectory y OrderLedger.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple, Type

from pydantic import BaseModel
from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from client_orders.core.exceptions import PersistenceError, StoreUnavailable, UniqueConstraintViolation
from client_orders.db import models
from client_orders.db.database import Base, create_sessionmaker
from client_orders.schemas import client_schema, order_schema

logger = logging.getLogger(__name__)

CLIENTS = "clients"
ORDERS = "orders"

# Colección -> (modelo ORM, registro Pydantic)
COLLECTIONS: Dict[str, Tuple[Type[Base], Type[BaseModel]]] = {
    CLIENTS: (models.Client, client_schema.Client),
    ORDERS: (models.Order, order_schema.Order),
}


@contextmanager
def _store_errors(operation: str, collection: str) -> Iterator[None]:
    """Traduce las excepciones del driver a errores de dominio."""
    try:
        yield
    except IntegrityError as e:
        logger.warning(f"Violación de unicidad en {operation} sobre '{collection}': {e.orig}")
        raise UniqueConstraintViolation() from e
    except (OperationalError, InterfaceError, OSError) as e:
        logger.error(f"Base de datos no disponible durante {operation} sobre '{collection}': {e}")
        raise StoreUnavailable() from e
    except SQLAlchemyError as e:
        logger.error(f"Error de persistencia durante {operation} sobre '{collection}': {e}", exc_info=True)
        raise PersistenceError() from e


class PersistenceGateway:
    """
    Acceso asíncrono a las colecciones de clientes y pedidos.

    Cada operación abre su propia sesión sobre el motor compartido; no hay
    transacciones que abarquen varias operaciones.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._sessionmaker = create_sessionmaker(engine)

    # ========================================
    # CICLO DE VIDA
    # ========================================

    async def create_schema(self) -> None:
        """Crea las tablas que falten. Se ejecuta al arrancar la aplicación."""
        with _store_errors("create_schema", "*"):
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def find_one(self, collection: str, **criteria: Any) -> Optional[BaseModel]:
        """Devuelve el primer registro que cumple los criterios, o None."""
        model, schema = _resolve(collection)
        query = select(model).filter(*_conditions(model, criteria)).limit(1)
        with _store_errors("find_one", collection):
            async with self._sessionmaker() as session:
                result = await session.execute(query)
                row = result.scalars().first()
        return schema.model_validate(row) if row is not None else None

    async def find_many(self, collection: str, **criteria: Any) -> List[BaseModel]:
        """Devuelve todos los registros que cumplen los criterios, en el orden nativo del almacén."""
        model, schema = _resolve(collection)
        query = select(model).filter(*_conditions(model, criteria))
        with _store_errors("find_many", collection):
            async with self._sessionmaker() as session:
                result = await session.execute(query)
                rows = result.scalars().all()
        return [schema.model_validate(row) for row in rows]

    async def find_max_by_field(self, collection: str, field: str) -> Optional[BaseModel]:
        """
        Devuelve el registro con el valor máximo de `field`, o None si la
        colección está vacía.
        """
        model, schema = _resolve(collection)
        column = _column(model, field)
        query = select(model).filter(column.is_not(None)).order_by(column.desc()).limit(1)
        with _store_errors("find_max_by_field", collection):
            async with self._sessionmaker() as session:
                result = await session.execute(query)
                row = result.scalars().first()
        return schema.model_validate(row) if row is not None else None

    # ========================================
    # OPERACIONES DE ESCRITURA
    # ========================================

    async def insert(self, collection: str, record: BaseModel) -> BaseModel:
        """
        Persiste un registro y devuelve su forma almacenada.

        Raises:
            UniqueConstraintViolation: si el registro duplica un campo único
            StoreUnavailable: si la base de datos no es accesible
        """
        model, schema = _resolve(collection)
        if not isinstance(record, schema):
            raise TypeError(f"La colección '{collection}' espera {schema.__name__}, recibido {type(record).__name__}")

        db_row = model(**record.model_dump())
        with _store_errors("insert", collection):
            async with self._sessionmaker() as session:
                session.add(db_row)
                await session.commit()
                await session.refresh(db_row)
        return schema.model_validate(db_row)

    async def increment_counter(self, name: str, seed_collection: str, seed_field: str) -> int:
        """
        Incrementa de forma atómica el contador `name` y devuelve su nuevo valor.

        La primera vez que se usa, el contador se inicializa con el máximo
        actual de `seed_field` en `seed_collection` (0 si está vacía).
        """
        seed_model, _ = _resolve(seed_collection)
        seed_column = _column(seed_model, seed_field)
        increment = (
            update(models.Counter)
            .where(models.Counter.name == name)
            .values(value=models.Counter.value + 1)
        )
        with _store_errors("increment_counter", name):
            try:
                return await self._increment_or_seed(name, increment, seed_column)
            except IntegrityError:
                # Otra petición creó el contador entre el UPDATE y el INSERT
                logger.info(f"Contador {name} creado por otra petición, se repite el incremento")
                return await self._increment_or_seed(name, increment, seed_column)

    async def _increment_or_seed(self, name: str, increment, seed_column) -> int:
        async with self._sessionmaker() as session:
            async with session.begin():
                result = await session.execute(increment)
                if result.rowcount == 0:
                    await self._seed_counter(session, name, seed_column)
                return await session.scalar(select(models.Counter.value).where(models.Counter.name == name))

    async def _seed_counter(self, session, name: str, seed_column) -> None:
        current_max = await session.scalar(select(func.max(seed_column)))
        session.add(models.Counter(name=name, value=(current_max or 0) + 1))
        await session.flush()
        logger.info(f"Contador {name} inicializado a partir de {seed_column}={current_max or 0}")


def _resolve(collection: str) -> Tuple[Type[Base], Type[BaseModel]]:
    try:
        return COLLECTIONS[collection]
    except KeyError:
        raise KeyError(f"Colección desconocida: '{collection}'") from None


def _column(model: Type[Base], field: str):
    column = model.__table__.columns.get(field)
    if column is None:
        # Los atributos ORM pueden diferir del nombre de columna (p. ej. is_new / isNew)
        column = getattr(model, field, None)
    if column is None:
        raise ValueError(f"El campo '{field}' no existe en '{model.__tablename__}'")
    return column


def _conditions(model: Type[Base], criteria: Dict[str, Any]) -> list:
    return [_column(model, field) == value for field, value in criteria.items()]
