# backend/client_orders/db/models/counter_model.py
"""
Contadores con nombre para la asignación atómica de identificadores.
"""

from sqlalchemy import Column, Integer, String

from client_orders.db.database import Base

class Counter(Base):
    __tablename__ = "counters"

    name = Column(String(50), primary_key=True)
    value = Column(Integer, nullable=False, default=0)
