# backend/client_orders/db/models/client_model.py
"""
Se encarga de definir el modelo de cliente para la aplicación.
"""

from sqlalchemy import Boolean, Column, Integer, String
from client_orders.db.database import Base

class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Declarado pero nunca asignado por ninguna operación
    user_id = Column(Integer, nullable=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(255))
    is_new = Column("isNew", Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<Client(email='{self.email}', isNew={self.is_new})>"
