# backend/client_orders/db/models/order_model.py
"""
Este archivo contiene el modelo de pedido para la aplicación.
"""

from sqlalchemy import Column, Float, Integer, String

from client_orders.db.database import Base

class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Sin restricción UNIQUE: dos inserciones concurrentes pueden compartir order_id
    order_id = Column(Integer, index=True, nullable=False)
    # Referencia al email del cliente, sin clave foránea
    email = Column(String(255), index=True, nullable=False)
    status = Column(String(50), nullable=False)
    total = Column(Float)

    def __repr__(self):
        return f"<Order(order_id={self.order_id}, email='{self.email}', status='{self.status}')>"
