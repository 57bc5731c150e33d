from client_orders.db.models.client_model import Client
from client_orders.db.models.counter_model import Counter
from client_orders.db.models.order_model import Order

__all__ = ["Client", "Counter", "Order"]
