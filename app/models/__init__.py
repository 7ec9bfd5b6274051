from app.models.pizza import PizzaType, Pizza
from app.models.order import Order
from app.models.order_detail import OrderDetail

# add ALL models here
