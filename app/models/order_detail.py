from sqlmodel import SQLModel, Field
from typing import Optional


class OrderDetail(SQLModel, table=True):
    __tablename__ = "order_details"

    order_details_id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="orders.order_id", index=True)
    pizza_id: str = Field(foreign_key="pizzas.pizza_id")
    quantity: int
