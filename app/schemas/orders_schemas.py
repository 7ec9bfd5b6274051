from pydantic import BaseModel, computed_field
from typing import List, Optional


class OrderCreateResponse(BaseModel):
    orderId: int


class OrderHeaderOut(BaseModel):
    order_id: int
    date: str
    time: str


class OrderOut(OrderHeaderOut):
    total: float


class OrderItemOut(BaseModel):
    pizzaTypeId: str
    name: str
    category: str
    description: Optional[str] = None
    size: str
    quantity: int
    price: float
    image: str

    @computed_field
    @property
    def total(self) -> float:
        return self.quantity * self.price


class OrderDetailsResponse(BaseModel):
    order: OrderOut
    orderItems: List[OrderItemOut]
