from pydantic import BaseModel
from typing import List, Optional, Union


class CartPizza(BaseModel):
    id: Optional[Union[int, str]] = None


class CartLine(BaseModel):
    """One unit of a pizza in a customer's cart. Repeats are allowed."""
    pizza: Optional[CartPizza] = None
    size: Optional[str] = None


class NormalizedLine(BaseModel):
    pizza_type_id: str
    size: str
    quantity: int

    @property
    def pizza_id(self) -> str:
        return f"{self.pizza_type_id}_{self.size}"


class OrderCreateRequest(BaseModel):
    cart: Optional[List[CartLine]] = None
