from sqlmodel import SQLModel, Field
from typing import Optional


class PizzaType(SQLModel, table=True):
    __tablename__ = "pizza_types"

    pizza_type_id: str = Field(primary_key=True)
    name: str
    category: str
    ingredients: Optional[str] = None


class Pizza(SQLModel, table=True):
    """One purchasable size of a pizza type, with its price."""
    __tablename__ = "pizzas"

    # "{pizza_type_id}_{size}", size lowercased
    pizza_id: str = Field(primary_key=True)
    pizza_type_id: str = Field(foreign_key="pizza_types.pizza_type_id", index=True)
    size: str
    price: float
