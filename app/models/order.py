from sqlmodel import SQLModel, Field
from typing import Optional


class Order(SQLModel, table=True):
    __tablename__ = "orders"

    order_id: Optional[int] = Field(default=None, primary_key=True)
    date: str   # YYYY-MM-DD
    time: str   # HH:MM:SS, 24-hour
