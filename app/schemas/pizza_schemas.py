from pydantic import BaseModel
from typing import Dict, Optional


class PizzaOut(BaseModel):
    id: str
    name: str
    category: str
    description: Optional[str] = None
    image: str
    sizes: Dict[str, float]   # size -> price
