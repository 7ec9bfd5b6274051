from fastapi import APIRouter, Depends
from typing import List

from app.database import Store, get_store
from app.schemas.pizza_schemas import PizzaOut
from app.services.catalog_service import get_pizza_of_the_day, list_pizzas

router = APIRouter()


@router.get("/pizzas", response_model=List[PizzaOut])
async def get_pizzas(store: Store = Depends(get_store)):
    return await list_pizzas(store)


@router.get("/pizza-of-the-day", response_model=PizzaOut)
async def pizza_of_the_day(store: Store = Depends(get_store)):
    return await get_pizza_of_the_day(store)
