import logging
from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from sqlmodel import select

from app.database import Store, gather_reads
from app.exceptions import EmptyCatalogError
from app.models.pizza import Pizza, PizzaType
from app.schemas.pizza_schemas import PizzaOut

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


def pizza_image(pizza_type_id: str) -> str:
    return f"/public/pizzas/{pizza_type_id}.webp"


def group_prices(prices: Sequence[Pizza]) -> Dict[str, Dict[str, float]]:
    """Map pizza_type_id -> {size: price}."""
    sizes_by_type: Dict[str, Dict[str, float]] = defaultdict(dict)
    for price in prices:
        sizes_by_type[price.pizza_type_id][price.size] = price.price
    return sizes_by_type


def to_pizza_out(pizza_type: PizzaType, sizes: Dict[str, float]) -> PizzaOut:
    return PizzaOut(
        id=pizza_type.pizza_type_id,
        name=pizza_type.name,
        category=pizza_type.category,
        description=pizza_type.ingredients,
        image=pizza_image(pizza_type.pizza_type_id),
        sizes=sizes,
    )


async def list_pizzas(store: Store) -> List[PizzaOut]:
    pizza_types, prices = await gather_reads(
        store.scalars(select(PizzaType).order_by(PizzaType.pizza_type_id)),
        store.scalars(select(Pizza)),
    )

    sizes_by_type = group_prices(prices)
    # a type without price rows gets an empty mapping
    return [
        to_pizza_out(pizza_type, sizes_by_type.get(pizza_type.pizza_type_id, {}))
        for pizza_type in pizza_types
    ]


def days_since_epoch(now: datetime) -> int:
    """Whole UTC days elapsed since 1970-01-01."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return int(now.timestamp() // SECONDS_PER_DAY)


def select_daily_pick(day_count: int, pizza_types: Sequence[PizzaType]) -> PizzaType:
    if not pizza_types:
        raise EmptyCatalogError()
    return pizza_types[day_count % len(pizza_types)]


async def get_pizza_of_the_day(store: Store, now: Optional[datetime] = None) -> PizzaOut:
    """
    Pick one pizza per calendar day. The pick is stable for a whole UTC day
    as long as the catalog does not change.
    """
    now = now or datetime.now(timezone.utc)

    pizza_types = await store.scalars(
        select(PizzaType).order_by(PizzaType.pizza_type_id)
    )
    pick = select_daily_pick(days_since_epoch(now), pizza_types)

    prices = await store.scalars(
        select(Pizza).where(Pizza.pizza_type_id == pick.pizza_type_id)
    )
    sizes = group_prices(prices).get(pick.pizza_type_id, {})

    logger.info(f"Pizza of the day: {pick.pizza_type_id}")
    return to_pizza_out(pick, sizes)
