import logging
from typing import List, Tuple

from sqlalchemy import func, insert
from sqlmodel import select

from app.database import Store
from app.models.pizza import Pizza, PizzaType

logger = logging.getLogger(__name__)

# (pizza_type_id, name, category, ingredients, {size: price})
CATALOG: List[Tuple[str, str, str, str, dict]] = [
    ("bbq_ckn", "The Barbecue Chicken Pizza", "Chicken",
     "Barbecued Chicken, Red Peppers, Green Peppers, Tomatoes, Red Onions, Barbecue Sauce",
     {"S": 12.75, "M": 16.75, "L": 20.75}),
    ("cali_ckn", "The California Chicken Pizza", "Chicken",
     "Chicken, Artichoke, Spinach, Garlic, Jalapeno Peppers, Fontina Cheese, Gouda Cheese",
     {"S": 12.75, "M": 16.75, "L": 20.75}),
    ("hawaiian", "The Hawaiian Pizza", "Classic",
     "Sliced Ham, Pineapple, Mozzarella Cheese",
     {"S": 10.5, "M": 13.25, "L": 16.5}),
    ("pepperoni", "The Pepperoni Pizza", "Classic",
     "Mozzarella Cheese, Pepperoni",
     {"S": 9.75, "M": 12.5, "L": 15.25}),
    ("big_meat", "The Big Meat Pizza", "Classic",
     "Bacon, Pepperoni, Italian Sausage, Chorizo Sausage",
     {"S": 12.0, "M": 16.0, "L": 20.5}),
    ("four_cheese", "The Four Cheese Pizza", "Veggie",
     "Ricotta Cheese, Gorgonzola Piccante Cheese, Mozzarella Cheese, Parmigiano Reggiano Cheese, Garlic",
     {"M": 14.75, "L": 17.95}),
    ("spinach_fet", "The Spinach and Feta Pizza", "Veggie",
     "Spinach, Mushrooms, Red Onions, Feta Cheese, Garlic",
     {"S": 12.0, "M": 16.0, "L": 20.25}),
    ("soppressata", "The Soppressata Pizza", "Supreme",
     "Soppressata Salami, Fontina Cheese, Mozzarella Cheese, Mushrooms, Garlic",
     {"S": 12.5, "M": 16.5, "L": 20.75}),
]


async def seed_catalog(store: Store, catalog=CATALOG) -> int:
    """Insert the sample catalog if no pizza types exist yet. Returns types added."""
    existing = await store.scalars(select(func.count()).select_from(PizzaType))
    if existing[0]:
        logger.info(f"Catalog already has {existing[0]} pizza types, skipping seed")
        return 0

    async with store.transaction() as txn:
        for pizza_type_id, name, category, ingredients, sizes in catalog:
            await txn.execute(
                insert(PizzaType).values(
                    pizza_type_id=pizza_type_id,
                    name=name,
                    category=category,
                    ingredients=ingredients,
                )
            )
            for size, price in sizes.items():
                await txn.execute(
                    insert(Pizza).values(
                        pizza_id=f"{pizza_type_id}_{size.lower()}",
                        pizza_type_id=pizza_type_id,
                        size=size,
                        price=price,
                    )
                )

    logger.info(f"Seeded {len(catalog)} pizza types")
    return len(catalog)
