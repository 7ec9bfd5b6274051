import logging
from datetime import datetime
from typing import Any, List, Optional, Sequence

from sqlalchemy import insert
from sqlmodel import select

from app.database import Store, gather_reads
from app.exceptions import (
    InvalidItemError,
    OrderCreationFailedError,
    OrderNotFoundError,
    StoreError,
)
from app.models.order import Order
from app.models.order_detail import OrderDetail
from app.models.pizza import Pizza, PizzaType
from app.schemas.orders_schemas import (
    OrderDetailsResponse,
    OrderHeaderOut,
    OrderItemOut,
    OrderOut,
)
from app.services.cart_service import normalize_cart
from app.services.catalog_service import pizza_image
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)


ORDER_HEADER_COLUMNS = (Order.order_id, Order.date, Order.time)


async def create_order(store: Store, cart: Sequence[Any], now: Optional[datetime] = None) -> int:
    """
    Write an order header and its detail rows in one transaction.

    Cart shape is validated before the store is touched. Pizzas missing from
    the catalog are rejected inside the transaction with InvalidItemError,
    before anything is written. Any store failure rolls the whole order back
    and surfaces as OrderCreationFailedError.
    """
    lines = normalize_cart(cart)

    # captured once so date and time cannot straddle midnight
    now = now or datetime.now()
    order_date = now.date().isoformat()
    order_time = now.strftime("%H:%M:%S")

    try:
        async with store.transaction() as txn:
            pizza_ids = [line.pizza_id for line in lines]
            known = await txn.execute(
                select(Pizza.pizza_id).where(Pizza.pizza_id.in_(pizza_ids))
            )
            unknown = set(pizza_ids) - set(known.scalars().all())
            if unknown:
                logger.warning(f"Rejected order for unknown pizzas: {sorted(unknown)}")
                raise InvalidItemError()

            result = await txn.execute(
                insert(Order)
                .values(date=order_date, time=order_time)
                .returning(Order.order_id)
            )
            order_id = result.scalar_one()

            for line in lines:
                await txn.execute(
                    insert(OrderDetail).values(
                        order_id=order_id,
                        pizza_id=line.pizza_id,
                        quantity=line.quantity,
                    )
                )
    except StoreError as e:
        logger.exception("Failed to create order")
        raise OrderCreationFailedError() from e

    logger.info(f"Created order {order_id} with {len(lines)} lines")
    return order_id


async def list_orders(store: Store) -> List[OrderHeaderOut]:
    rows = await store.rows(select(*ORDER_HEADER_COLUMNS).order_by(Order.order_id))
    return [OrderHeaderOut(**row) for row in rows]


async def list_past_orders(store: Store, page: int = 1, page_size: int = 20) -> List[OrderHeaderOut]:
    """Newest orders first, one page at a time."""
    query = select(*ORDER_HEADER_COLUMNS).order_by(Order.order_id.desc())
    rows = await store.rows(paginate(query, page=page, limit=page_size))
    return [OrderHeaderOut(**row) for row in rows]


def _order_items_query(order_id: int):
    return (
        select(
            PizzaType.pizza_type_id.label("pizzaTypeId"),
            PizzaType.name,
            PizzaType.category,
            PizzaType.ingredients.label("description"),
            Pizza.size,
            OrderDetail.quantity,
            Pizza.price,
        )
        .select_from(OrderDetail)
        .join(Pizza, OrderDetail.pizza_id == Pizza.pizza_id)
        .join(PizzaType, Pizza.pizza_type_id == PizzaType.pizza_type_id)
        .where(OrderDetail.order_id == order_id)
        .order_by(OrderDetail.order_details_id)
    )


async def get_order(store: Store, order_id: int) -> OrderDetailsResponse:
    headers, item_rows = await gather_reads(
        store.rows(select(*ORDER_HEADER_COLUMNS).where(Order.order_id == order_id)),
        store.rows(_order_items_query(order_id)),
    )

    if not headers:
        raise OrderNotFoundError()

    order_items = [
        OrderItemOut(**row, image=pizza_image(row["pizzaTypeId"]))
        for row in item_rows
    ]
    # summed here rather than in SQL so text and numeric columns add up the same
    total = sum(item.total for item in order_items)

    return OrderDetailsResponse(
        order=OrderOut(**headers[0], total=total),
        orderItems=order_items,
    )
