from fastapi import APIRouter, Depends, Path, Query, Request
from typing import List, Optional

from app.database import Store, get_store
from app.exceptions import ValidationError
from app.schemas.cart_schemas import OrderCreateRequest
from app.schemas.orders_schemas import (
    OrderCreateResponse,
    OrderDetailsResponse,
    OrderHeaderOut,
)
from app.services.order_service import (
    create_order,
    get_order,
    list_orders,
    list_past_orders,
)

router = APIRouter()

# largest id a 64-bit INTEGER column can hold
MAX_ORDER_ID = 2**63 - 1
# keeps LIMIT/OFFSET inside the same range
MAX_PAGE = 10**9


@router.get("/orders", response_model=List[OrderHeaderOut])
async def get_orders(store: Store = Depends(get_store)):
    return await list_orders(store)


@router.get("/order", response_model=OrderDetailsResponse)
async def get_order_by_query(
    order_id: Optional[int] = Query(None, alias="id", ge=1, le=MAX_ORDER_ID),
    store: Store = Depends(get_store),
):
    if order_id is None:
        raise ValidationError("Order id is required")
    return await get_order(store, order_id)


@router.post("/order", response_model=OrderCreateResponse)
async def place_order(
    data: OrderCreateRequest,
    store: Store = Depends(get_store),
):
    order_id = await create_order(store, data.cart)
    return {"orderId": order_id}


# Past Orders

@router.get("/past-orders", response_model=List[OrderHeaderOut])
async def get_past_orders(
    request: Request,
    page: int = Query(1, le=MAX_PAGE),
    store: Store = Depends(get_store),
):
    page_size = request.app.state.settings.past_orders_page_size
    return await list_past_orders(store, page=page, page_size=page_size)


@router.get("/past-order/{order_id}", response_model=OrderDetailsResponse)
async def get_past_order(
    order_id: int = Path(..., ge=1, le=MAX_ORDER_ID),
    store: Store = Depends(get_store),
):
    return await get_order(store, order_id)
