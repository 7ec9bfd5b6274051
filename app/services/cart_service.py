from typing import Any, Dict, List, Sequence

from pydantic import ValidationError as SchemaError

from app.exceptions import InvalidItemError, InvalidOrderError
from app.schemas.cart_schemas import CartLine, NormalizedLine


def _as_cart_line(line: Any) -> CartLine:
    if isinstance(line, CartLine):
        return line
    try:
        return CartLine.model_validate(line)
    except SchemaError as e:
        raise InvalidItemError() from e


def normalize_cart(cart: Sequence[Any]) -> List[NormalizedLine]:
    """
    Collapse cart lines into one line per (pizza type, size) with a quantity.

    Sizes are lowercased before grouping, so "Large" and "large" merge.
    The total quantity always equals the number of input lines.
    """
    if not isinstance(cart, list) or not cart:
        raise InvalidOrderError()

    merged: Dict[str, NormalizedLine] = {}
    for raw_line in cart:
        line = _as_cart_line(raw_line)

        pizza_type_id = line.pizza.id if line.pizza else None
        # 0 and "" are not pizza ids
        if not pizza_type_id or not line.size:
            raise InvalidItemError()

        normalized = NormalizedLine(
            pizza_type_id=str(pizza_type_id),
            size=line.size.lower(),
            quantity=1,
        )
        existing = merged.get(normalized.pizza_id)
        if existing:
            existing.quantity += 1
        else:
            merged[normalized.pizza_id] = normalized

    return list(merged.values())
