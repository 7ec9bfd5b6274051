"""Application errors and the HTTP status each one maps to."""


class PizzaShopError(Exception):
    """Base exception for all application errors."""
    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message=None, status_code=None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self):
        return {"error": self.message}


class ValidationError(PizzaShopError):
    """Malformed client input, detected before touching the store."""
    status_code = 400
    default_message = "Invalid request data"


class InvalidOrderError(ValidationError):
    default_message = "Invalid order data"


class InvalidItemError(ValidationError):
    default_message = "Invalid item data"


class NotFoundError(PizzaShopError):
    status_code = 404
    default_message = "Resource not found"


class OrderNotFoundError(NotFoundError):
    default_message = "Order not found"


class EmptyCatalogError(PizzaShopError):
    """Raised when a daily pick is requested from a catalog with no pizzas."""
    status_code = 503
    default_message = "No pizzas available"


class StoreError(PizzaShopError):
    """Any data-access failure. The cause is logged, never returned."""


class StoreUnavailableError(StoreError):
    """A store round-trip timed out. Callers may retry."""


class OrderCreationFailedError(StoreError):
    default_message = "Failed to create order"
