from maxcart.core.exceptions import ServiceError


class CartServiceError(ServiceError):
    """Base exception for cart operations."""


class CartItemNotFoundError(CartServiceError):
    code = "CART_ITEM_NOT_FOUND"

    def __init__(self, item_id):
        super().__init__(
            f"Cart item {item_id} not found",
            [f"item_id={item_id}: error=not_found"]
        )


class CartValidationError(CartServiceError):
    """A cart validation receiver refused an add or update."""
    code = "CART_VALIDATION_FAILED"
    default_message = "Cart validation failed"
