from maxcart.core.exceptions import ServiceError


class ProductServiceError(ServiceError):
    """Base exception for product operations."""


class ProductNotFoundError(ProductServiceError):
    code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id):
        super().__init__(
            f"Product {product_id} not found",
            [f"product_id={product_id}: error=not_found"]
        )


class InvalidProductDataError(ProductServiceError):
    """Raised for product input a service refuses, e.g. an inactive product in a cart."""
    code = "INVALID_PRODUCT_DATA"
    default_message = "Invalid product data"
