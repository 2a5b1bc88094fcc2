import logging
from typing import Optional

from django.db import transaction

from maxcart.products.selectors import get_product
from .models import ProductQuantityLimit

logger = logging.getLogger(__name__)


@transaction.atomic
def set_max_quantity(product_id, value: Optional[int]) -> Optional[ProductQuantityLimit]:
    """
    Store or clear a product's cart limit.

    Args:
        product_id: Product primary key
        value: Positive limit; None, 0 or a negative value clears it

    Returns:
        The stored limit, or None when the limit was cleared

    Raises:
        ProductNotFoundError: If the product doesn't exist
    """
    product = get_product(product_id)

    if not value or value <= 0:
        deleted, _ = ProductQuantityLimit.objects.filter(product=product).delete()
        if deleted:
            logger.info(f"Cleared cart limit for product {product.sku}")
        return None

    limit, created = ProductQuantityLimit.objects.update_or_create(
        product=product,
        defaults={'max_quantity': value}
    )
    logger.info(
        f"{'Set' if created else 'Updated'} cart limit for product {product.sku} to {value}"
    )
    return limit
