from typing import Optional

from django.core.exceptions import ValidationError

from maxcart.products.exceptions import ProductNotFoundError
from .models import ProductQuantityLimit


def get_max_quantity(product_id) -> Optional[int]:
    """Configured limit for a product, or None when the product has none."""
    try:
        return (
            ProductQuantityLimit.objects
            .filter(product_id=product_id)
            .values_list('max_quantity', flat=True)
            .first()
        )
    except ValidationError:
        raise ProductNotFoundError(product_id)
