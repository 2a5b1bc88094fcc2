from django.core.exceptions import ValidationError
from django.db.models import QuerySet

from .exceptions import ProductNotFoundError
from .models import Product


def get_product(product_id) -> Product:
    """Fetch a product by id or raise ProductNotFoundError, also for malformed ids."""
    try:
        return Product.objects.get(pk=product_id)
    except (Product.DoesNotExist, ValidationError):
        raise ProductNotFoundError(product_id)


def get_active_products() -> QuerySet:
    return Product.objects.filter(status=Product.Status.ACTIVE)
