from django.core.exceptions import ValidationError
from django.db.models import QuerySet, Sum
from django.db.models.functions import Coalesce

from .exceptions import CartItemNotFoundError
from .models import Cart, CartItem


def get_cart_item(item_id) -> CartItem:
    """Fetch a cart line with its cart and product."""
    try:
        return CartItem.objects.select_related('cart', 'product').get(pk=item_id)
    except (CartItem.DoesNotExist, ValidationError):
        raise CartItemNotFoundError(item_id)


def get_cart_lines(cart: Cart) -> QuerySet:
    return cart.items.select_related('product').order_by('created_at')


def sum_quantity_for_product(cart: Cart, product_id) -> int:
    """Total quantity of a product across every line of the cart (all variations)."""
    return cart.items.filter(product_id=product_id).aggregate(
        total=Coalesce(Sum('quantity'), 0)
    )['total']
