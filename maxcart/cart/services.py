import logging
from typing import Optional

from django.db import transaction

from maxcart.products.exceptions import InvalidProductDataError
from maxcart.products.selectors import get_product
from maxcart.products.validators import validate_quantity
from .exceptions import CartValidationError
from .models import Cart, CartItem
from .notices import NoticeBag
from .selectors import get_cart_item
from .signals import (
    AddToCartContext,
    UpdateCartContext,
    add_to_cart_validation,
    send_validation,
    update_cart_validation,
)

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────────
# Cart lookup
# ──────────────────────────────────────────────────

def get_or_create_cart(user=None, session_key: str = "") -> Cart:
    """Return the open cart for a signed-in user or an anonymous session."""
    if user is not None and user.is_authenticated:
        cart = Cart.objects.filter(user=user).order_by('-created_at').first()
        return cart or Cart.objects.create(user=user)
    if not session_key:
        raise ValueError("An anonymous cart needs a session key")
    cart = Cart.objects.filter(user__isnull=True, session_key=session_key).order_by('-created_at').first()
    return cart or Cart.objects.create(session_key=session_key)

# ──────────────────────────────────────────────────
# Cart mutations
# ──────────────────────────────────────────────────

@transaction.atomic
def add_to_cart(
    cart: Cart,
    product_id,
    quantity: int = 1,
    variation: str = "",
    notices: Optional[NoticeBag] = None
) -> CartItem:
    """
    Add ``quantity`` of a product to the cart.

    Add-to-cart validation receivers run first. When any of them refuses,
    nothing is written and CartValidationError carries the error notices.
    """
    validate_quantity(quantity, minimum=1)
    product = get_product(product_id)
    if not product.is_purchasable:
        raise InvalidProductDataError(f"Product {product.sku} is not available for purchase")

    notices = notices if notices is not None else NoticeBag()
    context = AddToCartContext(
        cart=cart,
        product_id=product.pk,
        quantity=quantity,
        variation=variation
    )
    if not send_validation(add_to_cart_validation, Cart, context, notices):
        logger.info(f"Add to cart refused for product {product.sku} in cart {cart.pk}")
        raise CartValidationError(
            "Product could not be added to the cart",
            errors=notices.errors
        )

    item, created = CartItem.objects.select_for_update().get_or_create(
        cart=cart,
        product=product,
        variation=variation,
        defaults={'quantity': quantity, 'unit_price': product.price}
    )
    if not created:
        item.quantity += quantity
        item.save(update_fields=['quantity', 'updated_at'])
    return item

@transaction.atomic
def update_cart_item_quantity(
    item_id,
    quantity: int,
    notices: Optional[NoticeBag] = None
) -> Optional[CartItem]:
    """
    Set the absolute quantity of a cart line.

    A quantity of zero removes the line and skips validation.
    """
    validate_quantity(quantity)
    item = get_cart_item(item_id)
    if quantity == 0:
        item.delete()
        return None

    notices = notices if notices is not None else NoticeBag()
    context = UpdateCartContext(cart=item.cart, item=item, quantity=quantity)
    if not send_validation(update_cart_validation, Cart, context, notices):
        logger.info(f"Cart update refused for item {item.pk} (requested {quantity})")
        raise CartValidationError(
            "Cart could not be updated",
            errors=notices.errors
        )

    item.quantity = quantity
    item.save(update_fields=['quantity', 'updated_at'])
    return item

def remove_cart_item(item_id) -> None:
    get_cart_item(item_id).delete()
