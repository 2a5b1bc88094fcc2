# signals.py
import logging
from typing import Any

from django.dispatch import receiver

from maxcart.cart.models import Cart
from maxcart.cart.notices import NoticeBag
from maxcart.cart.selectors import sum_quantity_for_product
from maxcart.cart.signals import (
    AddToCartContext,
    UpdateCartContext,
    add_to_cart_validation,
    update_cart_validation,
)
from .policy import Reject, evaluate_add, evaluate_update
from .selectors import get_max_quantity

logger = logging.getLogger(__name__)

# ======================
# CART VALIDATION SIGNALS
# ======================

@receiver(add_to_cart_validation, sender=Cart, dispatch_uid="limits.add_to_cart")
def limit_product_quantity_in_cart(
    sender: type,
    passed: bool,
    context: AddToCartContext,
    notices: NoticeBag,
    **kwargs: Any
) -> bool:
    """Refuse an add that would take the product past its limit across all cart lines."""
    max_quantity = get_max_quantity(context.product_id)
    if max_quantity is None:
        return passed

    existing = sum_quantity_for_product(context.cart, context.product_id)
    decision = evaluate_add(max_quantity, existing, context.quantity)
    if isinstance(decision, Reject):
        logger.info(
            f"Rejected add of {context.quantity} x product {context.product_id} "
            f"(in cart: {existing}, max: {max_quantity})"
        )
        notices.add(decision.message, NoticeBag.ERROR)
        return False
    return passed


@receiver(update_cart_validation, sender=Cart, dispatch_uid="limits.update_cart")
def limit_product_quantity_in_cart_update(
    sender: type,
    passed: bool,
    context: UpdateCartContext,
    notices: NoticeBag,
    **kwargs: Any
) -> bool:
    """Refuse setting one cart line above the limit; other lines are not counted."""
    max_quantity = get_max_quantity(context.item.product_id)
    if max_quantity is None:
        return passed

    decision = evaluate_update(max_quantity, context.quantity)
    if isinstance(decision, Reject):
        logger.info(
            f"Rejected update of item {context.item.pk} to {context.quantity} "
            f"(max: {max_quantity})"
        )
        notices.add(decision.message, NoticeBag.ERROR)
        return False
    return passed
