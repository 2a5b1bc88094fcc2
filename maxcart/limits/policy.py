"""
Quantity limit rule for cart mutations.

Both evaluations are pure: they take the configured limit (``None`` for no
limit) and the quantities involved, and return a ``Decision``. Reading the
limit and the cart is the caller's job.
"""
from dataclasses import dataclass
from typing import Optional, Union

from django.utils.translation import gettext


@dataclass(frozen=True)
class Allow:
    allowed = True


@dataclass(frozen=True)
class Reject:
    message: str
    allowed = False


Decision = Union[Allow, Reject]


def evaluate_add(
    max_quantity: Optional[int],
    existing_quantity_in_cart: int,
    requested_delta: int
) -> Decision:
    """Decide whether ``requested_delta`` more units fit on top of what the cart holds."""
    if max_quantity is None:
        return Allow()
    if existing_quantity_in_cart + requested_delta > max_quantity:
        return Reject(
            gettext("You can only add up to %(max)d of this product to your cart.")
            % {'max': max_quantity}
        )
    return Allow()


def evaluate_update(max_quantity: Optional[int], requested_absolute_quantity: int) -> Decision:
    """Decide whether a cart line may be set to ``requested_absolute_quantity``."""
    if max_quantity is None:
        return Allow()
    if requested_absolute_quantity > max_quantity:
        return Reject(
            gettext("You can only have a maximum of %(max)d of this product in your basket.")
            % {'max': max_quantity}
        )
    return Allow()
