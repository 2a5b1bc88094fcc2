"""
Validation signals sent before a cart mutation is written.

Receivers are called as ``receiver(sender, passed, context, notices, **kwargs)``
and return ``False`` to refuse the mutation, explaining why through the
notice bag. Any other return value lets it proceed.
"""
from dataclasses import dataclass
from typing import Any

from django.dispatch import Signal


@dataclass(frozen=True)
class AddToCartContext:
    cart: Any
    product_id: Any
    quantity: int
    variation: str = ""


@dataclass(frozen=True)
class UpdateCartContext:
    cart: Any
    item: Any
    quantity: int


add_to_cart_validation = Signal()
update_cart_validation = Signal()


def send_validation(signal: Signal, sender, context, notices) -> bool:
    """Send ``signal`` and report whether every receiver let the mutation through."""
    responses = signal.send(sender=sender, passed=True, context=context, notices=notices)
    return all(response is not False for _, response in responses)
