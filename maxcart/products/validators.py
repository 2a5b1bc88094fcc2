# maxcart/products/validators.py
from django.core.exceptions import ValidationError


def validate_quantity(value: int, name: str = "Quantity", minimum: int = 0) -> None:
    """Validate that a quantity is an integer no smaller than ``minimum``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer")
    if value < minimum:
        raise ValidationError(f"{name} must be at least {minimum}")
