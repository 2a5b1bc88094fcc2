from decimal import Decimal
from typing import Final


class FieldLimits:
    """Maximum field lengths for models"""

    PRODUCT_NAME: Final[int] = 255   # Product names
    SKU: Final[int] = 50             # SKU codes
    STATUS: Final[int] = 20


class ValidationPatterns:
    """Regex patterns for field validation"""

    SKU: Final[str] = r'^[A-Z0-9-]{3,50}$'     # SKU format validation
    PRODUCT_NAME: Final[str] = r'^[\w\s-]+$'   # Product name validation


class Defaults:
    STOCK_QUANTITY: Final[int] = 0
    PRICE_DECIMALS: Final[int] = 2
    PRICE_MAX_DIGITS: Final[int] = 14
    PRICE: Final[Decimal] = Decimal('0.00')
