from typing import Final


class LimitConstants:
    MIN_MAX_QUANTITY: Final[int] = 1   # Smallest limit an admin can store
