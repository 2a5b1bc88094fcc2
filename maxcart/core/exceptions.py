from typing import List, Optional


class ServiceError(Exception):
    """
    Base for errors raised by the service layer.

    Subclasses set ``code`` and ``default_message``; ``errors`` holds
    per-item details that are safe to show to a shopper or an admin.
    """
    code: Optional[str] = None
    default_message = "Service operation failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[str]] = None):
        message = message or self.default_message
        super().__init__(message)
        self.errors = errors or [message]

    def __str__(self):
        code = f" [Code: {self.code}]" if self.code else ""
        return f"{self.__class__.__name__}: {self.args[0]} - Errors: {', '.join(self.errors)}{code}"
