"""
Shopper-facing notices raised while a cart mutation is validated.

Validators append to a ``NoticeBag``; the caller decides whether to turn
the bag into an exception, render it, or push it into the Django messages
framework for the current request.
"""
from typing import Iterator, List, NamedTuple

from django.contrib import messages


class Notice(NamedTuple):
    level: str
    message: str


class NoticeBag:
    ERROR = 'error'
    NOTICE = 'notice'
    SUCCESS = 'success'

    MESSAGE_LEVELS = {
        ERROR: messages.ERROR,
        NOTICE: messages.INFO,
        SUCCESS: messages.SUCCESS,
    }

    def __init__(self) -> None:
        self._notices: List[Notice] = []

    def add(self, message: str, level: str = ERROR) -> None:
        if level not in self.MESSAGE_LEVELS:
            raise ValueError(f"Unknown notice level: {level}")
        self._notices.append(Notice(level, str(message)))

    def texts(self, level: str = None) -> List[str]:
        return [n.message for n in self._notices if level is None or n.level == level]

    @property
    def errors(self) -> List[str]:
        return self.texts(self.ERROR)

    @property
    def has_errors(self) -> bool:
        return any(n.level == self.ERROR for n in self._notices)

    def flush(self, request) -> None:
        """Move collected notices into ``django.contrib.messages``."""
        for notice in self._notices:
            messages.add_message(request, self.MESSAGE_LEVELS[notice.level], notice.message)
        self._notices.clear()

    def __iter__(self) -> Iterator[Notice]:
        return iter(self._notices)

    def __len__(self) -> int:
        return len(self._notices)
