import pytest
from django.contrib.messages import constants, get_messages
from django.contrib.messages.storage.fallback import FallbackStorage

from maxcart.cart.notices import NoticeBag


def test_collects_notices_by_level():
    notices = NoticeBag()
    notices.add("Too many")
    notices.add("Added", NoticeBag.SUCCESS)

    assert len(notices) == 2
    assert notices.has_errors
    assert notices.errors == ["Too many"]
    assert notices.texts() == ["Too many", "Added"]


def test_unknown_level_is_refused():
    with pytest.raises(ValueError):
        NoticeBag().add("oops", "fatal")


def test_flush_moves_notices_to_django_messages(rf):
    request = rf.get("/cart/")
    request.session = {}
    request._messages = FallbackStorage(request)

    notices = NoticeBag()
    notices.add("You can only add up to 2 of this product to your cart.")
    notices.add("Basket updated", NoticeBag.NOTICE)
    notices.flush(request)

    stored = [(m.level, m.message) for m in get_messages(request)]
    assert stored == [
        (constants.ERROR, "You can only add up to 2 of this product to your cart."),
        (constants.INFO, "Basket updated"),
    ]
    assert len(notices) == 0
