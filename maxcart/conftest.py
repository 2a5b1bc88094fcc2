import pytest
from django.conf import settings
from djmoney.money import Money

from maxcart.cart.models import Cart
from maxcart.products.models import Product


@pytest.fixture
def product(db) -> Product:
    return Product.objects.create(
        name="Gift Card",
        slug="gift-card",
        sku="GIFT-0001",
        price=Money("10.00", settings.DEFAULT_CURRENCY),
        stock_quantity=100,
    )


@pytest.fixture
def other_product(db) -> Product:
    return Product.objects.create(
        name="Tea Towel",
        slug="tea-towel",
        sku="TOWEL-0001",
        price=Money("4.50", settings.DEFAULT_CURRENCY),
        stock_quantity=100,
    )


@pytest.fixture
def cart(db) -> Cart:
    return Cart.objects.create(session_key="test-session")
