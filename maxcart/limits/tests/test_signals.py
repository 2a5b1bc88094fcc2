import pytest

from maxcart.cart.exceptions import CartValidationError
from maxcart.cart.models import Cart
from maxcart.cart.notices import NoticeBag
from maxcart.cart.selectors import sum_quantity_for_product
from maxcart.cart.services import add_to_cart, update_cart_item_quantity
from maxcart.cart.signals import (
    AddToCartContext,
    UpdateCartContext,
    add_to_cart_validation,
    update_cart_validation,
)
from maxcart.limits.signals import (
    limit_product_quantity_in_cart,
    limit_product_quantity_in_cart_update,
)
from maxcart.limits.services import set_max_quantity


def test_validators_are_registered_on_startup():
    assert add_to_cart_validation.has_listeners(Cart)
    assert update_cart_validation.has_listeners(Cart)


@pytest.mark.django_db
class TestAddToCartLimit:
    def test_without_limit_anything_goes(self, cart, product):
        add_to_cart(cart, product.pk, 100)
        item = add_to_cart(cart, product.pk, 50)

        assert item.quantity == 150

    def test_up_to_the_limit_is_allowed(self, cart, product):
        set_max_quantity(product.pk, 5)
        add_to_cart(cart, product.pk, 3)
        item = add_to_cart(cart, product.pk, 2)

        assert item.quantity == 5

    def test_over_the_limit_is_rejected(self, cart, product):
        set_max_quantity(product.pk, 5)
        item = add_to_cart(cart, product.pk, 3)
        notices = NoticeBag()

        with pytest.raises(CartValidationError) as exc_info:
            add_to_cart(cart, product.pk, 3, notices=notices)

        message = "You can only add up to 5 of this product to your cart."
        assert exc_info.value.errors == [message]
        assert notices.errors == [message]
        item.refresh_from_db()
        assert item.quantity == 3

    def test_existing_quantity_spans_variations(self, cart, product):
        set_max_quantity(product.pk, 4)
        add_to_cart(cart, product.pk, 2, variation="red")
        add_to_cart(cart, product.pk, 2, variation="blue")

        with pytest.raises(CartValidationError):
            add_to_cart(cart, product.pk, 1, variation="green")

    def test_limit_is_per_product(self, cart, product, other_product):
        set_max_quantity(product.pk, 1)
        add_to_cart(cart, product.pk, 1)

        assert add_to_cart(cart, other_product.pk, 10).quantity == 10

    def test_keeps_earlier_refusal_when_under_limit(self, cart, product):
        set_max_quantity(product.pk, 5)
        context = AddToCartContext(cart=cart, product_id=product.pk, quantity=1)

        assert limit_product_quantity_in_cart(
            sender=Cart, passed=False, context=context, notices=NoticeBag()
        ) is False


@pytest.mark.django_db
class TestUpdateCartLimit:
    def test_update_within_limit(self, cart, product):
        item = add_to_cart(cart, product.pk, 1)
        set_max_quantity(product.pk, 10)

        assert update_cart_item_quantity(item.pk, 10).quantity == 10

    def test_update_over_limit_is_rejected(self, cart, product):
        item = add_to_cart(cart, product.pk, 1)
        set_max_quantity(product.pk, 10)

        with pytest.raises(CartValidationError) as exc_info:
            update_cart_item_quantity(item.pk, 11)

        assert exc_info.value.errors == [
            "You can only have a maximum of 10 of this product in your basket."
        ]
        item.refresh_from_db()
        assert item.quantity == 1

    def test_removing_a_line_ignores_the_limit(self, cart, product):
        item = add_to_cart(cart, product.pk, 3)
        set_max_quantity(product.pk, 1)

        assert update_cart_item_quantity(item.pk, 0) is None

    def test_update_checks_only_the_edited_line(self, cart, product):
        set_max_quantity(product.pk, 5)
        red = add_to_cart(cart, product.pk, 3, variation="red")
        add_to_cart(cart, product.pk, 2, variation="blue")

        # Each line stays within the limit, so the cart total may exceed it.
        assert update_cart_item_quantity(red.pk, 5).quantity == 5
        assert sum_quantity_for_product(cart, product.pk) == 7

    def test_update_receiver_called_directly(self, cart, product):
        item = add_to_cart(cart, product.pk, 1)
        set_max_quantity(product.pk, 2)
        notices = NoticeBag()
        context = UpdateCartContext(cart=cart, item=item, quantity=3)

        assert limit_product_quantity_in_cart_update(
            sender=Cart, passed=True, context=context, notices=notices
        ) is False
        assert notices.errors == [
            "You can only have a maximum of 2 of this product in your basket."
        ]
