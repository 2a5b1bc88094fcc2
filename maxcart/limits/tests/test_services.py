import pytest

from maxcart.limits.models import ProductQuantityLimit
from maxcart.limits.selectors import get_max_quantity
from maxcart.limits.services import set_max_quantity
from maxcart.products.exceptions import ProductNotFoundError


@pytest.mark.django_db
class TestMaxQuantityStorage:
    def test_absent_by_default(self, product):
        assert get_max_quantity(product.pk) is None

    def test_set_then_update(self, product):
        set_max_quantity(product.pk, 5)
        assert get_max_quantity(product.pk) == 5

        limit = set_max_quantity(product.pk, 8)
        assert limit.max_quantity == 8
        assert get_max_quantity(product.pk) == 8
        assert ProductQuantityLimit.objects.count() == 1

    @pytest.mark.parametrize("cleared_value", [None, 0, -3])
    def test_clearing_deletes_the_limit(self, product, cleared_value):
        set_max_quantity(product.pk, 5)

        assert set_max_quantity(product.pk, cleared_value) is None
        assert get_max_quantity(product.pk) is None
        assert not ProductQuantityLimit.objects.exists()

    def test_clearing_without_limit_is_a_no_op(self, product):
        assert set_max_quantity(product.pk, None) is None

    def test_limits_are_per_product(self, product, other_product):
        set_max_quantity(product.pk, 2)

        assert get_max_quantity(other_product.pk) is None

    def test_unknown_product(self):
        with pytest.raises(ProductNotFoundError):
            set_max_quantity("00000000-0000-0000-0000-000000000000", 3)

    def test_malformed_product_id(self):
        with pytest.raises(ProductNotFoundError):
            get_max_quantity("not-a-uuid")
        with pytest.raises(ProductNotFoundError):
            set_max_quantity("not-a-uuid", 3)
