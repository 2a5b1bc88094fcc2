from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from maxcart.core.models import BaseModel
from maxcart.products.models import Product
from .constants import LimitConstants


class ProductQuantityLimit(BaseModel):
    """Maximum quantity of one product a cart may hold. No row means no limit."""
    product = models.OneToOneField(
        Product,
        on_delete=models.CASCADE,
        related_name='quantity_limit',
        verbose_name=_("Product")
    )
    max_quantity = models.PositiveIntegerField(
        _("Maximum Quantity in Basket"),
        validators=[MinValueValidator(LimitConstants.MIN_MAX_QUANTITY)]
    )

    class Meta:
        verbose_name = _("Product Quantity Limit")
        verbose_name_plural = _("Product Quantity Limits")

    def __str__(self):
        return f"{self.product.sku}: max {self.max_quantity}"
