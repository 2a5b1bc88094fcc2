from django.conf import settings
from django.core.validators import RegexValidator
from django.db import models
from django.utils.translation import gettext_lazy as _
from djmoney.models.fields import MoneyField
from djmoney.models.validators import MinMoneyValidator

from maxcart.core.models import BaseModel
from .constants import Defaults, FieldLimits, ValidationPatterns


class Product(BaseModel):
    """Catalog entry that can be put in a cart"""

    class Status(models.TextChoices):
        ACTIVE = 'active', _("Active")
        DRAFT = 'draft', _("Draft")
        ARCHIVED = 'archived', _("Archived")

    name = models.CharField(
        _("Name"),
        max_length=FieldLimits.PRODUCT_NAME,
        db_index=True,
        validators=[
            RegexValidator(
                ValidationPatterns.PRODUCT_NAME,
                _("Product name contains invalid characters")
            )
        ]
    )
    slug = models.SlugField(
        _("Slug"),
        unique=True,
        max_length=FieldLimits.PRODUCT_NAME
    )
    sku = models.CharField(
        _("SKU"),
        max_length=FieldLimits.SKU,
        unique=True,
        validators=[
            RegexValidator(
                ValidationPatterns.SKU,
                _("Invalid SKU format")
            )
        ]
    )
    description = models.TextField(_("Description"), blank=True)
    status = models.CharField(
        _("Status"),
        max_length=FieldLimits.STATUS,
        choices=Status.choices,
        default=Status.ACTIVE,
        db_index=True
    )
    price = MoneyField(
        _("Price"),
        max_digits=Defaults.PRICE_MAX_DIGITS,
        decimal_places=Defaults.PRICE_DECIMALS,
        default_currency=settings.DEFAULT_CURRENCY,
        default=Defaults.PRICE,
        validators=[MinMoneyValidator(0)]
    )
    stock_quantity = models.PositiveIntegerField(
        _("Stock Quantity"),
        default=Defaults.STOCK_QUANTITY
    )

    class Meta:
        ordering = ['name']
        verbose_name = _("Product")
        verbose_name_plural = _("Products")

    def __str__(self):
        return f"{self.name} (SKU: {self.sku})"

    @property
    def is_purchasable(self) -> bool:
        return self.status == self.Status.ACTIVE
