from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _
from djmoney.models.fields import MoneyField
from djmoney.money import Money

from maxcart.core.models import BaseModel
from maxcart.products.models import Product


class Cart(BaseModel):
    """Shopping cart owned by a user or an anonymous session"""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='carts',
        verbose_name=_("User")
    )
    session_key = models.CharField(
        _("Session Key"),
        max_length=40,
        blank=True,
        db_index=True
    )

    class Meta:
        verbose_name = _("Cart")
        verbose_name_plural = _("Carts")

    def __str__(self):
        owner = self.user or self.session_key or "anonymous"
        return f"Cart {self.id} ({owner})"

    @property
    def subtotal(self) -> Money:
        return sum(
            (item.line_total for item in self.items.all()),
            Money(0, settings.DEFAULT_CURRENCY)
        )


class CartItem(BaseModel):
    """One cart line: a product, its variation key and the quantity held"""
    cart = models.ForeignKey(
        Cart,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name=_("Cart")
    )
    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name='cart_items',
        verbose_name=_("Product")
    )
    variation = models.CharField(
        _("Variation"),
        max_length=100,
        blank=True,
        default=""
    )
    quantity = models.PositiveIntegerField(
        _("Quantity"),
        default=1,
        validators=[MinValueValidator(1)]
    )
    unit_price = MoneyField(
        _("Unit Price"),
        max_digits=14,
        decimal_places=2,
        default_currency=settings.DEFAULT_CURRENCY
    )

    class Meta:
        verbose_name = _("Cart Item")
        verbose_name_plural = _("Cart Items")
        ordering = ['created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['cart', 'product', 'variation'],
                name='unique_cart_line'
            )
        ]

    def __str__(self):
        return f"{self.quantity} x {self.product.name}"

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity
