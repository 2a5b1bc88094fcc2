from django import forms
from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from maxcart.products.admin import ProductAdmin as BaseProductAdmin
from maxcart.products.models import Product
from .constants import LimitConstants
from .models import ProductQuantityLimit
from .selectors import get_max_quantity
from .services import set_max_quantity

# ======================
# Forms
# ======================
class ProductLimitAdminForm(forms.ModelForm):
    max_quantity_in_cart = forms.IntegerField(
        label=_("Maximum Quantity in Basket"),
        help_text=_(
            "Set the maximum quantity of this product which can be added "
            "to the basket in a single transaction."
        ),
        required=False,
        widget=forms.NumberInput(attrs={'min': str(LimitConstants.MIN_MAX_QUANTITY)})
    )

    class Meta:
        model = Product
        fields = '__all__'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.instance._state.adding:
            self.fields['max_quantity_in_cart'].initial = get_max_quantity(self.instance.pk)

    def clean_max_quantity_in_cart(self):
        value = self.cleaned_data.get('max_quantity_in_cart')
        # Blank and non-positive values both mean "no limit".
        if value is None or value <= 0:
            return None
        return value

# ======================
# ModelAdmins
# ======================
admin.site.unregister(Product)

@admin.register(Product)
class ProductAdmin(BaseProductAdmin):
    form = ProductLimitAdminForm
    list_display = BaseProductAdmin.list_display + ('max_quantity_display',)

    def get_fieldsets(self, request, obj=None):
        fieldsets = []
        for name, options in super().get_fieldsets(request, obj):
            fields = tuple(options['fields'])
            if name == _("Inventory"):
                fields += ('max_quantity_in_cart',)
            fieldsets.append((name, {**options, 'fields': fields}))
        return fieldsets

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        set_max_quantity(obj.pk, form.cleaned_data.get('max_quantity_in_cart'))

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('quantity_limit')

    def max_quantity_display(self, obj):
        limit = getattr(obj, 'quantity_limit', None)
        return limit.max_quantity if limit else "-"
    max_quantity_display.short_description = _("Max in Basket")


@admin.register(ProductQuantityLimit)
class ProductQuantityLimitAdmin(admin.ModelAdmin):
    list_display = ('product', 'max_quantity', 'updated_at')
    search_fields = ('product__name', 'product__sku')
    autocomplete_fields = ('product',)
