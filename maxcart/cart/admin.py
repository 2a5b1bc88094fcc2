from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import Cart, CartItem


class CartItemInline(admin.TabularInline):
    model = CartItem
    extra = 0
    fields = ('product', 'variation', 'quantity', 'unit_price', 'line_total')
    readonly_fields = ('line_total',)
    autocomplete_fields = ('product',)

    def line_total(self, obj):
        return obj.line_total if obj.pk else "-"
    line_total.short_description = _("Line Total")


@admin.register(Cart)
class CartAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'session_key', 'item_count', 'created_at')
    search_fields = ('session_key', 'user__username')
    readonly_fields = ('created_at', 'updated_at')
    inlines = [CartItemInline]

    def item_count(self, obj):
        return obj.items.count()
    item_count.short_description = _("Items")
