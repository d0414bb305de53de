"""Variant admin."""

from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from merchman.models import Variant


@admin.register(Variant)
class VariantAdmin(SimpleHistoryAdmin):
    list_display = ["sku", "product", "is_master", "on_sale", "position"]
    list_filter = ["is_master", "on_sale"]
    search_fields = ["sku", "product__sku", "product__name"]
    list_select_related = ["product"]
    autocomplete_fields = ["product"]
    readonly_fields = ["created_at", "updated_at"]
