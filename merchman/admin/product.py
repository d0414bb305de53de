"""Product admin."""

from django.contrib import admin
from django.utils.html import format_html, format_html_join
from simple_history.admin import SimpleHistoryAdmin

from merchman.models import Product, Variant
from merchman.service import CatalogService


def _badge(label, background, color):
    return format_html(
        '<span style="background-color:{};color:{};'
        'padding:2px 6px;border-radius:3px;font-size:11px;">{}</span>',
        background,
        color,
        label,
    )


class VariantInline(admin.TabularInline):
    model = Variant
    extra = 0
    fields = ["sku", "is_master", "on_sale", "position"]


@admin.register(Product)
class ProductAdmin(SimpleHistoryAdmin):
    list_display = [
        "sku",
        "name",
        "visibility_status",
        "on_sale_display",
    ]
    list_filter = [
        "is_published",
        "is_available",
    ]
    search_fields = ["sku", "name", "keywords__name"]
    readonly_fields = ["uuid", "created_at", "updated_at"]
    inlines = [VariantInline]

    fieldsets = [
        (
            None,
            {"fields": ("sku", "name", "short_description", "long_description", "keywords")},
        ),
        (
            "Publication & Availability",
            {
                "fields": ("is_published", "is_available"),
                "description": "is_published controls catalog publication, is_available controls purchase availability.",
            },
        ),
        (
            "Metadata",
            {
                "fields": ("metadata", "uuid", "created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    ]

    def get_queryset(self, request):
        return super().get_queryset(request).prefetch_related("variants")

    def visibility_status(self, obj):
        """Display visibility status with colored badges."""
        badges = []

        if not obj.is_published:
            badges.append(_badge("Unpublished", "#ffc107", "#000"))
        if not obj.is_available:
            badges.append(_badge("Unavailable", "#dc3545", "#fff"))

        if not badges:
            return _badge("Active", "#28a745", "#fff")

        return format_html_join(" ", "{}", ((badge,) for badge in badges))

    visibility_status.short_description = "Status"

    def on_sale_display(self, obj):
        # Read from the prefetched variants; avoids one query per row
        return any(v.on_sale for v in obj.variants.all() if v.is_master)

    on_sale_display.boolean = True
    on_sale_display.short_description = "On sale"

    actions = ["put_on_sale", "remove_from_sale"]

    @admin.action(description="Put selected products on sale")
    def put_on_sale(self, request, queryset):
        skus = list(queryset.values_list("sku", flat=True))
        updated = CatalogService.bulk_set_on_sale(skus, True)
        self.message_user(request, f"{updated} product(s) put on sale.")

    @admin.action(description="Remove selected products from sale")
    def remove_from_sale(self, request, queryset):
        skus = list(queryset.values_list("sku", flat=True))
        updated = CatalogService.bulk_set_on_sale(skus, False)
        self.message_user(request, f"{updated} product(s) removed from sale.")
