"""Merchman admin."""

from merchman.admin.product import ProductAdmin, VariantInline
from merchman.admin.variant import VariantAdmin

__all__ = [
    "ProductAdmin",
    "VariantAdmin",
    "VariantInline",
]
