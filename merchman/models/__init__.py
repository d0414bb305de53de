"""Merchman models."""

from merchman.models.product import Product
from merchman.models.variant import Variant

__all__ = [
    "Product",
    "Variant",
]
