"""Merchman protocols."""

from merchman.protocols.catalog import (
    CatalogBackend,
    ProductInfo,
    SkuValidation,
)

__all__ = [
    "CatalogBackend",
    "ProductInfo",
    "SkuValidation",
]
