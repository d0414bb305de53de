"""Merchman adapters."""

from merchman.adapters.catalog_backend import MerchmanCatalogBackend

__all__ = [
    "MerchmanCatalogBackend",
]
