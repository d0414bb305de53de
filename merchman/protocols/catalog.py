"""Catalog protocols."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class ProductInfo:
    """Product information.

    Availability is determined by two flags:
    - is_published: Published in catalog (False = hidden/discontinued)
    - is_available: Can be purchased (False = paused)

    on_sale mirrors the master variant's flag at read time.
    """

    sku: str
    name: str
    description: str | None
    is_published: bool = True
    is_available: bool = True
    on_sale: bool = False
    keywords: list[str] | None = None


@dataclass(frozen=True)
class SkuValidation:
    """Validation result."""

    valid: bool
    sku: str
    name: str | None = None
    is_published: bool = True
    is_available: bool = True
    on_sale: bool = False
    error_code: str | None = None
    message: str | None = None


@runtime_checkable
class CatalogBackend(Protocol):
    """Interface for catalog queries."""

    def get_product(self, sku: str) -> ProductInfo | None:
        """Return product by SKU."""
        ...

    def validate_sku(self, sku: str) -> SkuValidation:
        """Validate SKU."""
        ...

    def is_on_sale(self, sku: str) -> bool:
        """Return the master variant's sale flag."""
        ...
