"""CatalogBackend implementation for Merchman."""

from merchman.exceptions import CatalogError
from merchman.protocols import (
    CatalogBackend,
    ProductInfo,
    SkuValidation,
)
from merchman.service import CatalogService


class MerchmanCatalogBackend:
    """
    CatalogBackend implementation using Merchman's catalog service.

    Lets other apps read products and their sale status without direct
    model access.
    """

    def get_product(self, sku: str) -> ProductInfo | None:
        """Return product by SKU."""
        product = CatalogService.get(sku)
        if not product:
            return None

        return ProductInfo(
            sku=product.sku,
            name=product.name,
            description=product.long_description or None,
            is_published=product.is_published,
            is_available=product.is_available,
            on_sale=product.on_sale,
            keywords=list(product.keywords.names()) or None,
        )

    def validate_sku(self, sku: str) -> SkuValidation:
        """Validate SKU."""
        return CatalogService.validate(sku)

    def is_on_sale(self, sku: str) -> bool:
        """Return sale flag; unknown SKUs are never on sale."""
        try:
            return CatalogService.is_on_sale(sku)
        except CatalogError as e:
            if e.code != "SKU_NOT_FOUND":
                raise
            return False


# Verify implementation at import time
if not isinstance(MerchmanCatalogBackend(), CatalogBackend):
    raise TypeError("MerchmanCatalogBackend does not implement CatalogBackend protocol")
