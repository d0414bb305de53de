"""
Merchman public API.

CORE (essential):
    CatalogService.get(sku)                - Get product
    CatalogService.validate(sku)           - Validate SKU

SALE (master variant flag):
    CatalogService.is_on_sale(sku)         - Read sale flag
    CatalogService.set_on_sale(sku, v)     - Write sale flag
    CatalogService.bulk_set_on_sale(skus)  - Write sale flag for many products
    CatalogService.on_sale_products()      - Active products on sale
"""

import logging
from typing import TYPE_CHECKING

from django.db import models, transaction

from merchman.exceptions import CatalogError

if TYPE_CHECKING:
    from merchman.models import Product
    from merchman.protocols import SkuValidation

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Merchman public API.

    Uses @classmethod for extensibility.

    CORE (essential):
        get(sku)      - Get product
        validate(sku) - Validate SKU

    SALE:
        is_on_sale(sku), set_on_sale(sku, value),
        bulk_set_on_sale(skus, value), on_sale_products()
    """

    # ======================================================================
    # CORE API
    # ======================================================================

    @classmethod
    def get(cls, sku: str | list[str]) -> "Product | dict[str, Product] | None":
        """
        Get product(s) by SKU.

        Args:
            sku: Single SKU or list of SKUs

        Returns:
            Product | None (for single SKU)
            dict[sku, Product] (for list)
        """
        from merchman.models import Product

        if isinstance(sku, list):
            products = Product.objects.filter(sku__in=sku)
            return {p.sku: p for p in products}
        return cls._fetch_product(sku)

    @classmethod
    def _fetch_product(cls, sku: str) -> "Product | None":
        """Internal: fetch product by SKU. Override for caching, etc."""
        from merchman.models import Product

        return Product.objects.filter(sku=sku).first()

    @classmethod
    def validate(cls, sku: str) -> "SkuValidation":
        """
        Validate SKU and return structured information.

        Returns:
            SkuValidation dataclass
        """
        from merchman.protocols import SkuValidation

        product = cls.get(sku)

        if not product:
            return SkuValidation(
                valid=False,
                sku=sku,
                error_code="not_found",
                message=f"SKU '{sku}' not found",
            )

        return SkuValidation(
            valid=True,
            sku=sku,
            name=product.name,
            is_published=product.is_published,
            is_available=product.is_available,
            on_sale=product.on_sale,
            message=cls._get_validation_message(product),
        )

    @classmethod
    def _get_validation_message(cls, product: "Product") -> str | None:
        """Generate validation message based on product state."""
        if not product.is_published:
            return "Product is not published in catalog"
        if not product.is_available:
            return "Product is not available for purchase"
        return None

    # ======================================================================
    # SALE API
    # ======================================================================

    @classmethod
    def is_on_sale(cls, sku: str) -> bool:
        """
        Return whether the product's master variant is on sale.

        Raises:
            CatalogError: If SKU not found
        """
        product = cls.get(sku)
        if not product:
            raise CatalogError("SKU_NOT_FOUND", sku=sku)
        return product.on_sale

    @classmethod
    def set_on_sale(cls, sku: str, value: bool) -> "Product":
        """
        Set the sale flag through Product.on_sale and persist the master.

        Args:
            sku: Product code
            value: New flag (must be a bool)

        Returns:
            The updated Product

        Raises:
            CatalogError: If SKU not found or value is not a bool
        """
        if not isinstance(value, bool):
            raise CatalogError("INVALID_SALE_FLAG", sku=sku, value=repr(value))

        product = cls.get(sku)
        if not product:
            raise CatalogError("SKU_NOT_FOUND", sku=sku)

        product.on_sale = value
        product.master.save(update_fields=["on_sale", "updated_at"])
        logger.info("Sale flag for %s set to %s", sku, value)
        return product

    @classmethod
    def bulk_set_on_sale(cls, skus: list[str], value: bool) -> int:
        """
        Set the sale flag on the master variants of many products.

        Runs a single UPDATE; sale_status_changed is NOT sent per row.

        Returns:
            Number of master variants updated
        """
        from django.utils import timezone

        from merchman.models import Variant

        if not isinstance(value, bool):
            raise CatalogError("INVALID_SALE_FLAG", value=repr(value))

        with transaction.atomic():
            updated = (
                Variant.objects.masters()
                .filter(product__sku__in=skus)
                .update(on_sale=value, updated_at=timezone.now())
            )
        logger.info("Sale flag set to %s on %d product(s)", value, updated)
        return updated

    @classmethod
    def on_sale_products(cls) -> models.QuerySet["Product"]:
        """Published and available products whose master is on sale."""
        from merchman.models import Product

        return Product.objects.active().on_sale().distinct()
