"""
Django Merchman - Products and their master variants.

Usage:
    from merchman import CatalogService, CatalogError

    product = CatalogService.get("RELOGIO-01")
    CatalogService.set_on_sale("RELOGIO-01", True)
"""


def __getattr__(name):
    if name == "CatalogService":
        from merchman.service import CatalogService

        return CatalogService
    elif name == "CatalogError":
        from merchman.exceptions import CatalogError

        return CatalogError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["CatalogService", "CatalogError"]
__version__ = "0.1.0"
