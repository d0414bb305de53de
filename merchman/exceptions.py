"""Merchman exceptions."""

from typing import Any


ERROR_MESSAGES = {
    "SKU_NOT_FOUND": "SKU not found",
    "MASTER_NOT_FOUND": "Product has no master variant",
    "INVALID_SALE_FLAG": "on_sale must be a boolean",
}


class CatalogError(Exception):
    """
    Error raised by Merchman models and CatalogService.

    ``code`` is one of ERROR_MESSAGES' keys; keyword arguments end up in
    ``data`` (usually ``sku``, plus ``value`` for INVALID_SALE_FLAG).

    MASTER_NOT_FOUND signals a broken product (saved without its master
    variant) and should not be handled as "not on sale".

    Usage:
        try:
            CatalogService.set_on_sale("XYZ", True)
        except CatalogError as e:
            if e.code == "SKU_NOT_FOUND":
                ...
    """

    def __init__(self, code: str, message: str = "", **data: Any) -> None:
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    def __reduce__(self):
        # Exception's default pickling replays only the formatted string
        return (self.__class__, (self.code, self.message), {"data": self.data})

    @property
    def sku(self) -> str | None:
        return self.data.get("sku")

    def as_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "data": self.data}
