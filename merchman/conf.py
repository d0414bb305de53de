"""
Merchman configuration.

Usage in settings.py:
    MERCHMAN = {
        "MASTER_ON_SALE_DEFAULT": False,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class MerchmanSettings:
    """Merchman configuration settings."""

    # on_sale value given to the master variant created alongside a new product
    MASTER_ON_SALE_DEFAULT: bool = False


def get_merchman_settings() -> MerchmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "MERCHMAN", {})
    return MerchmanSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_merchman_settings(), name)


merchman_settings = _LazySettings()
