"""Pytest fixtures for Merchman tests."""

import itertools

import pytest

from merchman.models import Product, Variant


_sku_seq = itertools.count(1)


@pytest.fixture
def product_factory(db):
    """
    Build a saved Product together with its master variant.

    The master's on_sale flag is explicit here instead of relying on the
    MASTER_ON_SALE_DEFAULT setting.
    """

    def make_product(*, sku=None, name="Relógio Clássico", on_sale=False, **extra):
        sku = sku or f"PROD-{next(_sku_seq):04d}"
        product = Product(sku=sku, name=name, **extra)
        product.master.on_sale = on_sale
        product.save()
        return product

    return make_product


@pytest.fixture
def product(product_factory):
    """Create a test product (master not on sale)."""
    return product_factory(sku="RELOGIO-01", name="Relógio Clássico")


@pytest.fixture
def sale_product(product_factory):
    """Create a product whose master is on sale."""
    return product_factory(sku="RELOGIO-SALE", name="Relógio Promo", on_sale=True)


@pytest.fixture
def hidden_product(product_factory):
    """Create an unpublished product on sale."""
    return product_factory(sku="HIDDEN-001", name="Hidden Product", on_sale=True, is_published=False)


@pytest.fixture
def extra_variant(db, product):
    """Create a non-master variant for the test product."""
    return Variant.objects.create(product=product, sku="RELOGIO-01-AZUL", position=1)
