"""Tests for Merchman models."""

import pytest
from django.db import IntegrityError

from merchman.exceptions import CatalogError
from merchman.models import Product, Variant


pytestmark = pytest.mark.django_db


class TestProductMaster:
    """Product always owns exactly one master variant."""

    def test_create_product_creates_master(self, db):
        """Test product creation builds and saves the master."""
        product = Product.objects.create(sku="BAGUETE", name="Baguete")

        master = Variant.objects.get(product=product, is_master=True)
        assert master.sku == "BAGUETE"
        assert product.variants.count() == 1
        assert product.master.pk == master.pk

    def test_unsaved_product_has_master(self):
        """Test master exists in memory before the first save."""
        product = Product(sku="NEW", name="New")

        assert product.master.is_master is True
        assert product.master.pk is None
        assert product.master is product.master

    def test_master_resolved_once(self, product, django_assert_num_queries):
        """Test the master instance is reused across accesses."""
        fresh = Product.objects.get(pk=product.pk)

        with django_assert_num_queries(1):
            first = fresh.master
            second = fresh.master
        assert first is second
        assert first.product is fresh

    def test_missing_master_raises(self, product):
        """Test saved product without master violates the invariant."""
        Variant.objects.filter(product=product).delete()
        fresh = Product.objects.get(pk=product.pk)

        with pytest.raises(CatalogError) as exc:
            fresh.master
        assert exc.value.code == "MASTER_NOT_FOUND"
        assert exc.value.sku == "RELOGIO-01"

    def test_delete_product_deletes_variants(self, product, extra_variant):
        """Test product and variants are destroyed together."""
        pk = product.pk
        product.delete()
        assert not Variant.objects.filter(product_id=pk).exists()

    def test_single_master_per_product(self, product):
        """Test a second master for the same product is rejected."""
        with pytest.raises(IntegrityError):
            Variant.objects.create(product=product, sku="RELOGIO-01-B", is_master=True)

    def test_master_default_from_settings(self, db, settings):
        """Test fresh master takes MASTER_ON_SALE_DEFAULT."""
        settings.MERCHMAN = {"MASTER_ON_SALE_DEFAULT": True}

        product = Product.objects.create(sku="DEFAULT-ON", name="Default On")
        assert product.on_sale is True
        assert Variant.objects.get(sku="DEFAULT-ON").on_sale is True

    def test_master_default_is_false(self, db, settings):
        """Test fresh master is not on sale without configuration."""
        settings.MERCHMAN = {}

        product = Product.objects.create(sku="DEFAULT-OFF", name="Default Off")
        assert product.on_sale is False

    def test_master_takes_sku_at_first_save(self, db):
        """Test the SKU is copied on save, not when the master was built."""
        product = Product(sku="OLD-SKU", name="Renamed")
        product.on_sale = True
        product.sku = "NEW-SKU"
        product.save()

        master = Variant.objects.get(product=product, is_master=True)
        assert master.sku == "NEW-SKU"
        assert master.on_sale is True
        assert not Variant.objects.filter(sku="OLD-SKU").exists()

    def test_refresh_from_db_reloads_master(self, product):
        """Test unsaved master changes are dropped on refresh."""
        product.master.on_sale = True
        assert product.on_sale is True

        product.refresh_from_db()
        assert product.on_sale is False


class TestProductOnSaleQuery:
    """Product.on_sale reads master.on_sale."""

    def test_master_on_sale_true(self, product):
        """Master variant on sale means product on sale."""
        product.master.on_sale = True
        assert product.on_sale is True

    def test_master_on_sale_false(self, product):
        """Master variant not on sale means product not on sale."""
        product.master.on_sale = False
        assert product.on_sale is False

    @pytest.mark.parametrize("value", [True, False])
    def test_reads_through_to_master(self, product, value):
        """Direct writes on master are visible through the product."""
        product.master.on_sale = value
        assert product.on_sale is value

    def test_reads_persisted_master(self, sale_product):
        """Test a freshly loaded product reads the stored flag."""
        fresh = Product.objects.get(pk=sale_product.pk)
        assert fresh.on_sale is True

    def test_product_stores_no_flag(self):
        """Product has no on_sale column of its own."""
        field_names = {f.name for f in Product._meta.get_fields()}
        assert "on_sale" not in field_names


class TestProductOnSaleCommand:
    """Product.on_sale = v writes master.on_sale."""

    def test_sets_master_on_sale(self, product):
        """Test setter toggles the master variant flag."""
        master = product.master

        product.on_sale = True
        assert master.on_sale is True

        product.on_sale = False
        assert master.on_sale is False

    @pytest.mark.parametrize("value", [True, False])
    def test_writes_through_to_master(self, product, value):
        product.on_sale = value
        assert product.master.on_sale is value

    @pytest.mark.parametrize("value", [True, False])
    def test_repeated_write_is_idempotent(self, product, value):
        product.on_sale = value
        product.on_sale = value
        assert product.on_sale is value
        assert product.master.on_sale is value

    def test_save_persists_master(self, product):
        """Test product.save() writes the master back."""
        product.on_sale = True
        product.save()

        assert Variant.objects.get(pk=product.master.pk).on_sale is True

    def test_extra_variant_untouched(self, product, extra_variant):
        """Only the master variant is written."""
        product.on_sale = True
        product.save()

        extra_variant.refresh_from_db()
        assert extra_variant.on_sale is False


class TestQuerySets:
    """Tests for Product/Variant QuerySet methods."""

    def test_product_on_sale(self, product, sale_product):
        on_sale = Product.objects.on_sale()
        assert list(on_sale) == [sale_product]

    def test_product_on_sale_ignores_non_master(self, product, extra_variant):
        """A non-master variant on sale does not put the product on sale."""
        extra_variant.on_sale = True
        extra_variant.save()

        assert not Product.objects.on_sale().exists()

    def test_product_active(self, product, hidden_product):
        assert list(Product.objects.active()) == [product]

    def test_product_published_and_available(self, product_factory):
        p1 = product_factory(sku="P1")
        product_factory(sku="P2", is_published=False)
        product_factory(sku="P3", is_available=False)

        assert set(Product.objects.published().values_list("sku", flat=True)) == {"P1", "P3"}
        assert set(Product.objects.available().values_list("sku", flat=True)) == {"P1", "P2"}
        assert Product.objects.active().get() == p1

    def test_variant_masters_and_on_sale(self, product, sale_product, extra_variant):
        assert Variant.objects.masters().count() == 2
        assert list(Variant.objects.on_sale()) == [sale_product.master]


class TestSignals:
    """product_created and sale_status_changed."""

    def test_product_created_emitted_once(self, db):
        from merchman.signals import product_created

        received = []

        def handler(sender, instance, sku, **kwargs):
            received.append(sku)

        product_created.connect(handler)
        try:
            product = Product.objects.create(sku="SIG-001", name="Signal Test")
            product.name = "Updated Name"
            product.save()
            assert received == ["SIG-001"]
        finally:
            product_created.disconnect(handler)

    def test_sale_status_changed_on_save(self, product):
        from merchman.signals import sale_status_changed

        received = []

        def handler(sender, instance, sku, on_sale, **kwargs):
            received.append((sender, sku, on_sale))

        sale_status_changed.connect(handler)
        try:
            product.on_sale = True
            product.save()
            assert received == [(Variant, "RELOGIO-01", True)]
        finally:
            sale_status_changed.disconnect(handler)

    def test_sale_status_not_emitted_when_unchanged(self, product):
        from merchman.signals import sale_status_changed

        received = []

        def handler(sender, **kwargs):
            received.append(kwargs)

        sale_status_changed.connect(handler)
        try:
            product.on_sale = False
            product.save()
            assert received == []
        finally:
            sale_status_changed.disconnect(handler)

    def test_sale_status_not_emitted_on_create(self, db):
        from merchman.signals import sale_status_changed

        received = []

        def handler(sender, **kwargs):
            received.append(kwargs)

        sale_status_changed.connect(handler)
        try:
            product = Product(sku="SIG-NEW", name="New")
            product.on_sale = True
            product.save()
            assert received == []
        finally:
            sale_status_changed.disconnect(handler)


class TestHistory:
    """simple_history keeps an audit trail of the sale flag."""

    def test_variant_history_records_sale_changes(self, product):
        product.on_sale = True
        product.save()
        product.on_sale = False
        product.save()

        flags = list(
            product.master.history.order_by("history_id").values_list("on_sale", flat=True)
        )
        assert flags == [False, True, False]

    def test_unchanged_master_not_resaved(self, product):
        """Saving only product fields adds no variant history."""
        product.name = "Novo Nome"
        product.save()
        product.name = "Outro Nome"
        product.save()

        assert product.master.history.count() == 1
        assert product.history.count() == 3

    def test_product_history_on_create(self, product):
        assert product.history.count() == 1
        assert product.history.first().history_type == "+"


class TestKeywords:
    def test_keywords(self, product):
        product.keywords.add("relogio", "classico")
        assert set(product.keywords.names()) == {"relogio", "classico"}
