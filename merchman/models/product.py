"""Product model."""

import uuid as uuid_lib
from typing import TYPE_CHECKING

from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords
from taggit.managers import TaggableManager

if TYPE_CHECKING:
    from merchman.models.variant import Variant


class ProductQuerySet(models.QuerySet):
    """Custom QuerySet for Product with availability and sale filters."""

    def active(self):
        """Products that are published AND available."""
        return self.filter(is_published=True, is_available=True)

    def published(self):
        """Products that are published (may be unavailable)."""
        return self.filter(is_published=True)

    def available(self):
        """Products that are available for sale."""
        return self.filter(is_available=True)

    def on_sale(self):
        """Products whose master variant is on sale."""
        # Single filter() so both conditions hit the same variant row
        return self.filter(variants__is_master=True, variants__on_sale=True)


class Product(models.Model):
    """
    Sellable product.

    Every product owns exactly one master variant, created together with it.
    Variant-level attributes such as ``on_sale`` live on the master and are
    exposed here by delegation; Product keeps no copy of its own.
    """

    uuid = models.UUIDField(default=uuid_lib.uuid4, editable=False, unique=True, verbose_name=_("UUID"))

    # Identification
    sku = models.CharField(
        _("SKU"),
        max_length=100,
        unique=True,
    )
    name = models.CharField(_("nome"), max_length=200)
    short_description = models.CharField(
        _("descrição curta"),
        max_length=255,
        blank=True,
        help_text=_("Descrição resumida para listagens (máx. 255 caracteres)"),
    )
    long_description = models.TextField(
        _("descrição longa"),
        blank=True,
        help_text=_("Descrição completa do produto"),
    )

    keywords = TaggableManager(
        blank=True,
        verbose_name=_("palavras-chave"),
        help_text=_("Tags para SEO e busca. Separe por vírgula."),
    )

    # === PUBLICATION & AVAILABILITY ===
    is_published = models.BooleanField(
        _("publicado"),
        default=True,
        db_index=True,
        help_text=_("Publicado no catálogo (Não = oculto/descontinuado)"),
    )

    is_available = models.BooleanField(
        _("disponível"),
        default=True,
        db_index=True,
        help_text=_("Disponível para venda (Não = pausado)"),
    )

    # Metadata
    metadata = models.JSONField(
        _("metadados"),
        default=dict,
        blank=True,
    )

    # Audit
    created_at = models.DateTimeField(_("criado em"), auto_now_add=True)
    updated_at = models.DateTimeField(_("atualizado em"), auto_now=True)

    # History tracking
    history = HistoricalRecords()

    objects = ProductQuerySet.as_manager()

    class Meta:
        verbose_name = _("produto")
        verbose_name_plural = _("produtos")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_published", "is_available"], name="merchman_prod_pub_avail_idx"),
        ]

    def __str__(self):
        return f"{self.sku} - {self.name}"

    def save(self, *args, **kwargs):
        is_new = self._state.adding
        # A new product always builds its master; an existing one only
        # writes a loaded master back when it differs from the stored row.
        master = self.master if is_new else self.__dict__.get("_master")
        super().save(*args, **kwargs)
        if master is not None:
            master.product = self
            if is_new:
                master.sku = self.sku
            if master.has_changes():
                master.save()
        if is_new:
            from merchman.signals import product_created

            product_created.send(sender=self.__class__, instance=self, sku=self.sku)

    def refresh_from_db(self, using=None, fields=None, **kwargs):
        super().refresh_from_db(using=using, fields=fields, **kwargs)
        if fields is None:
            self.__dict__.pop("_master", None)

    @property
    def master(self) -> "Variant":
        """
        The master variant.

        The resolved instance is kept on the product, so changes made through
        ``product.master`` are seen by every delegated property until the
        next ``refresh_from_db()``.

        Raises:
            CatalogError: MASTER_NOT_FOUND if a saved product has no master.
        """
        master = self.__dict__.get("_master")
        if master is not None:
            return master

        from merchman.models.variant import Variant

        if self._state.adding:
            from merchman.conf import merchman_settings

            master = Variant(
                product=self,
                sku=self.sku,
                is_master=True,
                on_sale=merchman_settings.MASTER_ON_SALE_DEFAULT,
            )
        else:
            master = self.variants.filter(is_master=True).first()
            if master is None:
                from merchman.exceptions import CatalogError

                raise CatalogError("MASTER_NOT_FOUND", sku=self.sku)
            # Share this instance so master.product doesn't refetch
            master.product = self

        self.__dict__["_master"] = master
        return master

    @property
    def on_sale(self) -> bool:
        """True if the master variant is on sale."""
        return self.master.on_sale

    @on_sale.setter
    def on_sale(self, value: bool):
        """Set the master variant's on_sale flag."""
        self.master.on_sale = bool(value)
