"""Variant model."""

from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords


class VariantQuerySet(models.QuerySet):
    def masters(self):
        return self.filter(is_master=True)

    def on_sale(self):
        return self.filter(on_sale=True)


class Variant(models.Model):
    """
    Stock-keeping unit of a product.

    The variant with ``is_master=True`` is the product's canonical entry
    and holds the values Product delegates to (see Product.master).
    """

    product = models.ForeignKey(
        "merchman.Product",
        on_delete=models.CASCADE,
        related_name="variants",
        verbose_name=_("produto"),
    )
    sku = models.CharField(_("SKU"), max_length=100, unique=True)
    is_master = models.BooleanField(
        _("principal"),
        default=False,
        help_text=_("Variante principal do produto"),
    )
    on_sale = models.BooleanField(
        _("em promoção"),
        default=False,
        db_index=True,
        help_text=_("Preço promocional ativo"),
    )
    position = models.IntegerField(_("posição"), default=0)

    created_at = models.DateTimeField(_("criado em"), auto_now_add=True)
    updated_at = models.DateTimeField(_("atualizado em"), auto_now=True)

    # History tracking (sale flag audit)
    history = HistoricalRecords()

    objects = VariantQuerySet.as_manager()

    # Compared by has_changes() before Product autosaves its master
    TRACKED_FIELDS = ("sku", "is_master", "on_sale", "position")

    class Meta:
        verbose_name = _("variante")
        verbose_name_plural = _("variantes")
        ordering = ["product", "-is_master", "position"]
        constraints = [
            models.UniqueConstraint(
                fields=["product"],
                condition=models.Q(is_master=True),
                name="unique_master_per_product",
            ),
        ]

    def __str__(self):
        master = " (master)" if self.is_master else ""
        return f"{self.sku}{master}"

    def has_changes(self) -> bool:
        """True if unsaved, or if a tracked field differs from the stored row."""
        if self._state.adding:
            return True
        stored = Variant.objects.filter(pk=self.pk).values_list(*self.TRACKED_FIELDS).first()
        return stored != tuple(getattr(self, name) for name in self.TRACKED_FIELDS)

    def save(self, *args, **kwargs):
        sale_changed = False
        if not self._state.adding:
            old = Variant.objects.filter(pk=self.pk).values_list("on_sale", flat=True).first()
            sale_changed = old is not None and old != self.on_sale
        super().save(*args, **kwargs)
        if sale_changed:
            from merchman.signals import sale_status_changed

            sale_status_changed.send(
                sender=self.__class__,
                instance=self,
                sku=self.product.sku,
                on_sale=self.on_sale,
            )
