"""
Merchman signals.

Signals:
    product_created:
        Sent after a new Product (and its master variant) is saved for the first time.

        Kwargs:
            sender: Product class
            instance: The Product instance that was created
            sku: str — the product SKU

    sale_status_changed:
        Sent after a saved Variant's on_sale flag changes.

        Kwargs:
            sender: Variant class
            instance: The Variant instance
            sku: str — the owning product SKU
            on_sale: bool — the new value

        Example handler::

            from merchman.signals import sale_status_changed

            def on_sale_changed(sender, instance, sku, on_sale, **kwargs):
                logger.info("Sale flag for %s is now %s", sku, on_sale)

            sale_status_changed.connect(on_sale_changed)
"""

from django.dispatch import Signal

product_created = Signal()
sale_status_changed = Signal()
