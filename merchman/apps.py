from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class MerchmanConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "merchman"
    verbose_name = _("Produtos e Variantes")
