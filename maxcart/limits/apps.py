from django.apps import AppConfig
import contextlib
from django.utils.translation import gettext_lazy as _

class LimitsConfig(AppConfig):

    name = 'maxcart.limits'
    label = 'limits'
    verbose_name = _("Max Quantity in Cart")

    def ready(self):
        with contextlib.suppress(ImportError):
            import maxcart.limits.signals  # noqa: F401
