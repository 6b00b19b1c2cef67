from django.apps import AppConfig


class ProductConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.product'
    label = 'product'
    verbose_name = 'Products'

    def ready(self):
        from . import signals  # noqa: F401
