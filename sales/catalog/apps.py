from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'sales.catalog'
    verbose_name = 'Product Catalog'
