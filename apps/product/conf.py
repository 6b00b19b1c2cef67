"""
App settings with defaults, overridable from the Django settings module.
"""

from django.conf import settings


def price_decimal_places():
    return getattr(settings, 'PRODUCT_PRICE_DECIMAL_PLACES', 2)


def default_pricelist_sequence():
    return getattr(settings, 'PRODUCT_DEFAULT_PRICELIST_SEQUENCE', 16)


def default_min_quantity():
    return getattr(settings, 'PRODUCT_DEFAULT_MIN_QUANTITY', 1)
