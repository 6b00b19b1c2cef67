"""
Product models with units of measure, pricelists and attribute variants.

Model Hierarchy:
- ProductTemplate: What variants share (e.g., "Shirt", list price 20, sold per Unit)
- Attribute / AttributeValue: Attributes and their values (Color: Blue, Size: M)
- AttributeLine: Values of one attribute offered on a template
- Product: Variant generated from one combination of attribute values
- Pricelist / PricelistItem: Ordered pricing rules in one currency
- UomCategory / Uom: Convertible units of measure
"""

from .currency import Currency
from .partner import Country, CountryGroup, Company, Partner
from .uom import UomCategory, Uom
from .category import ProductCategory
from .attribute import Attribute, AttributeValue, AttributePrice, AttributeLine
from .template import ProductTemplate
from .product import Product
from .pricelist import Pricelist, PricelistItem
from .price_history import ProductPriceHistory
from .supplier import SupplierInfo, ProductPackaging

__all__ = [
    'Currency',
    'Country',
    'CountryGroup',
    'Company',
    'Partner',
    'UomCategory',
    'Uom',
    'ProductCategory',
    'Attribute',
    'AttributeValue',
    'AttributePrice',
    'AttributeLine',
    'ProductTemplate',
    'Product',
    'Pricelist',
    'PricelistItem',
    'ProductPriceHistory',
    'SupplierInfo',
    'ProductPackaging',
]
