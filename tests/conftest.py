"""
Shared fixtures: a company in EUR, unit and weight categories, a category
tree, a chair template and Color/Size attributes.
"""

from decimal import Decimal

import pytest

from apps.product.models import (
    Attribute,
    AttributeValue,
    Company,
    Currency,
    Pricelist,
    ProductCategory,
    ProductTemplate,
    Uom,
    UomCategory,
)


@pytest.fixture
def eur(db):
    return Currency.objects.create(name='EUR', symbol='€')


@pytest.fixture
def usd(db):
    return Currency.objects.create(name='USD', symbol='$', rate=Decimal('1.2'))


@pytest.fixture
def company(eur):
    return Company.objects.create(name='My Company', currency=eur)


@pytest.fixture
def unit_category(db):
    return UomCategory.objects.create(name='Unit')


@pytest.fixture
def units(unit_category):
    return Uom.objects.create(
        name='Units',
        category=unit_category,
        uom_type=Uom.TYPE_REFERENCE,
        rounding=Decimal('0.01'),
    )


@pytest.fixture
def dozens(unit_category, units):
    uom = Uom(name='Dozens', category=unit_category, uom_type=Uom.TYPE_BIGGER)
    uom.factor_inv = 12
    uom.save()
    uom.refresh_from_db()
    return uom


@pytest.fixture
def weight_category(db):
    return UomCategory.objects.create(name='Weight')


@pytest.fixture
def kg(weight_category):
    return Uom.objects.create(name='kg', category=weight_category, uom_type=Uom.TYPE_REFERENCE)


@pytest.fixture
def grams(weight_category, kg):
    return Uom.objects.create(
        name='g',
        category=weight_category,
        uom_type=Uom.TYPE_SMALLER,
        factor=Decimal('1000'),
        rounding=Decimal('1'),
    )


@pytest.fixture
def root_category(db):
    return ProductCategory.objects.create(name='All', category_type=ProductCategory.TYPE_VIEW)


@pytest.fixture
def saleable(root_category):
    return ProductCategory.objects.create(name='Saleable', parent=root_category)


@pytest.fixture
def template(company, units, saleable):
    return ProductTemplate.objects.create(
        name='Office Chair',
        list_price=Decimal('100'),
        uom=units,
        category=saleable,
    )


@pytest.fixture
def product(template):
    return template.product_variant


@pytest.fixture
def pricelist(eur, company):
    return Pricelist.objects.create(name='Public Pricelist', currency=eur, sequence=1)


@pytest.fixture
def color(db):
    return Attribute.objects.create(name='Color', sequence=1)


@pytest.fixture
def color_values(color):
    return [
        AttributeValue.objects.create(attribute=color, name='Red', sequence=1),
        AttributeValue.objects.create(attribute=color, name='Blue', sequence=2),
    ]


@pytest.fixture
def size(db):
    return Attribute.objects.create(name='Size', sequence=2)


@pytest.fixture
def size_values(size):
    return [
        AttributeValue.objects.create(attribute=size, name='S', sequence=1),
        AttributeValue.objects.create(attribute=size, name='M', sequence=2),
        AttributeValue.objects.create(attribute=size, name='L', sequence=3),
    ]
