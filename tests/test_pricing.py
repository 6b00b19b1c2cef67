"""
Tests: pricelist rule evaluation.

Run with:
    pytest tests/test_pricing.py -v
"""

import datetime
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.utils import timezone

from apps.product.models import Pricelist, PricelistItem, ProductTemplate
from apps.product.services import PricelistService
from apps.product.utils import quantize_price

pytestmark = pytest.mark.django_db


def make_rule(pricelist, **kwargs):
    return PricelistItem.objects.create(pricelist=pricelist, **kwargs)


class TestNoRules:
    def test_returns_list_price(self, pricelist, product):
        price, rule = PricelistService.compute_price_rule(pricelist, product)
        assert price == Decimal('100')
        assert rule is None

    def test_converts_into_pricelist_currency(self, usd, product):
        pricelist = Pricelist.objects.create(name='US Pricelist', currency=usd)
        price, rule = PricelistService.compute_price_rule(pricelist, product)
        assert price == Decimal('120')
        assert rule is None

    def test_no_product(self, pricelist):
        assert PricelistService.compute_price_rule(pricelist, None) == (Decimal('0'), None)


class TestRuleSelection:
    def test_highest_min_quantity_wins(self, pricelist, product):
        make_rule(pricelist, min_quantity=5, fixed_price=Decimal('90'))
        ten = make_rule(pricelist, min_quantity=10, fixed_price=Decimal('80'))

        price, rule = PricelistService.compute_price_rule(pricelist, product, quantity=12)

        assert rule == ten
        assert price == Decimal('80')

    def test_min_quantity_not_reached(self, pricelist, product):
        five = make_rule(pricelist, min_quantity=5, fixed_price=Decimal('90'))
        make_rule(pricelist, min_quantity=10, fixed_price=Decimal('80'))

        assert PricelistService.get_product_price_rule(pricelist, product, quantity=7) == five
        assert PricelistService.get_product_price_rule(pricelist, product, quantity=2) is None

    def test_variant_rule_beats_global_rule(self, pricelist, product):
        make_rule(pricelist, min_quantity=0, fixed_price=Decimal('90'))
        variant_rule = make_rule(
            pricelist,
            applied_on=PricelistItem.APPLIED_ON_VARIANT,
            product=product,
            fixed_price=Decimal('75'),
        )
        assert PricelistService.get_product_price(pricelist, product) == Decimal('75')
        assert pricelist.get_product_price_rule(product) == variant_rule

    def test_template_rule_skips_other_templates(self, pricelist, product, units, company):
        other = ProductTemplate.objects.create(name='Desk', list_price=Decimal('300'), uom=units)
        make_rule(
            pricelist,
            applied_on=PricelistItem.APPLIED_ON_TEMPLATE,
            template=other,
            fixed_price=Decimal('10'),
        )
        assert PricelistService.get_product_price(pricelist, product) == Decimal('100')
        assert PricelistService.get_product_price(pricelist, other.product_variant) == Decimal('10')

    def test_category_rule_applies_to_child_categories(self, pricelist, product, root_category):
        rule = make_rule(
            pricelist,
            applied_on=PricelistItem.APPLIED_ON_CATEGORY,
            category=root_category,
            compute_price=PricelistItem.COMPUTE_PERCENTAGE,
            percent_price=Decimal('10'),
        )
        price, matched = PricelistService.compute_price_rule(pricelist, product)
        assert matched == rule
        assert price == Decimal('90')

    def test_category_rule_skips_unrelated_category(self, pricelist, product, root_category):
        from apps.product.models import ProductCategory

        other = ProductCategory.objects.create(name='Services')
        make_rule(
            pricelist,
            applied_on=PricelistItem.APPLIED_ON_CATEGORY,
            category=other,
            fixed_price=Decimal('1'),
        )
        assert PricelistService.get_product_price_rule(pricelist, product) is None

    def test_date_window(self, pricelist, product):
        today = timezone.localdate()
        make_rule(
            pricelist,
            fixed_price=Decimal('50'),
            date_start=today - datetime.timedelta(days=30),
            date_end=today - datetime.timedelta(days=1),
        )
        assert PricelistService.get_product_price(pricelist, product) == Decimal('100')
        assert PricelistService.get_product_price(
            pricelist, product, date=today - datetime.timedelta(days=10)
        ) == Decimal('50')

    def test_date_bounds_are_inclusive(self, pricelist, product):
        today = timezone.localdate()
        make_rule(pricelist, fixed_price=Decimal('50'), date_start=today, date_end=today)
        assert PricelistService.get_product_price(pricelist, product, date=today) == Decimal('50')
        assert PricelistService.get_product_price(
            pricelist, product, date=today + datetime.timedelta(days=1)
        ) == Decimal('100')


class TestComputeModes:
    def test_fixed_price(self, pricelist, product):
        make_rule(pricelist, fixed_price=Decimal('42.50'))
        assert pricelist.get_product_price(product) == Decimal('42.50')

    def test_percentage(self, pricelist, product):
        make_rule(
            pricelist,
            compute_price=PricelistItem.COMPUTE_PERCENTAGE,
            percent_price=Decimal('20'),
        )
        assert pricelist.get_product_price(product) == Decimal('80')

    def test_formula_clamps_to_min_margin(self, pricelist, product):
        make_rule(
            pricelist,
            compute_price=PricelistItem.COMPUTE_FORMULA,
            price_discount=Decimal('10'),
            price_round=Decimal('1'),
            price_surcharge=Decimal('2'),
            price_min_margin=Decimal('5'),
        )
        assert pricelist.get_product_price(product) == Decimal('105')

    def test_formula_without_margins(self, pricelist, product):
        make_rule(
            pricelist,
            compute_price=PricelistItem.COMPUTE_FORMULA,
            price_discount=Decimal('10'),
            price_round=Decimal('1'),
            price_surcharge=Decimal('2'),
        )
        assert pricelist.get_product_price(product) == Decimal('92')

    def test_formula_clamps_to_max_margin(self, pricelist, product):
        make_rule(
            pricelist,
            compute_price=PricelistItem.COMPUTE_FORMULA,
            price_discount=Decimal('-50'),
            price_max_margin=Decimal('20'),
        )
        assert pricelist.get_product_price(product) == Decimal('120')

    def test_zero_min_margin_clamps_to_base_price(self, pricelist, product):
        make_rule(
            pricelist,
            compute_price=PricelistItem.COMPUTE_FORMULA,
            price_discount=Decimal('10'),
            price_min_margin=Decimal('0'),
        )
        assert pricelist.get_product_price(product) == Decimal('100')

    def test_zero_max_margin_clamps_to_base_price(self, pricelist, product):
        make_rule(
            pricelist,
            compute_price=PricelistItem.COMPUTE_FORMULA,
            price_discount=Decimal('-50'),
            price_max_margin=Decimal('0'),
        )
        assert pricelist.get_product_price(product) == Decimal('100')

    def test_formula_based_on_cost(self, pricelist, product):
        product.standard_price = Decimal('60')
        product.save()
        make_rule(
            pricelist,
            base=PricelistItem.BASE_STANDARD_PRICE,
            compute_price=PricelistItem.COMPUTE_FORMULA,
            price_discount=Decimal('-25'),
        )
        assert pricelist.get_product_price(product) == Decimal('75')

    def test_zero_base_price_stops_without_rule(self, pricelist, product):
        make_rule(
            pricelist,
            base=PricelistItem.BASE_STANDARD_PRICE,
            compute_price=PricelistItem.COMPUTE_FORMULA,
            price_surcharge=Decimal('10'),
        )
        price, rule = pricelist.compute_price_rule(product)
        assert price == Decimal('0')
        assert rule is None

    def test_based_on_other_pricelist(self, pricelist, product, eur):
        make_rule(pricelist, fixed_price=Decimal('80'))
        reseller = Pricelist.objects.create(name='Reseller', currency=eur)
        rule = make_rule(
            reseller,
            base=PricelistItem.BASE_PRICELIST,
            base_pricelist=pricelist,
            compute_price=PricelistItem.COMPUTE_FORMULA,
            price_discount=Decimal('10'),
        )
        price, matched = reseller.compute_price_rule(product)
        assert matched == rule
        assert price == Decimal('72')

    def test_other_pricelist_in_other_currency(self, pricelist, product, usd):
        make_rule(pricelist, fixed_price=Decimal('80'))
        us = Pricelist.objects.create(name='US Reseller', currency=usd)
        make_rule(
            us,
            base=PricelistItem.BASE_PRICELIST,
            base_pricelist=pricelist,
            compute_price=PricelistItem.COMPUTE_FORMULA,
        )
        assert us.get_product_price(product) == Decimal('96')

    def test_price_extra_is_part_of_list_price(self, pricelist, template, color, color_values):
        from apps.product.models import AttributeLine

        line = AttributeLine.objects.create(template=template, attribute=color)
        line.values.set(color_values)
        red, blue = color_values
        red.set_price_extra(template, Decimal('15'))
        red_variant = template.variants.get(attribute_values=red)
        blue_variant = template.variants.get(attribute_values=blue)

        assert pricelist.get_product_price(red_variant) == Decimal('115')
        assert pricelist.get_product_price(blue_variant) == Decimal('100')


class TestRequestUnit:
    """Quantities and prices requested in another unit than the product unit."""

    def test_list_price_per_dozen(self, pricelist, product, dozens):
        price, rule = pricelist.compute_price_rule(product, uom=dozens)
        assert rule is None
        assert quantize_price(price, 2) == Decimal('1200.00')

    def test_min_quantity_checked_in_product_unit(self, pricelist, product, dozens):
        rule = make_rule(pricelist, min_quantity=10, fixed_price=Decimal('80'))

        price, matched = pricelist.compute_price_rule(product, quantity=1, uom=dozens)

        assert matched == rule
        assert quantize_price(price, 2) == Decimal('960.00')
        assert pricelist.get_product_price_rule(product, quantity=9) is None

    def test_formula_amounts_expressed_per_dozen(self, pricelist, product, dozens):
        make_rule(
            pricelist,
            compute_price=PricelistItem.COMPUTE_FORMULA,
            price_discount=Decimal('10'),
            price_surcharge=Decimal('5'),
            price_min_margin=Decimal('10'),
        )
        assert pricelist.get_product_price(product) == Decimal('110')
        price = pricelist.get_product_price(product, uom=dozens)
        assert quantize_price(price, 2) == Decimal('1320.00')

    def test_surcharge_per_dozen(self, pricelist, product, dozens):
        make_rule(
            pricelist,
            compute_price=PricelistItem.COMPUTE_FORMULA,
            price_surcharge=Decimal('5'),
        )
        price = pricelist.get_product_price(product, quantity=2, uom=dozens)
        assert quantize_price(price, 2) == Decimal('1260.00')


class TestRuleValidation:
    def test_min_margin_above_max_margin_rejected(self, pricelist):
        with pytest.raises(ValidationError):
            make_rule(
                pricelist,
                compute_price=PricelistItem.COMPUTE_FORMULA,
                price_min_margin=Decimal('10'),
                price_max_margin=Decimal('5'),
            )

    def test_update_with_bad_margins_rejected(self, pricelist):
        rule = make_rule(pricelist, compute_price=PricelistItem.COMPUTE_FORMULA)
        rule.price_min_margin = Decimal('10')
        rule.price_max_margin = Decimal('5')
        with pytest.raises(ValidationError):
            rule.save()

    def test_self_reference_rejected(self, pricelist):
        with pytest.raises(ValidationError):
            make_rule(pricelist, base=PricelistItem.BASE_PRICELIST, base_pricelist=pricelist)

    def test_indirect_reference_cycle_rejected(self, pricelist, eur):
        reseller = Pricelist.objects.create(name='Reseller', currency=eur)
        make_rule(reseller, base=PricelistItem.BASE_PRICELIST, base_pricelist=pricelist)
        with pytest.raises(ValidationError):
            make_rule(pricelist, base=PricelistItem.BASE_PRICELIST, base_pricelist=reseller)

    def test_unused_fields_cleared(self, pricelist, product):
        rule = make_rule(
            pricelist,
            applied_on=PricelistItem.APPLIED_ON_GLOBAL,
            product=product,
            compute_price=PricelistItem.COMPUTE_PERCENTAGE,
            percent_price=Decimal('10'),
            fixed_price=Decimal('99'),
            price_discount=Decimal('5'),
        )
        rule.refresh_from_db()
        assert rule.product is None
        assert rule.fixed_price == Decimal('0')
        assert rule.price_discount == Decimal('0')
        assert rule.percent_price == Decimal('10')

    def test_defaults(self, pricelist):
        rule = make_rule(pricelist)
        assert rule.applied_on == PricelistItem.APPLIED_ON_GLOBAL
        assert rule.min_quantity == 1
        assert rule.compute_price == PricelistItem.COMPUTE_FIXED
        assert rule.name == 'All Products'

    def test_history_recorded(self, pricelist):
        rule = make_rule(pricelist, fixed_price=Decimal('10'))
        rule.fixed_price = Decimal('12')
        rule.save()
        assert rule.history.count() == 2
