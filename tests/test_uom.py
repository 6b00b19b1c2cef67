"""
Tests: unit of measure conversions and unit integrity.

Run with:
    pytest tests/test_uom.py -v
"""

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from apps.product.exceptions import UomConversionError
from apps.product.models import Uom
from apps.product.services import compute_price, compute_quantity
from apps.product.utils import round_to


class TestRoundTo:
    def test_rounds_half_away_from_zero(self):
        assert round_to(Decimal('2.5'), Decimal('1')) == Decimal('3')
        assert round_to(Decimal('-2.5'), Decimal('1')) == Decimal('-3')

    def test_rounds_to_multiple(self):
        assert round_to(Decimal('6.83'), Decimal('0.5')) == Decimal('7.0')
        assert round_to(Decimal('94'), Decimal('10')) == Decimal('90')

    def test_zero_precision_keeps_value(self):
        assert round_to(Decimal('1.234'), 0) == Decimal('1.234')


@pytest.mark.django_db
class TestComputeQuantity:
    def test_dozens_to_units(self, dozens, units):
        assert compute_quantity(2, dozens, units) == Decimal('24')

    def test_units_to_dozens_rounded(self, dozens, units):
        assert compute_quantity(18, units, dozens) == Decimal('1.50')

    def test_grams_rounding(self, kg, grams):
        # grams round to whole units
        assert compute_quantity(Decimal('1.2345'), kg, grams) == Decimal('1235')

    def test_round_trip_without_rounding(self, dozens, units, kg, grams):
        for qty in (Decimal('7'), Decimal('5.5'), Decimal('0.013')):
            there = compute_quantity(qty, units, dozens, round=False)
            back = compute_quantity(there, dozens, units, round=False)
            assert abs(back - qty) < Decimal('1e-9')

            there = compute_quantity(qty, kg, grams, round=False)
            back = compute_quantity(there, grams, kg, round=False)
            assert abs(back - qty) < Decimal('1e-9')

    def test_cross_category_fails(self, units, kg):
        with pytest.raises(UomConversionError) as excinfo:
            compute_quantity(1, units, kg)
        assert excinfo.value.code == 'uom_category_mismatch'

    def test_cross_category_is_a_validation_error(self, units, kg):
        with pytest.raises(ValidationError):
            units.compute_quantity(1, kg)

    def test_without_source_unit(self, units):
        assert compute_quantity(Decimal('3.333'), None, units) == Decimal('3.333')

    def test_without_target_unit_returns_reference_amount(self, dozens):
        result = compute_quantity(1, dozens, None)
        assert abs(result - Decimal('12')) < Decimal('1e-6')


@pytest.mark.django_db
class TestComputePrice:
    def test_price_per_dozen_to_price_per_unit(self, dozens, units):
        result = compute_price(Decimal('120'), dozens, units)
        assert abs(result - Decimal('10')) < Decimal('1e-6')

    def test_price_per_kg_to_price_per_gram(self, kg, grams):
        assert compute_price(Decimal('50'), kg, grams) == Decimal('0.05')

    def test_cross_category_returns_input(self, units, kg):
        assert compute_price(Decimal('42'), units, kg) == Decimal('42')

    def test_zero_or_missing_units_return_input(self, units, dozens):
        assert compute_price(0, units, dozens) == 0
        assert compute_price(Decimal('5'), None, dozens) == Decimal('5')
        assert compute_price(Decimal('5'), units, None) == Decimal('5')

    def test_same_unit(self, units):
        assert units.compute_price(Decimal('9.99'), units) == Decimal('9.99')


@pytest.mark.django_db
class TestUomIntegrity:
    def test_reference_unit_factor_is_one(self, unit_category):
        uom = Uom.objects.create(
            name='Pieces', category=unit_category, uom_type=Uom.TYPE_REFERENCE, factor=Decimal('5')
        )
        uom.refresh_from_db()
        assert uom.factor == Decimal('1')
        assert unit_category.reference_unit == uom

    def test_second_reference_unit_rejected(self, units, unit_category):
        with pytest.raises(ValidationError):
            Uom.objects.create(name='Pairs', category=unit_category, uom_type=Uom.TYPE_REFERENCE)

    def test_inactive_reference_does_not_conflict(self, units, unit_category):
        uom = Uom.objects.create(
            name='Old Units', category=unit_category, uom_type=Uom.TYPE_REFERENCE, is_active=False
        )
        assert uom.pk is not None

    def test_zero_factor_rejected(self, unit_category, units):
        with pytest.raises(ValidationError):
            Uom.objects.create(
                name='Broken', category=unit_category, uom_type=Uom.TYPE_SMALLER, factor=0
            )

    def test_non_positive_rounding_rejected(self, unit_category, units):
        with pytest.raises(ValidationError):
            Uom.objects.create(
                name='Broken', category=unit_category, uom_type=Uom.TYPE_SMALLER,
                factor=Decimal('10'), rounding=Decimal('0'),
            )

    def test_factor_inv(self, dozens):
        assert abs(dozens.factor_inv - Decimal('12')) < Decimal('1e-6')
