"""
Tests: variant generation from attribute lines.

Run with:
    pytest tests/test_variants.py -v
"""

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import ProtectedError

from apps.product.models import (
    AttributeLine,
    Partner,
    Product,
    ProductTemplate,
    SupplierInfo,
)
from apps.product.services import VariantService

pytestmark = pytest.mark.django_db


def combinations(template, active=True):
    variants = template.variants.filter(is_active=active).prefetch_related('attribute_values')
    return {frozenset(v.name for v in variant.attribute_values.all()) for variant in variants}


@pytest.fixture
def chair(template, color, color_values, size, size_values):
    color_line = AttributeLine.objects.create(template=template, attribute=color)
    color_line.values.set(color_values)
    size_line = AttributeLine.objects.create(template=template, attribute=size)
    size_line.values.set(size_values)
    return template


class TestCreateVariants:
    def test_new_template_has_one_variant(self, template):
        assert template.variants.count() == 1
        assert template.product_variant.attribute_values.count() == 0

    def test_two_by_three_gives_six_variants(self, chair):
        assert chair.variants.filter(is_active=True).count() == 6
        assert combinations(chair) == {
            frozenset({color, size})
            for color in ('Red', 'Blue')
            for size in ('S', 'M', 'L')
        }

    def test_second_run_changes_nothing(self, chair):
        before = set(chair.variants.values_list('id', flat=True))
        summary = VariantService.create_variants(chair)
        assert summary == {'created': [], 'activated': [], 'unlinked': [], 'deactivated': []}
        assert set(chair.variants.values_list('id', flat=True)) == before

    def test_variant_matrix(self, chair, color_values, size_values):
        matrix = VariantService.get_variant_matrix(chair)
        assert len(matrix) == 6
        assert frozenset({color_values[0].pk, size_values[2].pk}) in matrix

    def test_attribute_without_variants_is_not_multiplied(self, template):
        from apps.product.models import Attribute, AttributeValue

        material = Attribute.objects.create(name='Material', create_variant=False)
        wood = AttributeValue.objects.create(attribute=material, name='Wood')
        steel = AttributeValue.objects.create(attribute=material, name='Steel')
        line = AttributeLine.objects.create(template=template, attribute=material)
        line.values.set([wood, steel])
        assert template.variants.count() == 1

    def test_single_value_line_added_to_existing_variants(self, template, color, color_values):
        variant = template.product_variant
        line = AttributeLine.objects.create(template=template, attribute=color)
        line.values.set([color_values[0]])

        assert template.variants.count() == 1
        assert list(variant.attribute_values.all()) == [color_values[0]]

    def test_empty_line_is_ignored(self, template, color):
        variant = template.product_variant
        AttributeLine.objects.create(template=template, attribute=color)
        assert list(template.variants.all()) == [variant]


class TestRemoveValues:
    def test_removed_value_deletes_its_variants(self, chair, size, size_values):
        large = size_values[2]
        line = chair.attribute_lines.get(attribute=size)
        line.values.remove(large)

        assert chair.variants.count() == 4
        assert not Product.objects.filter(template=chair, attribute_values=large).exists()
        assert combinations(chair) == {
            frozenset({color, size})
            for color in ('Red', 'Blue')
            for size in ('S', 'M')
        }

    def test_referenced_variant_is_deactivated(self, chair, size, size_values, color_values):
        red, _blue = color_values
        large = size_values[2]
        red_large = Product.objects.filter(attribute_values=red).get(attribute_values=large)
        vendor = Partner.objects.create(name='Wood Corner', is_supplier=True)
        SupplierInfo.objects.create(partner=vendor, template=chair, product=red_large, price=Decimal('40'))

        line = chair.attribute_lines.get(attribute=size)
        line.values.remove(large)

        red_large.refresh_from_db()
        assert red_large.is_active is False
        assert chair.variants.filter(is_active=True).count() == 4
        assert chair.variants.count() == 5

    def test_value_back_reactivates_variant(self, chair, size, size_values, color_values):
        red = color_values[0]
        large = size_values[2]
        red_large = Product.objects.filter(attribute_values=red).get(attribute_values=large)
        vendor = Partner.objects.create(name='Wood Corner', is_supplier=True)
        SupplierInfo.objects.create(partner=vendor, template=chair, product=red_large)
        line = chair.attribute_lines.get(attribute=size)
        line.values.remove(large)

        line.values.add(large)

        red_large.refresh_from_db()
        assert red_large.is_active is True
        assert chair.variants.filter(is_active=True).count() == 6

    def test_deleting_line_reconciles(self, chair, color):
        chair.attribute_lines.get(attribute=color).delete()
        assert chair.variants.count() == 3


class TestTemplateLifecycle:
    def test_archiving_template_archives_variants(self, chair):
        chair.is_active = False
        chair.save()
        assert chair.variants.filter(is_active=True).count() == 0

        chair.is_active = True
        chair.save()
        assert chair.variants.filter(is_active=True).count() == 6

    def test_deleting_last_variant_deletes_template(self, template):
        pk = template.pk
        template.product_variant.delete()
        assert not ProductTemplate.objects.filter(pk=pk).exists()

    def test_deleting_template_deletes_variants(self, chair):
        pk = chair.pk
        chair.delete()
        assert not Product.objects.filter(template_id=pk).exists()

    def test_copy_keeps_attribute_lines(self, chair):
        new = chair.copy()
        assert new.name == 'Office Chair (Copy)'
        assert new.attribute_lines.count() == 2
        assert new.variants.filter(is_active=True).count() == 6

    def test_purchase_unit_defaults_to_sale_unit(self, template, units):
        assert template.uom_po == units

    def test_purchase_unit_in_other_category_rejected(self, units, kg, company):
        with pytest.raises(ValidationError):
            ProductTemplate.objects.create(name='Sand', uom=units, uom_po=kg)


class TestAttributeIntegrity:
    def test_line_value_of_other_attribute_rejected(self, template, color, size_values):
        line = AttributeLine.objects.create(template=template, attribute=color)
        with pytest.raises(ValidationError):
            with transaction.atomic():
                line.values.add(size_values[0])

    def test_two_values_of_same_attribute_on_variant_rejected(self, product, color_values):
        with pytest.raises(ValidationError):
            with transaction.atomic():
                product.attribute_values.add(*color_values)

    def test_used_value_cannot_be_deleted(self, chair, color_values):
        with pytest.raises(ProtectedError):
            with transaction.atomic():
                color_values[0].delete()

    def test_unused_value_can_be_deleted(self, color_values):
        color_values[0].delete()
        assert color_values[0].pk is None


class TestNames:
    def test_display_name_with_values(self, chair, color_values, size_values):
        variant = Product.objects.filter(attribute_values=color_values[1]).get(
            attribute_values=size_values[1]
        )
        variant.default_code = 'CH-BM'
        variant.save()
        assert variant.display_name == '[CH-BM] Office Chair (Blue, M)'

    def test_single_value_attribute_not_in_name(self, template, color, color_values, size, size_values):
        color_line = AttributeLine.objects.create(template=template, attribute=color)
        color_line.values.set([color_values[0]])
        size_line = AttributeLine.objects.create(template=template, attribute=size)
        size_line.values.set(size_values[:2])

        variant = template.variants.get(attribute_values=size_values[0])
        assert variant.display_name == 'Office Chair (S)'

    def test_vendor_name_and_code(self, product):
        vendor = Partner.objects.create(name='Wood Corner', is_supplier=True)
        SupplierInfo.objects.create(
            partner=vendor,
            template=product.template,
            product_name='Chair Model 7',
            product_code='WC-7',
        )
        assert product.get_partner_ref(vendor) == '[WC-7] Chair Model 7'
        assert product.get_code(vendor) == 'WC-7'
        assert product.get_code() == ''
