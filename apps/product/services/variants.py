"""
Service keeping the variants of a template in line with its attribute lines.
"""

import itertools
import logging
from typing import Dict, FrozenSet, List

from django.db import transaction

from apps.product.models import Product, ProductTemplate
from .records import DeleteResult, unlink_or_deactivate

logger = logging.getLogger(__name__)


class VariantService:
    """
    Generates the variants of a template as the cartesian product of the
    values of its variant-creating attribute lines.
    """

    @staticmethod
    def get_variant_matrix(template: ProductTemplate) -> List[FrozenSet[int]]:
        """
        All value combinations the template should have a variant for.

        Lines without values are ignored. A template without variant-creating
        lines yields a single empty combination.

        Returns:
            List of frozensets of AttributeValue ids
        """
        value_sets = []
        lines = template.attribute_lines.filter(
            attribute__create_variant=True
        ).prefetch_related('values')
        for line in lines:
            value_ids = [v.pk for v in line.values.all()]
            if value_ids:
                value_sets.append(value_ids)
        return [frozenset(combo) for combo in itertools.product(*value_sets)]

    @staticmethod
    def get_variant_combination(product: Product) -> FrozenSet[int]:
        """Ids of the product values that belong to variant-creating attributes."""
        return frozenset(
            v.pk for v in product.attribute_values.all() if v.attribute.create_variant
        )

    @staticmethod
    def add_single_values(template: ProductTemplate) -> None:
        """
        Put the value of every single-valued variant-creating line on the
        variants that have no value for that attribute yet.
        """
        lines = template.attribute_lines.filter(
            attribute__create_variant=True
        ).prefetch_related('values')
        variants = list(template.variants.prefetch_related('attribute_values'))
        for line in lines:
            values = list(line.values.all())
            if len(values) != 1:
                continue
            value = values[0]
            for variant in variants:
                attribute_ids = {v.attribute_id for v in variant.attribute_values.all()}
                if value.attribute_id not in attribute_ids:
                    variant.attribute_values.add(value)
            # refresh the prefetched values for the next line
            variants = list(template.variants.prefetch_related('attribute_values'))

    @staticmethod
    def create_variants(template: ProductTemplate) -> Dict[str, List[int]]:
        """
        Reconcile the variants of a template with its attribute lines.

        Missing combinations are created, inactive variants whose combination
        is still valid are reactivated, and variants whose combination is no
        longer valid are deleted, or deactivated when something references them.

        Running it twice in a row changes nothing the second time.

        Args:
            template: The template to reconcile

        Returns:
            Dict with the ids of 'created', 'activated', 'unlinked' and
            'deactivated' variants
        """
        summary = {'created': [], 'activated': [], 'unlinked': [], 'deactivated': []}

        with transaction.atomic():
            VariantService.add_single_values(template)

            matrix = VariantService.get_variant_matrix(template)
            matrix_set = set(matrix)

            variants = list(
                template.variants.prefetch_related('attribute_values__attribute').order_by('id')
            )
            existing = {}
            to_activate = []
            to_unlink = []
            for variant in variants:
                combination = VariantService.get_variant_combination(variant)
                existing.setdefault(combination, variant)
                if combination in matrix_set:
                    if not variant.is_active:
                        to_activate.append(variant)
                else:
                    to_unlink.append(variant)

            if to_activate:
                Product.objects.filter(pk__in=[v.pk for v in to_activate]).update(is_active=True)
                summary['activated'] = [v.pk for v in to_activate]

            for combination in matrix:
                if combination in existing:
                    continue
                variant = Product.objects.create(template=template)
                if combination:
                    variant.attribute_values.set(combination)
                existing[combination] = variant
                summary['created'].append(variant.pk)

            for variant in to_unlink:
                pk, was_active = variant.pk, variant.is_active
                if unlink_or_deactivate(variant) is DeleteResult.OK:
                    summary['unlinked'].append(pk)
                elif was_active:
                    summary['deactivated'].append(pk)

        if any(summary.values()):
            logger.info(
                'Variants of template %s: %s created, %s activated, %s unlinked, %s deactivated',
                template.pk,
                len(summary['created']),
                len(summary['activated']),
                len(summary['unlinked']),
                len(summary['deactivated']),
            )
        return summary
