"""
Initialize Product Data Command.

Creates the default units of measure, the root product category and the
public pricelist.
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction


UOM_CATEGORIES = [
    {
        'name': 'Unit',
        'units': [
            ('Units', 'reference', '1', '0.01'),
            ('Dozens', 'bigger', '12', '0.01'),
        ]
    },
    {
        'name': 'Weight',
        'units': [
            ('kg', 'reference', '1', '0.01'),
            ('g', 'smaller', '1000', '0.01'),
            ('t', 'bigger', '1000', '0.01'),
            ('lb', 'smaller', '2.20462', '0.01'),
            ('oz', 'smaller', '35.274', '0.01'),
        ]
    },
    {
        'name': 'Working Time',
        'units': [
            ('Days', 'reference', '1', '0.01'),
            ('Hours', 'smaller', '8', '0.01'),
        ]
    },
    {
        'name': 'Length',
        'units': [
            ('m', 'reference', '1', '0.01'),
            ('cm', 'smaller', '100', '0.01'),
            ('km', 'bigger', '1000', '0.01'),
        ]
    },
    {
        'name': 'Volume',
        'units': [
            ('Liters', 'reference', '1', '0.01'),
            ('gal (US)', 'bigger', '3.78541', '0.01'),
        ]
    },
]


class Command(BaseCommand):
    help = 'Initialize default units of measure, the root category and the public pricelist'

    def add_arguments(self, parser):
        parser.add_argument(
            '--currency',
            type=str,
            default='EUR',
            help='Currency code of the public pricelist'
        )
        parser.add_argument(
            '--skip-uoms',
            action='store_true',
            help='Skip creating default units of measure'
        )

    def handle(self, *args, **options):
        with transaction.atomic():
            if not options['skip_uoms']:
                self._create_default_uoms()

            self._create_root_category()
            self._create_public_pricelist(options['currency'].upper())

        self.stdout.write(
            self.style.SUCCESS('Product data initialization completed!')
        )

    def _create_default_uoms(self):
        """Create unit categories with their reference and common units."""
        from apps.product.models import UomCategory, Uom

        for category_config in UOM_CATEGORIES:
            category, created = UomCategory.objects.get_or_create(name=category_config['name'])
            if created:
                self.stdout.write(f'  Created unit category: {category.name}')

            for name, uom_type, ratio, rounding in category_config['units']:
                ratio = Decimal(ratio)
                # bigger units are configured by how many reference units they hold
                factor = 1 / ratio if uom_type == Uom.TYPE_BIGGER else ratio
                uom, created = Uom.objects.get_or_create(
                    name=name,
                    category=category,
                    defaults={
                        'uom_type': uom_type,
                        'factor': factor,
                        'rounding': Decimal(rounding),
                    }
                )
                if created:
                    self.stdout.write(f'    Created unit: {uom.name}')

    def _create_root_category(self):
        from apps.product.models import ProductCategory

        category = ProductCategory.objects.filter(name='All', parent__isnull=True).first()
        if category is None:
            ProductCategory.objects.create(name='All', category_type=ProductCategory.TYPE_VIEW)
            self.stdout.write('  Created product category: All')

    def _create_public_pricelist(self, currency_code):
        """Create the public pricelist in the given currency."""
        from apps.product.models import Currency, Pricelist

        currency, created = Currency.objects.get_or_create(name=currency_code)
        if created:
            self.stdout.write(f'  Created currency: {currency.name}')

        pricelist, created = Pricelist.objects.get_or_create(
            name='Public Pricelist',
            defaults={'currency': currency}
        )
        if created:
            self.stdout.write(f'  Created pricelist: {pricelist}')
