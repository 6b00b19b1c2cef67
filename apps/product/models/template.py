import logging
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models, transaction
from simple_history.models import HistoricalRecords

logger = logging.getLogger(__name__)


class ProductTemplate(models.Model):
    """
    Product template.
    Holds what all variants share: name, sale price, units, category
    and the attribute lines the variants are generated from.
    """
    TYPE_CONSUMABLE = 'consu'
    TYPE_SERVICE = 'service'
    PRODUCT_TYPE_CHOICES = [
        (TYPE_CONSUMABLE, 'Consumable'),
        (TYPE_SERVICE, 'Service'),
    ]

    name = models.CharField(
        max_length=255,
        db_index=True,
        verbose_name='Name'
    )
    sequence = models.IntegerField(
        default=1,
        verbose_name='Sequence',
        help_text='Gives the sequence order when displaying a product list'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Description'
    )
    description_sale = models.TextField(
        blank=True,
        verbose_name='Sale Description',
        help_text='Copied on sales orders and invoices'
    )
    description_purchase = models.TextField(
        blank=True,
        verbose_name='Purchase Description',
        help_text='Copied on purchase orders and vendor bills'
    )
    product_type = models.CharField(
        max_length=10,
        choices=PRODUCT_TYPE_CHOICES,
        default=TYPE_CONSUMABLE,
        verbose_name='Product Type'
    )
    rental = models.BooleanField(
        default=False,
        verbose_name='Can be Rent'
    )
    category = models.ForeignKey(
        'product.ProductCategory',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='templates',
        verbose_name='Internal Category'
    )
    list_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('1'),
        verbose_name='Sale Price',
        help_text='Base price to compute the customer price'
    )
    uom = models.ForeignKey(
        'product.Uom',
        on_delete=models.PROTECT,
        related_name='templates',
        verbose_name='Unit of Measure',
        help_text='Default unit of measure used for all stock operations'
    )
    uom_po = models.ForeignKey(
        'product.Uom',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='purchase_templates',
        verbose_name='Purchase Unit of Measure',
        help_text='Default unit of measure used for purchase orders. '
                  'It must be in the same category as the default unit of measure.'
    )
    company = models.ForeignKey(
        'product.Company',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='templates',
        verbose_name='Company'
    )
    sale_ok = models.BooleanField(
        default=True,
        verbose_name='Can be Sold'
    )
    purchase_ok = models.BooleanField(
        default=True,
        verbose_name='Can be Purchased'
    )
    color = models.PositiveIntegerField(
        default=0,
        verbose_name='Color Index'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='Active',
        help_text='If unchecked, it will allow you to hide the product without removing it.'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated at'
    )

    history = HistoricalRecords()

    class Meta:
        ordering = ['name']
        verbose_name = 'Product Template'
        verbose_name_plural = 'Product Templates'

    def __str__(self):
        return self.name

    # -------------------------------------------------------------------------
    # Variants
    # -------------------------------------------------------------------------

    @property
    def product_variant(self):
        return self.variants.filter(is_active=True).order_by('id').first()

    @property
    def product_variant_count(self):
        return self.variants.filter(is_active=True).count()

    def _single_variant(self):
        variants = list(self.variants.filter(is_active=True)[:2])
        return variants[0] if len(variants) == 1 else None

    def _get_variant_field(self, field, default):
        variant = self._single_variant()
        return getattr(variant, field) if variant else default

    def _set_variant_field(self, field, value):
        variant = self._single_variant()
        if variant:
            setattr(variant, field, value)
            variant.save(update_fields=[field])

    @property
    def standard_price(self):
        return self._get_variant_field('standard_price', Decimal('0'))

    @standard_price.setter
    def standard_price(self, value):
        self._set_variant_field('standard_price', value)

    @property
    def volume(self):
        return self._get_variant_field('volume', Decimal('0'))

    @volume.setter
    def volume(self, value):
        self._set_variant_field('volume', value)

    @property
    def weight(self):
        return self._get_variant_field('weight', Decimal('0'))

    @weight.setter
    def weight(self, value):
        self._set_variant_field('weight', value)

    @property
    def default_code(self):
        return self._get_variant_field('default_code', '')

    @default_code.setter
    def default_code(self, value):
        self._set_variant_field('default_code', value)

    @property
    def display_name(self):
        from .product import Product
        return Product.name_format(self.name, self.default_code)

    # -------------------------------------------------------------------------
    # Prices
    # -------------------------------------------------------------------------

    @property
    def currency(self):
        """Company currency, falling back to the main company currency."""
        from .partner import Company

        if self.company_id and self.company.currency_id:
            return self.company.currency
        main_company = Company.get_main()
        return main_company.currency if main_company else None

    def get_price(self, pricelist, partner=None, quantity=1):
        """Price of the first variant of this template in the given pricelist."""
        from ..services.pricing import PricelistService

        if pricelist is None:
            return None
        return PricelistService.get_product_price(
            pricelist, self.product_variant, quantity=quantity or 1, partner=partner
        )

    def set_price(self, price, uom=None):
        """Write list_price from a price expressed per uom."""
        if uom is not None:
            price = uom.compute_price(price, self.uom)
        self.list_price = price
        self.save(update_fields=['list_price', 'updated_at'])

    def price_compute(self, price_type, uom=None, currency=None):
        """
        Return the price field named by price_type in the given uom and currency.

        Args:
            price_type: 'list_price' or 'standard_price'
            uom: Unit the price is expressed per, defaults to the template unit
            currency: Currency to convert into, defaults to the template currency

        Returns:
            Decimal price
        """
        accessors = {
            'list_price': lambda t: t.list_price,
            'standard_price': lambda t: t.standard_price,
        }
        if price_type not in accessors:
            raise ValueError('Unknown price type: %s' % price_type)
        price = accessors[price_type](self)
        if uom is not None:
            price = self.uom.compute_price(price, uom)
        if currency is not None and self.currency is not None:
            price = self.currency.compute(price, currency, round=True)
        return price

    # -------------------------------------------------------------------------
    # Validation and lifecycle
    # -------------------------------------------------------------------------

    def clean(self):
        if self.uom_id and self.uom_po_id and self.uom.category_id != self.uom_po.category_id:
            raise ValidationError({
                'uom_po': 'Error: The default Unit of Measure and the purchase Unit of Measure '
                          'must be in the same category.'
            })

    def save(self, *args, **kwargs):
        from ..services.variants import VariantService

        if self.uom_id and not self.uom_po_id:
            self.uom_po_id = self.uom_id
        self.clean()

        creating = self.pk is None
        was_active = None
        if not creating:
            was_active = (
                ProductTemplate.objects.filter(pk=self.pk).values_list('is_active', flat=True).first()
            )

        with transaction.atomic():
            super().save(*args, **kwargs)
            if creating or (self.is_active and was_active is False):
                VariantService.create_variants(self)
            elif not self.is_active and was_active:
                count = self.variants.filter(is_active=True).update(is_active=False)
                logger.info('Deactivated %s variant(s) of template %s', count, self.pk)

    def copy(self, **overrides):
        """Duplicate this template with its attribute lines."""
        from .attribute import AttributeLine

        lines = list(self.attribute_lines.prefetch_related('values'))
        new = ProductTemplate.objects.get(pk=self.pk)
        new.pk = None
        new._state.adding = True
        new.name = overrides.pop('name', f"{self.name} (Copy)")
        for field, value in overrides.items():
            setattr(new, field, value)
        with transaction.atomic():
            new.save()
            for line in lines:
                new_line = AttributeLine.objects.create(template=new, attribute=line.attribute)
                new_line.values.set(line.values.all())
        return new
