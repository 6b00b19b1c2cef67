from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models
from simple_history.models import HistoricalRecords

from .. import conf


def _default_sequence():
    return conf.default_pricelist_sequence()


def _default_min_quantity():
    return conf.default_min_quantity()


class Pricelist(models.Model):
    """
    Named set of pricing rules in one currency.
    """
    name = models.CharField(
        max_length=200,
        verbose_name='Pricelist Name'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='Active',
        help_text='If unchecked, it will allow you to hide the pricelist without removing it.'
    )
    currency = models.ForeignKey(
        'product.Currency',
        on_delete=models.PROTECT,
        related_name='pricelists',
        verbose_name='Currency'
    )
    company = models.ForeignKey(
        'product.Company',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='pricelists',
        verbose_name='Company'
    )
    sequence = models.PositiveIntegerField(
        default=_default_sequence,
        verbose_name='Sequence'
    )
    country_groups = models.ManyToManyField(
        'product.CountryGroup',
        blank=True,
        related_name='pricelists',
        verbose_name='Country Groups'
    )

    class Meta:
        ordering = ['sequence', '-id']
        verbose_name = 'Pricelist'
        verbose_name_plural = 'Pricelists'

    def __str__(self):
        return f"{self.name} ({self.currency.name})"

    def compute_price_rule(self, product, quantity=1, partner=None, date=None, uom=None):
        from ..services.pricing import PricelistService
        return PricelistService.compute_price_rule(self, product, quantity, partner, date, uom)

    def get_product_price(self, product, quantity=1, partner=None, date=None, uom=None):
        from ..services.pricing import PricelistService
        return PricelistService.get_product_price(self, product, quantity, partner, date, uom)

    def get_product_price_rule(self, product, quantity=1, partner=None, date=None, uom=None):
        from ..services.pricing import PricelistService
        return PricelistService.get_product_price_rule(self, product, quantity, partner, date, uom)

    @classmethod
    def get_partner_pricelist(cls, partner, company=None):
        from ..services.pricing import PricelistService
        return PricelistService.get_partner_pricelist(partner, company)


class PricelistItem(models.Model):
    """
    One pricing rule of a pricelist.

    applied_on codes sort so that the narrowest scope comes first.
    """
    APPLIED_ON_VARIANT = '0_product_variant'
    APPLIED_ON_TEMPLATE = '1_product'
    APPLIED_ON_CATEGORY = '2_product_category'
    APPLIED_ON_GLOBAL = '3_global'
    APPLIED_ON_CHOICES = [
        (APPLIED_ON_GLOBAL, 'Global'),
        (APPLIED_ON_CATEGORY, 'Product Category'),
        (APPLIED_ON_TEMPLATE, 'Product'),
        (APPLIED_ON_VARIANT, 'Product Variant'),
    ]

    BASE_LIST_PRICE = 'list_price'
    BASE_STANDARD_PRICE = 'standard_price'
    BASE_PRICELIST = 'pricelist'
    BASE_CHOICES = [
        (BASE_LIST_PRICE, 'Public Price'),
        (BASE_STANDARD_PRICE, 'Cost'),
        (BASE_PRICELIST, 'Other Pricelist'),
    ]

    COMPUTE_FIXED = 'fixed'
    COMPUTE_PERCENTAGE = 'percentage'
    COMPUTE_FORMULA = 'formula'
    COMPUTE_PRICE_CHOICES = [
        (COMPUTE_FIXED, 'Fix Price'),
        (COMPUTE_PERCENTAGE, 'Percentage (discount)'),
        (COMPUTE_FORMULA, 'Formula'),
    ]

    pricelist = models.ForeignKey(
        Pricelist,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name='Pricelist'
    )
    template = models.ForeignKey(
        'product.ProductTemplate',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='pricelist_items',
        verbose_name='Product Template',
        help_text='Specify a template if this rule only applies to one product template.'
    )
    product = models.ForeignKey(
        'product.Product',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='variant_pricelist_items',
        verbose_name='Product',
        help_text='Specify a product if this rule only applies to one product.'
    )
    category = models.ForeignKey(
        'product.ProductCategory',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='pricelist_items',
        verbose_name='Product Category',
        help_text='Specify a category if this rule only applies to products of this category '
                  'or its children categories.'
    )
    min_quantity = models.DecimalField(
        max_digits=12,
        decimal_places=4,
        default=_default_min_quantity,
        verbose_name='Min. Quantity',
        help_text='For the rule to apply, bought quantity must be greater than or equal to '
                  'this minimum quantity, expressed in the default unit of the product.'
    )
    applied_on = models.CharField(
        max_length=20,
        choices=APPLIED_ON_CHOICES,
        default=APPLIED_ON_GLOBAL,
        verbose_name='Apply On'
    )
    sequence = models.IntegerField(
        default=5,
        verbose_name='Sequence'
    )
    base = models.CharField(
        max_length=20,
        choices=BASE_CHOICES,
        default=BASE_LIST_PRICE,
        verbose_name='Based on',
        help_text='Base price for computation.'
    )
    base_pricelist = models.ForeignKey(
        Pricelist,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='dependent_items',
        verbose_name='Other Pricelist'
    )
    price_surcharge = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0'),
        verbose_name='Price Surcharge',
        help_text='Amount added to the price after the discount and the rounding.'
    )
    price_discount = models.DecimalField(
        max_digits=7,
        decimal_places=2,
        default=Decimal('0'),
        verbose_name='Price Discount'
    )
    price_round = models.DecimalField(
        max_digits=12,
        decimal_places=4,
        default=Decimal('0'),
        verbose_name='Price Rounding',
        help_text='Price is rounded to this multiple. Rounding is applied after the discount '
                  'and before the surcharge. To have prices ending in 9.99, set rounding 10, surcharge -0.01'
    )
    price_min_margin = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name='Min. Price Margin',
        help_text='Minimal amount over the base price. Empty means no minimum.'
    )
    price_max_margin = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name='Max. Price Margin',
        help_text='Maximal amount over the base price. Empty means no maximum.'
    )
    date_start = models.DateField(
        null=True,
        blank=True,
        verbose_name='Start Date',
        help_text='Starting date for the pricelist item validation'
    )
    date_end = models.DateField(
        null=True,
        blank=True,
        verbose_name='End Date',
        help_text='Ending valid for the pricelist item validation'
    )
    compute_price = models.CharField(
        max_length=20,
        choices=COMPUTE_PRICE_CHOICES,
        default=COMPUTE_FIXED,
        verbose_name='Compute Price'
    )
    fixed_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0'),
        verbose_name='Fixed Price'
    )
    percent_price = models.DecimalField(
        max_digits=7,
        decimal_places=2,
        default=Decimal('0'),
        verbose_name='Percentage Price'
    )

    history = HistoricalRecords()

    class Meta:
        ordering = ['applied_on', '-min_quantity', 'category__name', 'id']
        verbose_name = 'Pricelist Item'
        verbose_name_plural = 'Pricelist Items'

    def __str__(self):
        return f"{self.name}: {self.price}"

    @property
    def company(self):
        return self.pricelist.company

    @property
    def currency(self):
        return self.pricelist.currency

    @property
    def name(self):
        if self.category_id:
            return f"Category: {self.category.name}"
        if self.template_id:
            return self.template.name
        if self.product_id:
            return self.product.get_partner_ref().replace(f"[{self.product.default_code}]", '', 1).strip()
        return 'All Products'

    @property
    def price(self):
        if self.compute_price == self.COMPUTE_FIXED:
            return f"{self.fixed_price} {self.pricelist.currency.name}"
        if self.compute_price == self.COMPUTE_PERCENTAGE:
            return f"{self.percent_price} % discount"
        return f"{abs(self.price_discount)} % discount and {self.price_surcharge} surcharge"

    def clean(self):
        if (
            self.base == self.BASE_PRICELIST
            and self.pricelist_id
            and self.pricelist_id == self.base_pricelist_id
        ):
            raise ValidationError({
                'base_pricelist': 'Error! You cannot assign the Main Pricelist as Other Pricelist '
                                  'in PriceList Item!'
            })
        if self.base == self.BASE_PRICELIST and self._reaches_own_pricelist():
            raise ValidationError({
                'base_pricelist': 'Error! You cannot create recursive pricelist references.'
            })
        if (
            self.price_min_margin is not None
            and self.price_max_margin is not None
            and self.price_min_margin > self.price_max_margin
        ):
            raise ValidationError({
                'price_max_margin': 'Error! The minimum margin should be lower than the maximum margin.'
            })

    def _reaches_own_pricelist(self):
        """True when following base pricelists from this rule leads back to its pricelist."""
        seen = set()
        pending = [self.base_pricelist_id] if self.base_pricelist_id else []
        while pending:
            current = pending.pop()
            if current == self.pricelist_id:
                return True
            if current in seen:
                continue
            seen.add(current)
            pending.extend(
                PricelistItem.objects.filter(
                    pricelist_id=current,
                    base=self.BASE_PRICELIST,
                    base_pricelist__isnull=False,
                ).exclude(pk=self.pk).values_list('base_pricelist_id', flat=True)
            )
        return False

    def clear_unused_fields(self):
        """Drop the scope and price parameters that do not apply to this rule."""
        if self.applied_on != self.APPLIED_ON_VARIANT:
            self.product = None
        if self.applied_on != self.APPLIED_ON_TEMPLATE:
            self.template = None
        if self.applied_on != self.APPLIED_ON_CATEGORY:
            self.category = None

        if self.compute_price != self.COMPUTE_FIXED:
            self.fixed_price = Decimal('0')
        if self.compute_price != self.COMPUTE_PERCENTAGE:
            self.percent_price = Decimal('0')
        if self.compute_price != self.COMPUTE_FORMULA:
            self.price_discount = Decimal('0')
            self.price_surcharge = Decimal('0')
            self.price_round = Decimal('0')
            self.price_min_margin = None
            self.price_max_margin = None

    def save(self, *args, **kwargs):
        self.clean()
        self.clear_unused_fields()
        super().save(*args, **kwargs)
