from decimal import Decimal

from django.db import models


class SupplierInfo(models.Model):
    """
    Vendor price list line of a template, optionally restricted to a variant.
    """
    partner = models.ForeignKey(
        'product.Partner',
        on_delete=models.CASCADE,
        related_name='supplied_products',
        verbose_name='Vendor'
    )
    product_name = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Vendor Product Name',
        help_text='Keep empty to use the internal one.'
    )
    product_code = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='Vendor Product Code',
        help_text='Keep empty to use the internal one.'
    )
    sequence = models.IntegerField(
        default=1,
        verbose_name='Sequence',
        help_text='Assigns the priority to the list of product vendor.'
    )
    min_qty = models.DecimalField(
        max_digits=12,
        decimal_places=4,
        default=Decimal('0'),
        verbose_name='Minimal Quantity',
        help_text='Expressed in the purchase unit of measure of the product.'
    )
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0'),
        verbose_name='Price'
    )
    company = models.ForeignKey(
        'product.Company',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='supplier_infos',
        verbose_name='Company'
    )
    currency = models.ForeignKey(
        'product.Currency',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='supplier_infos',
        verbose_name='Currency'
    )
    date_start = models.DateField(
        null=True,
        blank=True,
        verbose_name='Start Date'
    )
    date_end = models.DateField(
        null=True,
        blank=True,
        verbose_name='End Date'
    )
    template = models.ForeignKey(
        'product.ProductTemplate',
        on_delete=models.CASCADE,
        related_name='sellers',
        verbose_name='Product Template'
    )
    product = models.ForeignKey(
        'product.Product',
        on_delete=models.RESTRICT,
        null=True,
        blank=True,
        related_name='variant_sellers',
        verbose_name='Product Variant',
        help_text='When this field is filled in, the vendor data will only apply to the variant.'
    )
    delay = models.PositiveIntegerField(
        default=1,
        verbose_name='Delivery Lead Time',
        help_text='Lead time in days between the purchase order confirmation and the receipt.'
    )

    class Meta:
        ordering = ['sequence', '-min_qty', 'price', 'id']
        verbose_name = 'Vendor Pricelist'
        verbose_name_plural = 'Vendor Pricelists'

    def __str__(self):
        return f"{self.partner} - {self.template}"

    @property
    def product_uom(self):
        return self.template.uom_po or self.template.uom

    def save(self, *args, **kwargs):
        if self.product_id and not self.template_id:
            self.template_id = self.product.template_id
        if self.currency_id is None and self.company_id:
            self.currency_id = self.company.currency_id
        super().save(*args, **kwargs)


class ProductPackaging(models.Model):
    name = models.CharField(
        max_length=100,
        verbose_name='Packaging Type'
    )
    sequence = models.IntegerField(
        default=1,
        verbose_name='Sequence',
        help_text='The first in the sequence is the default one.'
    )
    template = models.ForeignKey(
        'product.ProductTemplate',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='packagings',
        verbose_name='Product Template'
    )
    qty = models.DecimalField(
        max_digits=12,
        decimal_places=4,
        default=Decimal('0'),
        verbose_name='Quantity per Package',
        help_text='The total number of products you can have per pallet or box.'
    )

    class Meta:
        ordering = ['sequence', 'id']
        verbose_name = 'Product Packaging'
        verbose_name_plural = 'Product Packagings'

    def __str__(self):
        return self.name
