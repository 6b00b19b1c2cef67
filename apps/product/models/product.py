import logging
from decimal import Decimal

from django.db import models, transaction
from django.db.models import Q, Sum
from django.utils import timezone

from ..utils import to_decimal

logger = logging.getLogger(__name__)


class Product(models.Model):
    """
    Product variant.
    One sellable item of a template, identified by its combination of
    variant-creating attribute values. Example: "Shirt (Blue, M)".
    """
    template = models.ForeignKey(
        'product.ProductTemplate',
        on_delete=models.CASCADE,
        related_name='variants',
        verbose_name='Product Template'
    )
    default_code = models.CharField(
        max_length=100,
        blank=True,
        db_index=True,
        verbose_name='Internal Reference'
    )
    barcode = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='Barcode',
        help_text='International Article Number used for product identification.'
    )
    attribute_values = models.ManyToManyField(
        'product.AttributeValue',
        blank=True,
        related_name='products',
        verbose_name='Attributes'
    )
    standard_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0'),
        verbose_name='Cost',
        help_text='Cost used for stock valuation and as a base price on purchase orders. '
                  'Expressed in the default unit of measure of the product.'
    )
    volume = models.DecimalField(
        max_digits=12,
        decimal_places=4,
        default=Decimal('0'),
        verbose_name='Volume',
        help_text='The volume in m3.'
    )
    weight = models.DecimalField(
        max_digits=12,
        decimal_places=4,
        default=Decimal('0'),
        verbose_name='Weight',
        help_text='The weight of the contents in Kg, not including any packaging.'
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

    class Meta:
        ordering = ['default_code', 'id']
        verbose_name = 'Product'
        verbose_name_plural = 'Products'

    def __str__(self):
        return self.display_name

    # -------------------------------------------------------------------------
    # Delegated template fields
    # -------------------------------------------------------------------------

    @property
    def name(self):
        return self.template.name

    @property
    def list_price(self):
        return self.template.list_price

    @property
    def uom(self):
        return self.template.uom

    @property
    def uom_po(self):
        return self.template.uom_po

    @property
    def category(self):
        return self.template.category

    @property
    def company(self):
        return self.template.company

    @property
    def currency(self):
        return self.template.currency

    # -------------------------------------------------------------------------
    # Names
    # -------------------------------------------------------------------------

    @staticmethod
    def name_format(name, code):
        if not code:
            return name
        return f"[{code}] {name}"

    @property
    def variable_attributes(self):
        """Attributes that have more than one value on the template."""
        lines = self.template.attribute_lines.select_related('attribute').prefetch_related('values')
        return [line.attribute for line in lines if len(line.values.all()) > 1]

    @property
    def variant_label(self):
        from .attribute import variant_name

        values = self.attribute_values.select_related('attribute')
        return variant_name(values, self.variable_attributes)

    @property
    def display_name(self):
        return self.get_partner_ref()

    def _partner_sellers(self, partner):
        if partner is None:
            return []
        partner_ids = {partner.pk, partner.commercial_partner.pk}
        sellers = [s for s in self.template.sellers.all() if s.partner_id in partner_ids]
        own = [s for s in sellers if s.product_id == self.pk]
        return own or [s for s in sellers if s.product_id is None]

    def get_code(self, partner=None):
        """Vendor product code for partner, else the internal reference."""
        for seller in self._partner_sellers(partner):
            if seller.product_code:
                return seller.product_code
        return self.default_code

    def get_partner_ref(self, partner=None):
        """
        "[code] name (values)" using the vendor name and code of partner when
        the partner sells this product.
        """
        variant = self.variant_label
        name = self.name
        code = self.default_code
        for seller in self._partner_sellers(partner):
            if seller.product_name:
                name = seller.product_name
            if seller.product_code:
                code = seller.product_code
            break
        if variant:
            name = f"{name} ({variant})"
        return self.name_format(name, code)

    # -------------------------------------------------------------------------
    # Prices
    # -------------------------------------------------------------------------

    @property
    def price_extra(self):
        """Sum of the extra prices of this variant's values on its template."""
        from .attribute import AttributePrice

        total = AttributePrice.objects.filter(
            template_id=self.template_id,
            value__in=self.attribute_values.all(),
        ).aggregate(total=Sum('price_extra'))['total']
        return total or Decimal('0')

    def get_lst_price(self, uom=None):
        list_price = to_decimal(self.list_price)
        if uom is not None:
            list_price = self.uom.compute_price(list_price, uom)
        return list_price + self.price_extra

    def set_lst_price(self, price, uom=None):
        """Write the template list price so that this variant sells at price."""
        if uom is not None:
            price = uom.compute_price(price, self.uom)
        template = self.template
        template.list_price = price - self.price_extra
        template.save(update_fields=['list_price', 'updated_at'])

    lst_price = property(get_lst_price, set_lst_price)

    def get_price(self, pricelist, partner=None, quantity=1):
        from ..services.pricing import PricelistService

        if pricelist is None:
            return None
        return PricelistService.get_product_price(
            pricelist, self, quantity=quantity or 1, partner=partner
        )

    PRICE_ACCESSORS = {
        'list_price': lambda p: to_decimal(p.list_price) + p.price_extra,
        'standard_price': lambda p: to_decimal(p.standard_price),
    }

    def price_compute(self, price_type, uom=None, currency=None):
        """
        Return the price named by price_type for this variant.

        Args:
            price_type: 'list_price' (includes the variant price extra) or 'standard_price'
            uom: Unit the price should be expressed per
            currency: Currency to convert into, rounded

        Returns:
            Decimal price
        """
        try:
            accessor = self.PRICE_ACCESSORS[price_type]
        except KeyError:
            raise ValueError('Unknown price type: %s' % price_type)
        price = accessor(self)
        if uom is not None:
            price = self.uom.compute_price(price, uom)
        if currency is not None and self.currency is not None:
            price = self.currency.compute(price, currency, round=True)
        return price

    @property
    def pricelist_items(self):
        from .pricelist import PricelistItem

        return PricelistItem.objects.filter(Q(product=self) | Q(template_id=self.template_id))

    # -------------------------------------------------------------------------
    # Vendors
    # -------------------------------------------------------------------------

    def select_seller(self, partner=None, quantity=0, date=None, uom=None):
        """
        First vendor line of the template matching partner, quantity and date.

        Returns:
            SupplierInfo or None
        """
        date = date or timezone.localdate()
        for seller in self.template.sellers.select_related('partner'):
            quantity_uom_seller = quantity
            seller_uom = seller.product_uom
            if quantity_uom_seller and uom is not None and seller_uom is not None and uom.pk != seller_uom.pk:
                quantity_uom_seller = uom.compute_quantity(quantity_uom_seller, seller_uom)
            if seller.date_start and seller.date_start > date:
                continue
            if seller.date_end and seller.date_end < date:
                continue
            if partner is not None and seller.partner_id not in {partner.pk, partner.parent_id}:
                continue
            if quantity_uom_seller < seller.min_qty:
                continue
            if seller.product_id and seller.product_id != self.pk:
                continue
            return seller
        return None

    # -------------------------------------------------------------------------
    # Cost history
    # -------------------------------------------------------------------------

    def define_standard_price(self, value, company=None):
        """Store a cost change to be able to retrieve the cost at a given date."""
        from .partner import Company
        from .price_history import ProductPriceHistory

        company = company or self.company or Company.get_main()
        return ProductPriceHistory.objects.create(
            product=self,
            company=company,
            cost=value,
        )

    def get_history_price(self, company=None, date=None):
        """Cost of this product for company at date (now by default)."""
        date = date or timezone.now()
        history = self.price_history.filter(datetime__lte=date)
        if company is not None:
            history = history.filter(company=company)
        entry = history.order_by('-datetime', '-id').first()
        return entry.cost if entry else Decimal('0')

    # -------------------------------------------------------------------------
    # Deletion
    # -------------------------------------------------------------------------

    def delete(self, *args, **kwargs):
        """Delete the variant, and its template when it is the last variant."""
        template = self.template
        is_last = not Product.objects.filter(template_id=self.template_id).exclude(pk=self.pk).exists()
        with transaction.atomic():
            result = super().delete(*args, **kwargs)
            if is_last:
                logger.info('Deleting template %s with its last variant', template.pk)
                template.delete()
        return result
