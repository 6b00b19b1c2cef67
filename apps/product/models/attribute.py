from decimal import Decimal

from django.db import models


class Attribute(models.Model):
    """
    Product attribute (Color, Size, Material).

    Only attributes flagged create_variant multiply the variants of a template.
    """
    name = models.CharField(
        max_length=100,
        verbose_name='Name'
    )
    sequence = models.PositiveIntegerField(
        default=0,
        verbose_name='Sequence',
        help_text='Determine the display order'
    )
    create_variant = models.BooleanField(
        default=True,
        verbose_name='Create Variants',
        help_text='Check this if you want to create multiple variants for this attribute.'
    )

    class Meta:
        ordering = ['sequence', 'name']
        verbose_name = 'Product Attribute'
        verbose_name_plural = 'Product Attributes'

    def __str__(self):
        return self.name


class AttributeValue(models.Model):
    """
    A value of an attribute (Color: Red).
    """
    name = models.CharField(
        max_length=100,
        verbose_name='Value'
    )
    sequence = models.PositiveIntegerField(
        default=0,
        verbose_name='Sequence',
        help_text='Determine the display order'
    )
    attribute = models.ForeignKey(
        Attribute,
        on_delete=models.CASCADE,
        related_name='values',
        verbose_name='Attribute'
    )

    class Meta:
        ordering = ['sequence', 'id']
        verbose_name = 'Attribute Value'
        verbose_name_plural = 'Attribute Values'

    def __str__(self):
        return f"{self.attribute.name}: {self.name}"

    def price_extra_for(self, template):
        """Extra price of this value on the given template, 0 if none is set."""
        price = self.prices.filter(template=template).first()
        return price.price_extra if price else Decimal('0')

    def set_price_extra(self, template, value):
        AttributePrice.objects.update_or_create(
            template=template,
            value=self,
            defaults={'price_extra': value},
        )


class AttributePrice(models.Model):
    """
    Extra sale price of an attribute value for one template.
    """
    template = models.ForeignKey(
        'product.ProductTemplate',
        on_delete=models.CASCADE,
        related_name='attribute_prices',
        verbose_name='Product Template'
    )
    value = models.ForeignKey(
        AttributeValue,
        on_delete=models.CASCADE,
        related_name='prices',
        verbose_name='Attribute Value'
    )
    price_extra = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0'),
        verbose_name='Price Extra'
    )

    class Meta:
        unique_together = ['template', 'value']
        verbose_name = 'Attribute Price'
        verbose_name_plural = 'Attribute Prices'

    def __str__(self):
        return f"{self.template} - {self.value}: {self.price_extra}"


class AttributeLine(models.Model):
    """
    Attribute and the subset of its values used by a template.
    """
    template = models.ForeignKey(
        'product.ProductTemplate',
        on_delete=models.CASCADE,
        related_name='attribute_lines',
        verbose_name='Product Template'
    )
    attribute = models.ForeignKey(
        Attribute,
        on_delete=models.RESTRICT,
        related_name='lines',
        verbose_name='Attribute'
    )
    values = models.ManyToManyField(
        AttributeValue,
        blank=True,
        related_name='lines',
        verbose_name='Attribute Values'
    )

    class Meta:
        ordering = ['attribute__sequence', 'id']
        unique_together = ['template', 'attribute']
        verbose_name = 'Attribute Line'
        verbose_name_plural = 'Attribute Lines'

    def __str__(self):
        return self.attribute.name

    @property
    def name(self):
        values = ', '.join(v.name for v in self.values.all())
        return f"{self.attribute.name}: {values}"


def variant_name(values, variable_attributes):
    """
    Comma separated value names, sorted by attribute name, keeping only
    values whose attribute is in variable_attributes.
    """
    attribute_ids = {a.pk for a in variable_attributes}
    ordered = sorted(values, key=lambda v: v.attribute.name)
    return ', '.join(v.name for v in ordered if v.attribute_id in attribute_ids)
