from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from ..utils import to_decimal


class UomCategory(models.Model):
    """
    Group of units that can be converted into one another (Unit, Weight, ...).
    """
    name = models.CharField(
        max_length=100,
        unique=True,
        verbose_name='Name'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Unit of Measure Category'
        verbose_name_plural = 'Unit of Measure Categories'

    def __str__(self):
        return self.name

    @property
    def reference_unit(self):
        return self.uoms.filter(uom_type=Uom.TYPE_REFERENCE, is_active=True).first()


class Uom(models.Model):
    """
    Unit of measure.

    factor is the ratio to the category reference unit:
    1 reference unit = factor x this unit. A dozen has factor 1/12,
    a gram (reference kg) has factor 1000.
    """
    TYPE_BIGGER = 'bigger'
    TYPE_REFERENCE = 'reference'
    TYPE_SMALLER = 'smaller'
    UOM_TYPE_CHOICES = [
        (TYPE_BIGGER, 'Bigger than the reference unit'),
        (TYPE_REFERENCE, 'Reference unit for this category'),
        (TYPE_SMALLER, 'Smaller than the reference unit'),
    ]

    name = models.CharField(
        max_length=100,
        verbose_name='Unit of Measure'
    )
    category = models.ForeignKey(
        UomCategory,
        on_delete=models.CASCADE,
        related_name='uoms',
        verbose_name='Category'
    )
    factor = models.DecimalField(
        max_digits=30,
        decimal_places=12,
        default=Decimal('1'),
        verbose_name='Ratio',
        help_text='How much bigger or smaller this unit is compared to the reference unit'
    )
    rounding = models.DecimalField(
        max_digits=20,
        decimal_places=10,
        default=Decimal('0.01'),
        verbose_name='Rounding precision',
        help_text='Quantities in this unit are multiples of this value'
    )
    uom_type = models.CharField(
        max_length=10,
        choices=UOM_TYPE_CHOICES,
        default=TYPE_REFERENCE,
        verbose_name='Type'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='Active'
    )

    class Meta:
        ordering = ['category__name', 'name']
        verbose_name = 'Unit of Measure'
        verbose_name_plural = 'Units of Measure'
        constraints = [
            models.CheckConstraint(
                condition=~models.Q(factor=0),
                name='product_uom_factor_gt_zero',
            ),
            models.CheckConstraint(
                condition=models.Q(rounding__gt=0),
                name='product_uom_rounding_gt_zero',
            ),
        ]

    def __str__(self):
        return self.name

    @property
    def factor_inv(self):
        factor = to_decimal(self.factor)
        if not factor:
            return Decimal('0')
        return 1 / factor

    @factor_inv.setter
    def factor_inv(self, value):
        value = to_decimal(value)
        self.factor = 1 / value if value else Decimal('0')

    def clean(self):
        if self.uom_type == self.TYPE_REFERENCE:
            self.factor = Decimal('1')
        if not to_decimal(self.factor):
            raise ValidationError({'factor': 'The conversion ratio of a unit of measure cannot be 0.'})
        if to_decimal(self.rounding) <= 0:
            raise ValidationError({'rounding': 'The rounding precision must be greater than 0.'})
        if self.uom_type == self.TYPE_REFERENCE and self.is_active and self.category_id:
            others = Uom.objects.filter(
                category_id=self.category_id,
                uom_type=self.TYPE_REFERENCE,
                is_active=True,
            ).exclude(pk=self.pk)
            if others.exists():
                raise ValidationError(
                    'The category "%s" already has a reference unit of measure.' % self.category
                )

    def save(self, *args, **kwargs):
        self.clean()
        super().save(*args, **kwargs)

    def compute_quantity(self, qty, to_unit, round=True):
        from ..services.uom import compute_quantity
        return compute_quantity(qty, self, to_unit, round=round)

    def compute_price(self, price, to_unit):
        from ..services.uom import compute_price
        return compute_price(price, self, to_unit)
