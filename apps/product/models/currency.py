from decimal import Decimal

from django.db import models

from ..utils import round_to, to_decimal


class Currency(models.Model):
    """
    Currency with a rate relative to the reference currency (rate 1).
    """
    name = models.CharField(
        max_length=3,
        unique=True,
        verbose_name='Code',
        help_text='ISO 4217 code, e.g. EUR'
    )
    symbol = models.CharField(
        max_length=8,
        blank=True,
        verbose_name='Symbol'
    )
    rate = models.DecimalField(
        max_digits=20,
        decimal_places=10,
        default=Decimal('1'),
        verbose_name='Rate',
        help_text='Units of this currency for one unit of the reference currency'
    )
    rounding = models.DecimalField(
        max_digits=20,
        decimal_places=10,
        default=Decimal('0.01'),
        verbose_name='Rounding factor'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='Active'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Currency'
        verbose_name_plural = 'Currencies'

    def __str__(self):
        return self.name

    def round(self, amount):
        return round_to(amount, self.rounding)

    def compute(self, amount, to_currency, round=True):
        """
        Convert amount from this currency into to_currency.

        Args:
            amount: Amount expressed in this currency
            to_currency: Target currency, None keeps the amount as is
            round: Round the result to the target currency rounding

        Returns:
            Decimal amount in the target currency
        """
        amount = to_decimal(amount)
        if to_currency is None:
            return amount
        if to_currency.pk == self.pk:
            result = amount
        else:
            result = amount * to_currency.rate / self.rate
        if round:
            return to_currency.round(result)
        return result
