from django.db import models
from django.utils import timezone


class ProductPriceHistory(models.Model):
    """
    Cost of a product over time, per company.
    Automatically created when a variant standard price changes.
    """
    company = models.ForeignKey(
        'product.Company',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='product_price_history',
        verbose_name='Company'
    )
    product = models.ForeignKey(
        'product.Product',
        on_delete=models.CASCADE,
        related_name='price_history',
        verbose_name='Product'
    )
    datetime = models.DateTimeField(
        default=timezone.now,
        verbose_name='Date'
    )
    cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        verbose_name='Cost'
    )

    class Meta:
        ordering = ['-datetime', '-id']
        verbose_name = 'Product Price History'
        verbose_name_plural = 'Product Price History'

    def __str__(self):
        return f"{self.product} - {self.cost} ({self.datetime:%Y-%m-%d %H:%M})"
