"""
Minimal company, partner and country records the pricing code depends on.
"""

import logging

from django.db import models, transaction

logger = logging.getLogger(__name__)


class Country(models.Model):
    name = models.CharField(
        max_length=100,
        verbose_name='Name'
    )
    code = models.CharField(
        max_length=2,
        unique=True,
        verbose_name='Country Code',
        help_text='ISO 3166-1 alpha-2 code'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Country'
        verbose_name_plural = 'Countries'

    def __str__(self):
        return self.name


class CountryGroup(models.Model):
    name = models.CharField(
        max_length=100,
        verbose_name='Name'
    )
    countries = models.ManyToManyField(
        Country,
        blank=True,
        related_name='country_groups',
        verbose_name='Countries'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Country Group'
        verbose_name_plural = 'Country Groups'

    def __str__(self):
        return self.name


class Company(models.Model):
    """
    Company owning products and pricelists.

    A company always ends up with a default pricelist in its currency.
    """
    name = models.CharField(
        max_length=200,
        verbose_name='Name'
    )
    currency = models.ForeignKey(
        'product.Currency',
        on_delete=models.PROTECT,
        related_name='companies',
        verbose_name='Currency'
    )
    default_pricelist = models.ForeignKey(
        'product.Pricelist',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='default_for_companies',
        verbose_name='Default Pricelist',
        help_text='Default pricelist for partners of this company'
    )

    class Meta:
        ordering = ['id']
        verbose_name = 'Company'
        verbose_name_plural = 'Companies'

    def __str__(self):
        return self.name

    @classmethod
    def get_main(cls):
        return cls.objects.order_by('id').first()

    def save(self, *args, **kwargs):
        from .pricelist import Pricelist

        creating = self.pk is None
        currency_changed = False
        if not creating:
            old_currency_id = (
                Company.objects.filter(pk=self.pk).values_list('currency_id', flat=True).first()
            )
            currency_changed = old_currency_id is not None and old_currency_id != self.currency_id

        with transaction.atomic():
            if currency_changed:
                self._move_default_pricelist(self.currency)
            super().save(*args, **kwargs)
            if creating and self.default_pricelist_id is None:
                pricelist = Pricelist.objects.filter(
                    currency=self.currency, company__isnull=True, is_active=True
                ).first()
                if pricelist is None:
                    pricelist = Pricelist.objects.create(name=self.name, currency=self.currency)
                    logger.info('Created default pricelist "%s" for company %s', pricelist, self.pk)
                self.default_pricelist = pricelist
                super().save(update_fields=['default_pricelist'])

    def _move_default_pricelist(self, currency):
        """
        Reflect a currency change on the default pricelist when this company
        is its only user, otherwise give the company a new pricelist.
        """
        from .pricelist import Pricelist

        pricelist = self.default_pricelist
        if pricelist is None:
            return
        single_company = Company.objects.count() == 1
        if pricelist.company_id == self.pk or (pricelist.company_id is None and single_company):
            pricelist.currency = currency
            pricelist.save(update_fields=['currency'])
        else:
            self.default_pricelist = Pricelist.objects.create(name=self.name, currency=currency)


class Partner(models.Model):
    """
    Customer or vendor.
    """
    name = models.CharField(
        max_length=200,
        verbose_name='Name'
    )
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='children',
        verbose_name='Related Company'
    )
    country = models.ForeignKey(
        Country,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='partners',
        verbose_name='Country'
    )
    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='partners',
        verbose_name='Company'
    )
    is_supplier = models.BooleanField(
        default=False,
        verbose_name='Is a Vendor'
    )
    pricelist = models.ForeignKey(
        'product.Pricelist',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='partners',
        verbose_name='Stored Pricelist'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Partner'
        verbose_name_plural = 'Partners'

    def __str__(self):
        return self.name

    @property
    def commercial_partner(self):
        partner = self
        while partner.parent_id:
            partner = partner.parent
        return partner

    @property
    def property_pricelist(self):
        """The pricelist applicable to this partner, see get_partner_pricelist."""
        if self.pk is None:
            return None
        from ..services.pricing import PricelistService
        return PricelistService.get_partner_pricelist(self, company=self.company)

    @property_pricelist.setter
    def property_pricelist(self, pricelist):
        """
        Store pricelist on the partner. Clearing it stores the country default
        when the partner currently resolves to something else.
        """
        from .pricelist import Pricelist

        if self.country_id:
            default_for_country = Pricelist.objects.filter(
                is_active=True, country_groups__countries__code=self.country.code
            ).first()
        else:
            default_for_country = Pricelist.objects.filter(
                is_active=True, country_groups__isnull=True
            ).first()

        actual = self.property_pricelist
        if pricelist is not None:
            self.pricelist = pricelist
        elif actual is not None and actual != default_for_country:
            self.pricelist = default_for_country
