"""
Tests: partner pricelist resolution, company default pricelist, cost history.

Run with:
    pytest tests/test_partners.py -v
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from apps.product.models import (
    Company,
    Country,
    CountryGroup,
    Partner,
    Pricelist,
    ProductPriceHistory,
)
from apps.product.services import PricelistService

pytestmark = pytest.mark.django_db


@pytest.fixture
def belgium(db):
    return Country.objects.create(name='Belgium', code='BE')


@pytest.fixture
def benelux_pricelist(eur, belgium):
    group = CountryGroup.objects.create(name='Benelux')
    group.countries.add(belgium)
    pricelist = Pricelist.objects.create(name='Benelux', currency=eur, sequence=5)
    pricelist.country_groups.add(group)
    return pricelist


class TestPartnerPricelist:
    def test_stored_pricelist_wins(self, company, pricelist, benelux_pricelist, belgium):
        partner = Partner.objects.create(name='Agrolait', country=belgium, pricelist=pricelist)
        assert PricelistService.get_partner_pricelist(partner) == pricelist
        assert partner.property_pricelist == pricelist

    def test_country_group_pricelist(self, company, pricelist, benelux_pricelist, belgium):
        partner = Partner.objects.create(name='Agrolait', country=belgium)
        assert PricelistService.get_partner_pricelist(partner) == benelux_pricelist

    def test_pricelist_without_country_group(self, company, pricelist, benelux_pricelist):
        partner = Partner.objects.create(name='Deco Addict')
        assert PricelistService.get_partner_pricelist(partner) == pricelist

    def test_no_partner(self, company, pricelist):
        assert Pricelist.get_partner_pricelist(None) == pricelist

    def test_company_default_pricelist(self, company, benelux_pricelist, belgium):
        default = company.default_pricelist
        default.country_groups.add(*benelux_pricelist.country_groups.all())
        partner = Partner.objects.create(name='Deco Addict')
        assert PricelistService.get_partner_pricelist(partner, company) == default

    def test_archived_pricelist_skipped(self, company, pricelist, eur):
        Pricelist.objects.create(name='Old', currency=eur, sequence=0, is_active=False)
        partner = Partner.objects.create(name='Deco Addict')
        assert PricelistService.get_partner_pricelist(partner, company) == pricelist

    def test_archived_country_group_pricelist_skipped(self, company, pricelist, benelux_pricelist, belgium):
        benelux_pricelist.is_active = False
        benelux_pricelist.save()
        partner = Partner.objects.create(name='Agrolait', country=belgium)
        assert PricelistService.get_partner_pricelist(partner) == pricelist

    def test_nothing_configured(self, db):
        assert PricelistService.get_partner_pricelist(None) is None

    def test_setting_pricelist(self, company, pricelist, eur):
        partner = Partner.objects.create(name='Deco Addict')
        special = Pricelist.objects.create(name='Special', currency=eur, sequence=20)
        partner.property_pricelist = special
        partner.save()
        partner.refresh_from_db()
        assert partner.property_pricelist == special


class TestCompanyDefaultPricelist:
    def test_created_with_company(self, eur):
        company = Company.objects.create(name='Acme', currency=eur)
        assert company.default_pricelist is not None
        assert company.default_pricelist.currency == eur
        assert company.default_pricelist.name == 'Acme'

    def test_reuses_shared_pricelist_in_same_currency(self, eur):
        shared = Pricelist.objects.create(name='Public Pricelist', currency=eur)
        company = Company.objects.create(name='Acme', currency=eur)
        assert company.default_pricelist == shared

    def test_archived_shared_pricelist_not_reused(self, eur):
        archived = Pricelist.objects.create(name='Public Pricelist', currency=eur, is_active=False)
        company = Company.objects.create(name='Acme', currency=eur)
        assert company.default_pricelist != archived
        assert company.default_pricelist.is_active

    def test_currency_change_moves_pricelist(self, eur, usd):
        company = Company.objects.create(name='Acme', currency=eur)
        pricelist = company.default_pricelist

        company.currency = usd
        company.save()

        pricelist.refresh_from_db()
        assert pricelist.currency == usd
        assert company.default_pricelist == pricelist

    def test_currency_change_with_shared_pricelist(self, eur, usd):
        first = Company.objects.create(name='Acme', currency=eur)
        second = Company.objects.create(name='Globex', currency=eur)
        shared = second.default_pricelist
        assert shared == first.default_pricelist

        second.currency = usd
        second.save()

        shared.refresh_from_db()
        assert shared.currency == eur
        assert second.default_pricelist != shared
        assert second.default_pricelist.currency == usd


class TestCostHistory:
    def test_cost_change_is_recorded(self, product, company):
        product.standard_price = Decimal('35')
        product.save()

        entry = ProductPriceHistory.objects.get(product=product)
        assert entry.cost == Decimal('35')
        assert entry.company == company

    def test_unchanged_cost_is_not_recorded(self, product):
        product.barcode = '5901234123457'
        product.save()
        assert not product.price_history.exists()

    def test_template_cost_goes_to_single_variant(self, template, product):
        template.standard_price = Decimal('12.50')
        product.refresh_from_db()
        assert product.standard_price == Decimal('12.50')
        assert product.price_history.count() == 1

    def test_history_price_at_date(self, product, company):
        product.standard_price = Decimal('10')
        product.save()
        ProductPriceHistory.objects.filter(product=product).update(
            datetime=timezone.now() - timedelta(days=10)
        )
        product.standard_price = Decimal('20')
        product.save()

        assert product.get_history_price(company) == Decimal('20')
        assert product.get_history_price(company, timezone.now() - timedelta(days=5)) == Decimal('10')
        assert product.get_history_price(company, timezone.now() - timedelta(days=30)) == Decimal('0')


class TestListPrice:
    def test_lst_price_includes_price_extra(self, template, color, color_values):
        from apps.product.models import AttributeLine

        line = AttributeLine.objects.create(template=template, attribute=color)
        line.values.set(color_values)
        red = template.variants.get(attribute_values=color_values[0])
        color_values[0].set_price_extra(template, Decimal('15'))

        assert red.price_extra == Decimal('15')
        assert red.lst_price == Decimal('115')

    def test_setting_lst_price_updates_template(self, template, color, color_values):
        from apps.product.models import AttributeLine

        line = AttributeLine.objects.create(template=template, attribute=color)
        line.values.set(color_values)
        red = template.variants.get(attribute_values=color_values[0])
        color_values[0].set_price_extra(template, Decimal('15'))

        red.lst_price = Decimal('65')
        template.refresh_from_db()
        assert template.list_price == Decimal('50')

    def test_lst_price_in_other_unit(self, product, dozens):
        price = product.get_lst_price(dozens)
        assert abs(price - Decimal('1200')) < Decimal('0.001')
