"""
Pricelist rule evaluation and partner pricelist resolution.
"""

import logging
from decimal import Decimal
from typing import Optional, Tuple

from django.db.models import Q
from django.utils import timezone

from apps.product.models import (
    Company,
    Partner,
    Pricelist,
    PricelistItem,
    Product,
    Uom,
)
from ..utils import round_to, to_decimal

logger = logging.getLogger(__name__)


class PricelistService:
    """
    Computes product prices from the ordered rules of a pricelist.
    """

    @staticmethod
    def get_candidate_items(pricelist: Pricelist, product: Product, date):
        """
        Rules of the pricelist that may apply to product at date.

        Scope and date are filtered here; the minimum quantity and exact
        scope are checked again while walking the rules.
        """
        category_ids = [c.pk for c in product.category.get_lineage()] if product.category else []
        return PricelistItem.objects.filter(
            Q(template__isnull=True) | Q(template_id=product.template_id),
            Q(product__isnull=True) | Q(product=product),
            Q(category__isnull=True) | Q(category_id__in=category_ids),
            Q(date_start__isnull=True) | Q(date_start__lte=date),
            Q(date_end__isnull=True) | Q(date_end__gte=date),
            pricelist=pricelist,
        ).select_related('category', 'base_pricelist__currency').order_by(
            'applied_on', '-min_quantity', 'category__name', 'id'
        )

    @staticmethod
    def rule_matches(rule: PricelistItem, product: Product, qty_in_product_uom) -> bool:
        if rule.min_quantity and qty_in_product_uom < rule.min_quantity:
            return False
        if rule.template_id and rule.template_id != product.template_id:
            return False
        if rule.product_id and rule.product_id != product.pk:
            return False
        if rule.category_id:
            category = product.category
            if category is None or not category.is_descendant_of(rule.category):
                return False
        return True

    @staticmethod
    def compute_price_rule(
        pricelist: Pricelist,
        product: Optional[Product],
        quantity=1,
        partner: Optional[Partner] = None,
        date=None,
        uom: Optional[Uom] = None,
    ) -> Tuple[Decimal, Optional[PricelistItem]]:
        """
        Price of product in pricelist and the rule that produced it.

        The first rule matching the product scope, minimum quantity and date
        wins, in the order: most specific scope, highest minimum quantity,
        category name.

        Args:
            pricelist: Pricelist to evaluate
            product: Variant to price, None gives a zero price
            quantity: Quantity in uom
            partner: Customer, passed along to dependent pricelists
            date: Evaluation date, today by default
            uom: Unit quantity and price are expressed in, the product unit by default

        Returns:
            Tuple (price, rule) where rule is None when no rule applied
        """
        if date is None:
            date = timezone.localdate()
        if product is None:
            return Decimal('0'), None

        quantity = to_decimal(quantity)
        product_uom = product.uom
        qty_uom = uom or product_uom
        qty_in_product_uom = quantity
        if qty_uom.pk != product_uom.pk and qty_uom.category_id == product_uom.category_id:
            qty_in_product_uom = qty_uom.compute_quantity(quantity, product_uom, round=True)
        price_uom = qty_uom

        def convert_to_price_uom(value):
            return product_uom.compute_price(value, price_uom)

        price = product.price_compute(PricelistItem.BASE_LIST_PRICE, uom=qty_uom)
        suitable_rule = None

        for rule in PricelistService.get_candidate_items(pricelist, product, date):
            if not PricelistService.rule_matches(rule, product, qty_in_product_uom):
                continue

            if rule.base == PricelistItem.BASE_PRICELIST and rule.base_pricelist_id:
                base_price, _rule = PricelistService.compute_price_rule(
                    rule.base_pricelist, product, quantity, partner
                )
                price = rule.base_pricelist.currency.compute(
                    base_price, pricelist.currency, round=False
                )
            else:
                base = rule.base if rule.base in Product.PRICE_ACCESSORS else PricelistItem.BASE_LIST_PRICE
                price = product.price_compute(base, uom=qty_uom)

            if price == 0:
                break

            if rule.compute_price == PricelistItem.COMPUTE_FIXED:
                price = convert_to_price_uom(rule.fixed_price)
            elif rule.compute_price == PricelistItem.COMPUTE_PERCENTAGE:
                price = price - price * to_decimal(rule.percent_price) / 100
            else:
                price_limit = price
                price = price - price * to_decimal(rule.price_discount) / 100
                if rule.price_round:
                    price = round_to(price, rule.price_round)
                if rule.price_surcharge:
                    price += convert_to_price_uom(rule.price_surcharge)
                if rule.price_min_margin is not None:
                    price = max(price, price_limit + convert_to_price_uom(rule.price_min_margin))
                if rule.price_max_margin is not None:
                    price = min(price, price_limit + convert_to_price_uom(rule.price_max_margin))

            suitable_rule = rule
            break

        keeps_currency = suitable_rule is not None and (
            suitable_rule.compute_price == PricelistItem.COMPUTE_FIXED
            or suitable_rule.base == PricelistItem.BASE_PRICELIST
        )
        if not keeps_currency and product.currency is not None:
            price = product.currency.compute(price, pricelist.currency, round=False)

        logger.debug(
            'Pricelist %s: %s x %s -> %s (rule %s)',
            pricelist.pk, quantity, product.pk, price,
            suitable_rule.pk if suitable_rule else None,
        )
        return price, suitable_rule

    @staticmethod
    def get_product_price(pricelist, product, quantity=1, partner=None, date=None, uom=None) -> Decimal:
        price, _rule = PricelistService.compute_price_rule(
            pricelist, product, quantity, partner, date, uom
        )
        return price

    @staticmethod
    def get_product_price_rule(pricelist, product, quantity=1, partner=None, date=None, uom=None):
        _price, rule = PricelistService.compute_price_rule(
            pricelist, product, quantity, partner, date, uom
        )
        return rule

    @staticmethod
    def get_partner_pricelist(partner: Optional[Partner], company: Optional[Company] = None) -> Optional[Pricelist]:
        """
        Pricelist applicable to partner in company.

        Resolution order: the partner stored pricelist, a pricelist of a
        country group containing the partner country, a pricelist without
        country groups, the company default pricelist, any pricelist.
        """
        if company is None:
            company = Company.get_main()

        pricelist = partner.pricelist if partner is not None else None
        if pricelist is None and partner is not None and partner.country_id:
            pricelist = Pricelist.objects.filter(
                is_active=True, country_groups__countries__code=partner.country.code
            ).first()
            if pricelist is not None:
                logger.debug('Partner %s: pricelist %s from country group', partner.pk, pricelist.pk)
        if pricelist is None:
            pricelist = Pricelist.objects.filter(is_active=True, country_groups__isnull=True).first()
        if pricelist is None and company is not None:
            default = company.default_pricelist
            if default is not None and default.is_active:
                pricelist = default
        if pricelist is None:
            pricelist = Pricelist.objects.filter(is_active=True).first()
        return pricelist
