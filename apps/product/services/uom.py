"""
Unit of measure conversions.

Quantities and prices are converted through the category's reference unit:
a unit with factor F means 1 reference unit = F of this unit.
"""

from ..exceptions import UomConversionError
from ..utils import round_to, to_decimal


def compute_quantity(qty, from_unit, to_unit, round=True):
    """
    Convert a quantity expressed in from_unit into to_unit.

    Args:
        qty: Quantity in from_unit
        from_unit: Source unit, None means the quantity has no unit context
        to_unit: Target unit, None returns the reference-normalized amount
        round: Quantize the result to to_unit.rounding (half away from zero)

    Returns:
        Decimal quantity

    Raises:
        UomConversionError: when both units are set and belong to different categories
    """
    qty = to_decimal(qty)
    if from_unit is None:
        return qty
    if to_unit is not None and from_unit.category_id != to_unit.category_id:
        raise UomConversionError(from_unit, to_unit)

    amount = qty / to_decimal(from_unit.factor)
    if to_unit is None:
        return amount

    amount = amount * to_decimal(to_unit.factor)
    if round:
        amount = round_to(amount, to_unit.rounding)
    return amount


def compute_price(price, from_unit, to_unit):
    """
    Convert a unit price expressed per from_unit into a price per to_unit.

    Units of different categories leave the price unchanged.
    """
    price = to_decimal(price)
    if not price or to_unit is None or from_unit is None:
        return price
    if from_unit.pk == to_unit.pk or from_unit.category_id != to_unit.category_id:
        return price
    return price * to_decimal(from_unit.factor) / to_decimal(to_unit.factor)
