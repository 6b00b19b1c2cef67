from decimal import Decimal, ROUND_HALF_UP

ZERO = Decimal('0')


def to_decimal(value):
    """Coerce ints, floats and strings to Decimal without float noise."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_to(value, precision):
    """
    Round value to the nearest multiple of precision, half away from zero.

    Example:
        round_to(Decimal('6.83'), Decimal('1')) -> Decimal('7')
        round_to(Decimal('-2.5'), Decimal('1')) -> Decimal('-3')
    """
    value = to_decimal(value)
    precision = to_decimal(precision)
    if precision <= 0:
        return value
    steps = (value / precision).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    return steps * precision


def quantize_price(value, places):
    return to_decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
