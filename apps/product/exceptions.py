from django.core.exceptions import ValidationError


class UomConversionError(ValidationError):
    """Raised when converting a quantity between units of different categories."""

    def __init__(self, from_unit, to_unit):
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(
            'Conversion from "%(from_unit)s" to "%(to_unit)s" is not possible: '
            'both units must belong to the same category.',
            code='uom_category_mismatch',
            params={'from_unit': from_unit.name, 'to_unit': to_unit.name},
        )
