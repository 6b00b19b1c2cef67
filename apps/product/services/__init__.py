from .uom import compute_quantity, compute_price
from .records import DeleteResult, unlink, unlink_or_deactivate
from .variants import VariantService
from .pricing import PricelistService

__all__ = [
    'compute_quantity',
    'compute_price',
    'DeleteResult',
    'unlink',
    'unlink_or_deactivate',
    'VariantService',
    'PricelistService',
]
