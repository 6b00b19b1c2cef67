from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import (
    CurrencyViewSet,
    UomCategoryViewSet,
    UomViewSet,
    ProductCategoryViewSet,
    AttributeViewSet,
    AttributeValueViewSet,
    AttributeLineViewSet,
    ProductTemplateViewSet,
    ProductViewSet,
    PricelistViewSet,
    PricelistItemViewSet,
)

router = DefaultRouter()
router.register(r'currencies', CurrencyViewSet, basename='currency')
router.register(r'uom-categories', UomCategoryViewSet, basename='uom-category')
router.register(r'uoms', UomViewSet, basename='uom')
router.register(r'categories', ProductCategoryViewSet, basename='category')
router.register(r'attributes', AttributeViewSet, basename='attribute')
router.register(r'attribute-values', AttributeValueViewSet, basename='attribute-value')
router.register(r'attribute-lines', AttributeLineViewSet, basename='attribute-line')
router.register(r'templates', ProductTemplateViewSet, basename='template')
router.register(r'products', ProductViewSet, basename='product')
router.register(r'pricelists', PricelistViewSet, basename='pricelist')
router.register(r'pricelist-items', PricelistItemViewSet, basename='pricelist-item')

urlpatterns = [
    path('', include(router.urls)),
]
