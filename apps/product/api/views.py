from rest_framework import viewsets, filters, status
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
from django.db import transaction

from apps.product.models import (
    Currency,
    UomCategory,
    Uom,
    ProductCategory,
    Attribute,
    AttributeValue,
    AttributeLine,
    ProductTemplate,
    Product,
    Pricelist,
    PricelistItem,
)
from apps.product import conf
from apps.product.services import PricelistService, VariantService, unlink_or_deactivate
from apps.product.utils import quantize_price
from .serializers import (
    CurrencySerializer,
    UomCategorySerializer,
    UomSerializer,
    UomConvertSerializer,
    ProductCategorySerializer,
    AttributeSerializer,
    AttributeValueSerializer,
    AttributeLineSerializer,
    ProductTemplateSerializer,
    ProductTemplateListSerializer,
    ProductSerializer,
    ProductPriceHistorySerializer,
    PricelistSerializer,
    PricelistItemSerializer,
    PriceQuerySerializer,
)
from .filters import PricelistItemFilter, ProductTemplateFilter


def _price_response(pricelist, product, params):
    price, rule = PricelistService.compute_price_rule(
        pricelist,
        product,
        quantity=params['quantity'],
        partner=params.get('partner'),
        date=params.get('date'),
        uom=params.get('uom'),
    )
    return Response({
        'pricelist': pricelist.pk,
        'product': product.pk,
        'quantity': params['quantity'],
        'price': quantize_price(price, conf.price_decimal_places()),
        'currency': pricelist.currency.name,
        'rule': PricelistItemSerializer(rule).data if rule else None,
    })


class CurrencyViewSet(viewsets.ModelViewSet):
    queryset = Currency.objects.all()
    serializer_class = CurrencySerializer


# =============================================================================
# Units of measure
# =============================================================================

class UomCategoryViewSet(viewsets.ModelViewSet):
    """
    API endpoint for unit of measure categories with their units.
    """
    queryset = UomCategory.objects.prefetch_related('uoms')
    serializer_class = UomCategorySerializer


class UomViewSet(viewsets.ModelViewSet):
    """
    API endpoint for units of measure.

    convert: Convert a quantity into another unit of the same category
    convert_price: Convert a unit price into another unit
    """
    queryset = Uom.objects.select_related('category')
    serializer_class = UomSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ['category', 'uom_type', 'is_active']
    search_fields = ['name']

    @action(detail=True, methods=['post'])
    def convert(self, request, pk=None):
        """Convert a quantity expressed in this unit."""
        uom = self.get_object()
        serializer = UomConvertSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        quantity = uom.compute_quantity(data['value'], data['to_uom'], round=data['round'])
        return Response({'quantity': quantity, 'uom': data['to_uom'].pk})

    @action(detail=True, methods=['post'])
    def convert_price(self, request, pk=None):
        """Convert a price per this unit into a price per another unit."""
        uom = self.get_object()
        serializer = UomConvertSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        price = uom.compute_price(data['value'], data['to_uom'])
        return Response({'price': price, 'uom': data['to_uom'].pk})


# =============================================================================
# Products
# =============================================================================

class ProductCategoryViewSet(viewsets.ModelViewSet):
    queryset = ProductCategory.objects.select_related('parent')
    serializer_class = ProductCategorySerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ['parent', 'category_type']
    search_fields = ['name']


class AttributeViewSet(viewsets.ModelViewSet):
    """
    API endpoint for attributes (Color, Size, etc).
    """
    queryset = Attribute.objects.prefetch_related('values')
    serializer_class = AttributeSerializer
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name']
    ordering = ['sequence', 'name']


class AttributeValueViewSet(viewsets.ModelViewSet):
    queryset = AttributeValue.objects.select_related('attribute')
    serializer_class = AttributeValueSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ['attribute']
    search_fields = ['name']


class AttributeLineViewSet(viewsets.ModelViewSet):
    """
    API endpoint for the attribute lines of templates.
    Saving or deleting a line reconciles the template variants.
    """
    queryset = AttributeLine.objects.select_related('attribute', 'template').prefetch_related('values')
    serializer_class = AttributeLineSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ['template', 'attribute']


class ProductTemplateViewSet(viewsets.ModelViewSet):
    """
    API endpoint for product templates.

    list: List all templates
    retrieve: Get template detail with attribute lines and variants
    create_variants: Reconcile the variants with the attribute lines
    """
    queryset = ProductTemplate.objects.select_related('category', 'uom')
    filterset_class = ProductTemplateFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'list_price', 'created_at']
    ordering = ['name']

    def get_serializer_class(self):
        if self.action == 'list':
            return ProductTemplateListSerializer
        return ProductTemplateSerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'retrieve':
            queryset = queryset.prefetch_related('attribute_lines__values', 'variants')
        return queryset

    @action(detail=True, methods=['post'])
    def create_variants(self, request, pk=None):
        template = self.get_object()
        summary = VariantService.create_variants(template)
        return Response(summary)

    @action(detail=True, methods=['post'])
    def copy(self, request, pk=None):
        template = self.get_object()
        new = template.copy()
        return Response(ProductTemplateSerializer(new).data, status=status.HTTP_201_CREATED)


class ProductViewSet(viewsets.ModelViewSet):
    """
    API endpoint for product variants.

    price: Price of the variant in a pricelist
    destroy: Deletes the variant, or deactivates it when it is still referenced
    """
    queryset = Product.objects.select_related('template', 'template__uom')
    serializer_class = ProductSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['template', 'is_active', 'default_code']
    search_fields = ['default_code', 'barcode', 'template__name']
    ordering = ['default_code', 'id']

    @action(detail=True, methods=['get'])
    def price(self, request, pk=None):
        """
        Price of this variant.
        Query params: pricelist, quantity, partner, date, uom.
        Without pricelist, the pricelist of the partner is used.
        """
        product = self.get_object()
        params = PriceQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data
        pricelist = data.get('pricelist') or PricelistService.get_partner_pricelist(data.get('partner'))
        if pricelist is None:
            return Response({'detail': 'No pricelist available.'}, status=status.HTTP_404_NOT_FOUND)
        return _price_response(pricelist, product, data)

    @action(detail=True, methods=['get'])
    def price_history(self, request, pk=None):
        """Get cost history for a variant."""
        product = self.get_object()
        history = product.price_history.all()[:50]
        serializer = ProductPriceHistorySerializer(history, many=True)
        return Response(serializer.data)

    def destroy(self, request, *args, **kwargs):
        product = self.get_object()
        with transaction.atomic():
            result = unlink_or_deactivate(product)
        return Response({'result': result.value}, status=status.HTTP_200_OK)


# =============================================================================
# Pricelists
# =============================================================================

class PricelistViewSet(viewsets.ModelViewSet):
    """
    API endpoint for pricelists.

    compute: Price and matching rule for a product
    for_partner: Pricelist applicable to a partner
    """
    queryset = Pricelist.objects.select_related('currency', 'company')
    serializer_class = PricelistSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ['currency', 'company', 'is_active']
    search_fields = ['name']

    @action(detail=True, methods=['get'])
    def compute(self, request, pk=None):
        pricelist = self.get_object()
        params = PriceQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data
        product = data.get('product')
        if product is None:
            return Response({'product': ['This field is required.']}, status=status.HTTP_400_BAD_REQUEST)
        return _price_response(pricelist, product, data)

    @action(detail=False, methods=['get'])
    def for_partner(self, request):
        params = PriceQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        partner = params.validated_data.get('partner')
        pricelist = PricelistService.get_partner_pricelist(
            partner, company=partner.company if partner else None
        )
        if pricelist is None:
            return Response({'detail': 'No pricelist available.'}, status=status.HTTP_404_NOT_FOUND)
        return Response(PricelistSerializer(pricelist).data)


class PricelistItemViewSet(viewsets.ModelViewSet):
    """
    API endpoint for pricelist rules.
    """
    queryset = PricelistItem.objects.select_related(
        'pricelist__currency', 'template', 'product', 'category'
    )
    serializer_class = PricelistItemSerializer
    filterset_class = PricelistItemFilter
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    ordering = ['applied_on', '-min_quantity', 'id']
