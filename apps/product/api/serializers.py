from rest_framework import serializers
from apps.product.models import (
    Currency,
    Partner,
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
    ProductPriceHistory,
)


# =============================================================================
# Unit of Measure Serializers
# =============================================================================

class UomSerializer(serializers.ModelSerializer):
    category_name = serializers.CharField(source='category.name', read_only=True)
    factor_inv = serializers.DecimalField(
        max_digits=30, decimal_places=12, read_only=True
    )

    class Meta:
        model = Uom
        fields = [
            'id', 'name', 'category', 'category_name', 'uom_type',
            'factor', 'factor_inv', 'rounding', 'is_active'
        ]


class UomCategorySerializer(serializers.ModelSerializer):
    uoms = UomSerializer(many=True, read_only=True)

    class Meta:
        model = UomCategory
        fields = ['id', 'name', 'uoms']


class UomConvertSerializer(serializers.Serializer):
    """Input of the quantity and price conversion actions."""
    value = serializers.DecimalField(max_digits=20, decimal_places=6)
    to_uom = serializers.PrimaryKeyRelatedField(queryset=Uom.objects.all())
    round = serializers.BooleanField(default=True)


# =============================================================================
# Category and Attribute Serializers
# =============================================================================

class ProductCategorySerializer(serializers.ModelSerializer):
    full_path = serializers.CharField(read_only=True)
    product_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = ProductCategory
        fields = ['id', 'name', 'parent', 'category_type', 'full_path', 'product_count']


class AttributeValueSerializer(serializers.ModelSerializer):
    attribute_name = serializers.CharField(source='attribute.name', read_only=True)

    class Meta:
        model = AttributeValue
        fields = ['id', 'attribute', 'attribute_name', 'name', 'sequence']


class AttributeSerializer(serializers.ModelSerializer):
    values = AttributeValueSerializer(many=True, read_only=True)

    class Meta:
        model = Attribute
        fields = ['id', 'name', 'sequence', 'create_variant', 'values']


class AttributeLineSerializer(serializers.ModelSerializer):
    name = serializers.CharField(read_only=True)

    class Meta:
        model = AttributeLine
        fields = ['id', 'template', 'attribute', 'values', 'name']


# =============================================================================
# Product Serializers
# =============================================================================

class ProductSerializer(serializers.ModelSerializer):
    display_name = serializers.CharField(read_only=True)
    lst_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    price_extra = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'template', 'display_name', 'default_code', 'barcode',
            'attribute_values', 'standard_price', 'lst_price', 'price_extra',
            'volume', 'weight', 'is_active'
        ]
        read_only_fields = ['attribute_values']


class ProductTemplateListSerializer(serializers.ModelSerializer):
    product_variant_count = serializers.IntegerField(read_only=True)
    category_name = serializers.CharField(source='category.name', read_only=True, default=None)

    class Meta:
        model = ProductTemplate
        fields = [
            'id', 'name', 'category', 'category_name', 'list_price',
            'uom', 'product_variant_count', 'is_active'
        ]


class ProductTemplateSerializer(serializers.ModelSerializer):
    attribute_lines = AttributeLineSerializer(many=True, read_only=True)
    variants = ProductSerializer(many=True, read_only=True)

    class Meta:
        model = ProductTemplate
        fields = [
            'id', 'name', 'sequence', 'description', 'description_sale',
            'description_purchase', 'product_type', 'rental', 'category',
            'list_price', 'uom', 'uom_po', 'company', 'sale_ok', 'purchase_ok',
            'color', 'is_active', 'attribute_lines', 'variants',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['created_at', 'updated_at']


class ProductPriceHistorySerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductPriceHistory
        fields = ['id', 'product', 'company', 'datetime', 'cost']


# =============================================================================
# Pricelist Serializers
# =============================================================================

class PricelistItemSerializer(serializers.ModelSerializer):
    name = serializers.CharField(read_only=True)
    price = serializers.CharField(read_only=True)

    class Meta:
        model = PricelistItem
        fields = [
            'id', 'pricelist', 'name', 'price', 'applied_on', 'template', 'product',
            'category', 'min_quantity', 'sequence', 'date_start', 'date_end',
            'base', 'base_pricelist', 'compute_price', 'fixed_price', 'percent_price',
            'price_discount', 'price_round', 'price_surcharge',
            'price_min_margin', 'price_max_margin'
        ]

    def validate(self, attrs):
        min_margin = attrs.get('price_min_margin')
        max_margin = attrs.get('price_max_margin')
        if min_margin is not None and max_margin is not None and min_margin > max_margin:
            raise serializers.ValidationError(
                {'price_max_margin': 'The minimum margin should be lower than the maximum margin.'}
            )
        return attrs


class PricelistSerializer(serializers.ModelSerializer):
    currency_name = serializers.CharField(source='currency.name', read_only=True)
    item_count = serializers.SerializerMethodField()

    class Meta:
        model = Pricelist
        fields = [
            'id', 'name', 'currency', 'currency_name', 'company', 'sequence',
            'country_groups', 'is_active', 'item_count'
        ]

    def get_item_count(self, obj):
        return obj.items.count()


class PriceQuerySerializer(serializers.Serializer):
    """Query parameters of the price computation actions."""
    pricelist = serializers.PrimaryKeyRelatedField(queryset=Pricelist.objects.all(), required=False)
    product = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all(), required=False)
    quantity = serializers.DecimalField(max_digits=20, decimal_places=6, default=1)
    partner = serializers.PrimaryKeyRelatedField(queryset=Partner.objects.all(), required=False)
    date = serializers.DateField(required=False)
    uom = serializers.PrimaryKeyRelatedField(queryset=Uom.objects.all(), required=False)


class CurrencySerializer(serializers.ModelSerializer):
    class Meta:
        model = Currency
        fields = ['id', 'name', 'symbol', 'rate', 'rounding', 'is_active']
