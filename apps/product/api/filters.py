from django.db.models import Q
from django_filters import rest_framework as filters
from apps.product.models import PricelistItem, Product, ProductTemplate


class PricelistItemFilter(filters.FilterSet):
    """Filter for pricelist rules, including the rules valid at a date."""

    valid_on = filters.DateFilter(method='filter_valid_on')
    product_or_template = filters.NumberFilter(method='filter_product_or_template')

    class Meta:
        model = PricelistItem
        fields = ['pricelist', 'applied_on', 'template', 'product', 'category', 'compute_price', 'base']

    def filter_valid_on(self, queryset, name, value):
        return queryset.filter(
            Q(date_start__isnull=True) | Q(date_start__lte=value),
            Q(date_end__isnull=True) | Q(date_end__gte=value),
        )

    def filter_product_or_template(self, queryset, name, value):
        """
        Rules that target a variant directly or through its template.
        Example: ?product_or_template=12
        """
        product = Product.objects.filter(pk=value).first()
        if product is None:
            return queryset.none()
        return queryset.filter(Q(product=product) | Q(template_id=product.template_id))


class ProductTemplateFilter(filters.FilterSet):
    min_price = filters.NumberFilter(field_name='list_price', lookup_expr='gte')
    max_price = filters.NumberFilter(field_name='list_price', lookup_expr='lte')
    category_tree = filters.NumberFilter(method='filter_category_tree')

    class Meta:
        model = ProductTemplate
        fields = ['category', 'product_type', 'sale_ok', 'purchase_ok', 'is_active']

    def filter_category_tree(self, queryset, name, value):
        """Templates in the category or any of its children."""
        from apps.product.models import ProductCategory

        category = ProductCategory.objects.filter(pk=value).first()
        if category is None:
            return queryset.none()
        ids = [category.pk]
        pending = [category]
        while pending:
            children = list(ProductCategory.objects.filter(parent__in=pending))
            ids.extend(c.pk for c in children)
            pending = children
        return queryset.filter(category_id__in=ids)
