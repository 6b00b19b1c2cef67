from django.contrib import admin, messages
from import_export import resources, fields
from import_export.admin import ImportExportModelAdmin
from import_export.widgets import ForeignKeyWidget
from adminsortable2.admin import SortableAdminMixin, SortableInlineAdminMixin
from simple_history.admin import SimpleHistoryAdmin

from .models import (
    Currency,
    Country,
    CountryGroup,
    Company,
    Partner,
    UomCategory,
    Uom,
    ProductCategory,
    Attribute,
    AttributeValue,
    AttributeLine,
    AttributePrice,
    ProductTemplate,
    Product,
    Pricelist,
    PricelistItem,
    ProductPriceHistory,
    SupplierInfo,
    ProductPackaging,
)
from .services import VariantService


# =============================================================================
# Import/Export Resources
# =============================================================================

class UomResource(resources.ModelResource):
    """Resource for importing/exporting units of measure."""

    category_name = fields.Field(
        column_name='category',
        attribute='category',
        widget=ForeignKeyWidget(UomCategory, 'name')
    )

    class Meta:
        model = Uom
        import_id_fields = ['name']
        fields = ('name', 'category_name', 'uom_type', 'factor', 'rounding', 'is_active')
        export_order = fields


class PricelistItemResource(resources.ModelResource):
    """Resource for importing/exporting pricelist rules."""

    pricelist_name = fields.Field(
        column_name='pricelist',
        attribute='pricelist',
        widget=ForeignKeyWidget(Pricelist, 'name')
    )

    class Meta:
        model = PricelistItem
        fields = (
            'id', 'pricelist_name', 'applied_on', 'template', 'product', 'category',
            'min_quantity', 'date_start', 'date_end', 'base', 'base_pricelist',
            'compute_price', 'fixed_price', 'percent_price', 'price_discount',
            'price_round', 'price_surcharge', 'price_min_margin', 'price_max_margin',
        )
        export_order = fields


# =============================================================================
# Inlines
# =============================================================================

class UomInline(admin.TabularInline):
    model = Uom
    extra = 1
    fields = ['name', 'uom_type', 'factor', 'rounding', 'is_active']


class AttributeValueInline(SortableInlineAdminMixin, admin.TabularInline):
    model = AttributeValue
    extra = 1
    fields = ['name', 'sequence']


class AttributeLineInline(admin.TabularInline):
    model = AttributeLine
    extra = 1
    fields = ['attribute', 'values']
    filter_horizontal = ['values']


class AttributePriceInline(admin.TabularInline):
    model = AttributePrice
    extra = 0
    fields = ['value', 'price_extra']


class VariantInline(admin.TabularInline):
    model = Product
    extra = 0
    fields = ['default_code', 'barcode', 'standard_price', 'is_active']
    show_change_link = True
    can_delete = False


class SupplierInfoInline(admin.TabularInline):
    model = SupplierInfo
    extra = 0
    fk_name = 'template'
    fields = ['partner', 'product', 'product_code', 'min_qty', 'price', 'currency', 'delay']


class PricelistItemInline(admin.TabularInline):
    model = PricelistItem
    extra = 0
    fk_name = 'pricelist'
    fields = [
        'applied_on', 'template', 'product', 'category', 'min_quantity',
        'compute_price', 'fixed_price', 'percent_price', 'base', 'price_discount',
        'price_surcharge', 'date_start', 'date_end',
    ]


# =============================================================================
# Units of measure
# =============================================================================

@admin.register(UomCategory)
class UomCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'reference_unit']
    search_fields = ['name']
    inlines = [UomInline]


@admin.register(Uom)
class UomAdmin(ImportExportModelAdmin):
    resource_class = UomResource
    list_display = ['name', 'category', 'uom_type', 'factor', 'factor_inv', 'rounding', 'is_active']
    list_filter = ['category', 'uom_type', 'is_active']
    search_fields = ['name']


# =============================================================================
# Products
# =============================================================================

@admin.register(ProductCategory)
class ProductCategoryAdmin(admin.ModelAdmin):
    list_display = ['full_path', 'category_type', 'product_count']
    list_filter = ['category_type']
    search_fields = ['name']


@admin.register(Attribute)
class AttributeAdmin(SortableAdminMixin, admin.ModelAdmin):
    list_display = ['name', 'create_variant', 'value_count', 'sequence']
    list_filter = ['create_variant']
    search_fields = ['name']
    inlines = [AttributeValueInline]

    def value_count(self, obj):
        return obj.values.count()
    value_count.short_description = 'Values'


@admin.register(ProductTemplate)
class ProductTemplateAdmin(SimpleHistoryAdmin):
    list_display = [
        'name', 'category', 'list_price', 'uom', 'product_variant_count',
        'sale_ok', 'purchase_ok', 'is_active'
    ]
    list_filter = ['is_active', 'product_type', 'sale_ok', 'purchase_ok', 'category']
    search_fields = ['name', 'variants__default_code']
    inlines = [AttributeLineInline, AttributePriceInline, VariantInline, SupplierInfoInline]
    actions = ['create_variants']

    fieldsets = (
        (None, {
            'fields': ('name', 'product_type', 'category', 'company', 'is_active')
        }),
        ('Sales & Purchase', {
            'fields': ('list_price', 'uom', 'uom_po', 'sale_ok', 'purchase_ok', 'rental')
        }),
        ('Descriptions', {
            'fields': ('description', 'description_sale', 'description_purchase'),
            'classes': ('collapse',)
        }),
    )

    def save_related(self, request, form, formsets, change):
        super().save_related(request, form, formsets, change)
        VariantService.create_variants(form.instance)

    @admin.action(description='Regenerate variants')
    def create_variants(self, request, queryset):
        for template in queryset:
            summary = VariantService.create_variants(template)
            self.message_user(
                request,
                f"{template}: {len(summary['created'])} created, "
                f"{len(summary['unlinked'])} removed, {len(summary['deactivated'])} deactivated.",
                messages.SUCCESS,
            )


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['display_name', 'default_code', 'lst_price', 'standard_price', 'is_active']
    list_filter = ['is_active', 'template__category']
    search_fields = ['default_code', 'barcode', 'template__name']
    filter_horizontal = ['attribute_values']
    readonly_fields = ['price_extra', 'lst_price']


@admin.register(ProductPriceHistory)
class ProductPriceHistoryAdmin(admin.ModelAdmin):
    list_display = ['product', 'company', 'cost', 'datetime']
    list_filter = ['company', 'datetime']
    search_fields = ['product__default_code', 'product__template__name']
    date_hierarchy = 'datetime'

    def has_add_permission(self, request):
        return False


@admin.register(ProductPackaging)
class ProductPackagingAdmin(admin.ModelAdmin):
    list_display = ['name', 'template', 'qty', 'sequence']


# =============================================================================
# Pricelists
# =============================================================================

@admin.register(Pricelist)
class PricelistAdmin(SortableAdminMixin, admin.ModelAdmin):
    list_display = ['name', 'currency', 'company', 'is_active', 'sequence']
    list_filter = ['is_active', 'currency']
    search_fields = ['name']
    filter_horizontal = ['country_groups']
    inlines = [PricelistItemInline]


@admin.register(PricelistItem)
class PricelistItemAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = PricelistItemResource
    list_display = ['name', 'pricelist', 'applied_on', 'min_quantity', 'price', 'date_start', 'date_end']
    list_filter = ['pricelist', 'applied_on', 'compute_price', 'base']


# =============================================================================
# Partners
# =============================================================================

admin.site.register(Currency)
admin.site.register(Country)
admin.site.register(CountryGroup)
admin.site.register(Company)


@admin.register(Partner)
class PartnerAdmin(admin.ModelAdmin):
    list_display = ['name', 'country', 'company', 'pricelist', 'is_supplier']
    list_filter = ['is_supplier', 'country']
    search_fields = ['name']
