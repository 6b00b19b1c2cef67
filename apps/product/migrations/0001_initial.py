# Generated manually

from decimal import Decimal

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import simple_history.models

import apps.product.models.pricelist


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Currency',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='ISO 4217 code, e.g. EUR', max_length=3, unique=True, verbose_name='Code')),
                ('symbol', models.CharField(blank=True, max_length=8, verbose_name='Symbol')),
                ('rate', models.DecimalField(decimal_places=10, default=Decimal('1'), help_text='Units of this currency for one unit of the reference currency', max_digits=20, verbose_name='Rate')),
                ('rounding', models.DecimalField(decimal_places=10, default=Decimal('0.01'), max_digits=20, verbose_name='Rounding factor')),
                ('is_active', models.BooleanField(default=True, verbose_name='Active')),
            ],
            options={
                'verbose_name': 'Currency',
                'verbose_name_plural': 'Currencies',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Country',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Name')),
                ('code', models.CharField(help_text='ISO 3166-1 alpha-2 code', max_length=2, unique=True, verbose_name='Country Code')),
            ],
            options={
                'verbose_name': 'Country',
                'verbose_name_plural': 'Countries',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='CountryGroup',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Name')),
                ('countries', models.ManyToManyField(blank=True, related_name='country_groups', to='product.country', verbose_name='Countries')),
            ],
            options={
                'verbose_name': 'Country Group',
                'verbose_name_plural': 'Country Groups',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Company',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('currency', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='companies', to='product.currency', verbose_name='Currency')),
            ],
            options={
                'verbose_name': 'Company',
                'verbose_name_plural': 'Companies',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='UomCategory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True, verbose_name='Name')),
            ],
            options={
                'verbose_name': 'Unit of Measure Category',
                'verbose_name_plural': 'Unit of Measure Categories',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Uom',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Unit of Measure')),
                ('factor', models.DecimalField(decimal_places=12, default=Decimal('1'), help_text='How much bigger or smaller this unit is compared to the reference unit', max_digits=30, verbose_name='Ratio')),
                ('rounding', models.DecimalField(decimal_places=10, default=Decimal('0.01'), help_text='Quantities in this unit are multiples of this value', max_digits=20, verbose_name='Rounding precision')),
                ('uom_type', models.CharField(choices=[('bigger', 'Bigger than the reference unit'), ('reference', 'Reference unit for this category'), ('smaller', 'Smaller than the reference unit')], default='reference', max_length=10, verbose_name='Type')),
                ('is_active', models.BooleanField(default=True, verbose_name='Active')),
                ('category', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='uoms', to='product.uomcategory', verbose_name='Category')),
            ],
            options={
                'verbose_name': 'Unit of Measure',
                'verbose_name_plural': 'Units of Measure',
                'ordering': ['category__name', 'name'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('factor', 0), _negated=True), name='product_uom_factor_gt_zero'),
                    models.CheckConstraint(condition=models.Q(('rounding__gt', 0)), name='product_uom_rounding_gt_zero'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ProductCategory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('category_type', models.CharField(choices=[('view', 'View'), ('normal', 'Normal')], default='normal', help_text='A view category cannot hold products, it only groups other categories', max_length=10, verbose_name='Category Type')),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='children', to='product.productcategory', verbose_name='Parent Category')),
            ],
            options={
                'verbose_name': 'Product Category',
                'verbose_name_plural': 'Product Categories',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Attribute',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Name')),
                ('sequence', models.PositiveIntegerField(default=0, help_text='Determine the display order', verbose_name='Sequence')),
                ('create_variant', models.BooleanField(default=True, help_text='Check this if you want to create multiple variants for this attribute.', verbose_name='Create Variants')),
            ],
            options={
                'verbose_name': 'Product Attribute',
                'verbose_name_plural': 'Product Attributes',
                'ordering': ['sequence', 'name'],
            },
        ),
        migrations.CreateModel(
            name='AttributeValue',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Value')),
                ('sequence', models.PositiveIntegerField(default=0, help_text='Determine the display order', verbose_name='Sequence')),
                ('attribute', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='values', to='product.attribute', verbose_name='Attribute')),
            ],
            options={
                'verbose_name': 'Attribute Value',
                'verbose_name_plural': 'Attribute Values',
                'ordering': ['sequence', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Pricelist',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Pricelist Name')),
                ('is_active', models.BooleanField(default=True, help_text='If unchecked, it will allow you to hide the pricelist without removing it.', verbose_name='Active')),
                ('sequence', models.PositiveIntegerField(default=apps.product.models.pricelist._default_sequence, verbose_name='Sequence')),
                ('company', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='pricelists', to='product.company', verbose_name='Company')),
                ('country_groups', models.ManyToManyField(blank=True, related_name='pricelists', to='product.countrygroup', verbose_name='Country Groups')),
                ('currency', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='pricelists', to='product.currency', verbose_name='Currency')),
            ],
            options={
                'verbose_name': 'Pricelist',
                'verbose_name_plural': 'Pricelists',
                'ordering': ['sequence', '-id'],
            },
        ),
        migrations.AddField(
            model_name='company',
            name='default_pricelist',
            field=models.ForeignKey(blank=True, help_text='Default pricelist for partners of this company', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='default_for_companies', to='product.pricelist', verbose_name='Default Pricelist'),
        ),
        migrations.CreateModel(
            name='Partner',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('is_supplier', models.BooleanField(default=False, verbose_name='Is a Vendor')),
                ('company', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='partners', to='product.company', verbose_name='Company')),
                ('country', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='partners', to='product.country', verbose_name='Country')),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='children', to='product.partner', verbose_name='Related Company')),
                ('pricelist', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='partners', to='product.pricelist', verbose_name='Stored Pricelist')),
            ],
            options={
                'verbose_name': 'Partner',
                'verbose_name_plural': 'Partners',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ProductTemplate',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(db_index=True, max_length=255, verbose_name='Name')),
                ('sequence', models.IntegerField(default=1, help_text='Gives the sequence order when displaying a product list', verbose_name='Sequence')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('description_sale', models.TextField(blank=True, help_text='Copied on sales orders and invoices', verbose_name='Sale Description')),
                ('description_purchase', models.TextField(blank=True, help_text='Copied on purchase orders and vendor bills', verbose_name='Purchase Description')),
                ('product_type', models.CharField(choices=[('consu', 'Consumable'), ('service', 'Service')], default='consu', max_length=10, verbose_name='Product Type')),
                ('rental', models.BooleanField(default=False, verbose_name='Can be Rent')),
                ('list_price', models.DecimalField(decimal_places=2, default=Decimal('1'), help_text='Base price to compute the customer price', max_digits=12, verbose_name='Sale Price')),
                ('sale_ok', models.BooleanField(default=True, verbose_name='Can be Sold')),
                ('purchase_ok', models.BooleanField(default=True, verbose_name='Can be Purchased')),
                ('color', models.PositiveIntegerField(default=0, verbose_name='Color Index')),
                ('is_active', models.BooleanField(default=True, help_text='If unchecked, it will allow you to hide the product without removing it.', verbose_name='Active')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='templates', to='product.productcategory', verbose_name='Internal Category')),
                ('company', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='templates', to='product.company', verbose_name='Company')),
                ('uom', models.ForeignKey(help_text='Default unit of measure used for all stock operations', on_delete=django.db.models.deletion.PROTECT, related_name='templates', to='product.uom', verbose_name='Unit of Measure')),
                ('uom_po', models.ForeignKey(blank=True, help_text='Default unit of measure used for purchase orders. It must be in the same category as the default unit of measure.', null=True, on_delete=django.db.models.deletion.PROTECT, related_name='purchase_templates', to='product.uom', verbose_name='Purchase Unit of Measure')),
            ],
            options={
                'verbose_name': 'Product Template',
                'verbose_name_plural': 'Product Templates',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('default_code', models.CharField(blank=True, db_index=True, max_length=100, verbose_name='Internal Reference')),
                ('barcode', models.CharField(blank=True, help_text='International Article Number used for product identification.', max_length=100, verbose_name='Barcode')),
                ('standard_price', models.DecimalField(decimal_places=2, default=Decimal('0'), help_text='Cost used for stock valuation and as a base price on purchase orders. Expressed in the default unit of measure of the product.', max_digits=12, verbose_name='Cost')),
                ('volume', models.DecimalField(decimal_places=4, default=Decimal('0'), help_text='The volume in m3.', max_digits=12, verbose_name='Volume')),
                ('weight', models.DecimalField(decimal_places=4, default=Decimal('0'), help_text='The weight of the contents in Kg, not including any packaging.', max_digits=12, verbose_name='Weight')),
                ('is_active', models.BooleanField(default=True, help_text='If unchecked, it will allow you to hide the product without removing it.', verbose_name='Active')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('attribute_values', models.ManyToManyField(blank=True, related_name='products', to='product.attributevalue', verbose_name='Attributes')),
                ('template', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='variants', to='product.producttemplate', verbose_name='Product Template')),
            ],
            options={
                'verbose_name': 'Product',
                'verbose_name_plural': 'Products',
                'ordering': ['default_code', 'id'],
            },
        ),
        migrations.CreateModel(
            name='AttributeLine',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('attribute', models.ForeignKey(on_delete=django.db.models.deletion.RESTRICT, related_name='lines', to='product.attribute', verbose_name='Attribute')),
                ('template', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attribute_lines', to='product.producttemplate', verbose_name='Product Template')),
                ('values', models.ManyToManyField(blank=True, related_name='lines', to='product.attributevalue', verbose_name='Attribute Values')),
            ],
            options={
                'verbose_name': 'Attribute Line',
                'verbose_name_plural': 'Attribute Lines',
                'ordering': ['attribute__sequence', 'id'],
                'unique_together': {('template', 'attribute')},
            },
        ),
        migrations.CreateModel(
            name='AttributePrice',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('price_extra', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12, verbose_name='Price Extra')),
                ('template', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attribute_prices', to='product.producttemplate', verbose_name='Product Template')),
                ('value', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='prices', to='product.attributevalue', verbose_name='Attribute Value')),
            ],
            options={
                'verbose_name': 'Attribute Price',
                'verbose_name_plural': 'Attribute Prices',
                'unique_together': {('template', 'value')},
            },
        ),
        migrations.CreateModel(
            name='PricelistItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('min_quantity', models.DecimalField(decimal_places=4, default=apps.product.models.pricelist._default_min_quantity, help_text='For the rule to apply, bought quantity must be greater than or equal to this minimum quantity, expressed in the default unit of the product.', max_digits=12, verbose_name='Min. Quantity')),
                ('applied_on', models.CharField(choices=[('3_global', 'Global'), ('2_product_category', 'Product Category'), ('1_product', 'Product'), ('0_product_variant', 'Product Variant')], default='3_global', max_length=20, verbose_name='Apply On')),
                ('sequence', models.IntegerField(default=5, verbose_name='Sequence')),
                ('base', models.CharField(choices=[('list_price', 'Public Price'), ('standard_price', 'Cost'), ('pricelist', 'Other Pricelist')], default='list_price', help_text='Base price for computation.', max_length=20, verbose_name='Based on')),
                ('price_surcharge', models.DecimalField(decimal_places=2, default=Decimal('0'), help_text='Amount added to the price after the discount and the rounding.', max_digits=12, verbose_name='Price Surcharge')),
                ('price_discount', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=7, verbose_name='Price Discount')),
                ('price_round', models.DecimalField(decimal_places=4, default=Decimal('0'), help_text='Price is rounded to this multiple. Rounding is applied after the discount and before the surcharge. To have prices ending in 9.99, set rounding 10, surcharge -0.01', max_digits=12, verbose_name='Price Rounding')),
                ('price_min_margin', models.DecimalField(blank=True, decimal_places=2, help_text='Minimal amount over the base price. Empty means no minimum.', max_digits=12, null=True, verbose_name='Min. Price Margin')),
                ('price_max_margin', models.DecimalField(blank=True, decimal_places=2, help_text='Maximal amount over the base price. Empty means no maximum.', max_digits=12, null=True, verbose_name='Max. Price Margin')),
                ('date_start', models.DateField(blank=True, help_text='Starting date for the pricelist item validation', null=True, verbose_name='Start Date')),
                ('date_end', models.DateField(blank=True, help_text='Ending valid for the pricelist item validation', null=True, verbose_name='End Date')),
                ('compute_price', models.CharField(choices=[('fixed', 'Fix Price'), ('percentage', 'Percentage (discount)'), ('formula', 'Formula')], default='fixed', max_length=20, verbose_name='Compute Price')),
                ('fixed_price', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12, verbose_name='Fixed Price')),
                ('percent_price', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=7, verbose_name='Percentage Price')),
                ('base_pricelist', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='dependent_items', to='product.pricelist', verbose_name='Other Pricelist')),
                ('category', models.ForeignKey(blank=True, help_text='Specify a category if this rule only applies to products of this category or its children categories.', null=True, on_delete=django.db.models.deletion.CASCADE, related_name='pricelist_items', to='product.productcategory', verbose_name='Product Category')),
                ('pricelist', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='product.pricelist', verbose_name='Pricelist')),
                ('product', models.ForeignKey(blank=True, help_text='Specify a product if this rule only applies to one product.', null=True, on_delete=django.db.models.deletion.CASCADE, related_name='variant_pricelist_items', to='product.product', verbose_name='Product')),
                ('template', models.ForeignKey(blank=True, help_text='Specify a template if this rule only applies to one product template.', null=True, on_delete=django.db.models.deletion.CASCADE, related_name='pricelist_items', to='product.producttemplate', verbose_name='Product Template')),
            ],
            options={
                'verbose_name': 'Pricelist Item',
                'verbose_name_plural': 'Pricelist Items',
                'ordering': ['applied_on', '-min_quantity', 'category__name', 'id'],
            },
        ),
        migrations.CreateModel(
            name='ProductPriceHistory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('datetime', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Date')),
                ('cost', models.DecimalField(decimal_places=2, max_digits=12, verbose_name='Cost')),
                ('company', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='product_price_history', to='product.company', verbose_name='Company')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='price_history', to='product.product', verbose_name='Product')),
            ],
            options={
                'verbose_name': 'Product Price History',
                'verbose_name_plural': 'Product Price History',
                'ordering': ['-datetime', '-id'],
            },
        ),
        migrations.CreateModel(
            name='SupplierInfo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_name', models.CharField(blank=True, help_text='Keep empty to use the internal one.', max_length=255, verbose_name='Vendor Product Name')),
                ('product_code', models.CharField(blank=True, help_text='Keep empty to use the internal one.', max_length=100, verbose_name='Vendor Product Code')),
                ('sequence', models.IntegerField(default=1, help_text='Assigns the priority to the list of product vendor.', verbose_name='Sequence')),
                ('min_qty', models.DecimalField(decimal_places=4, default=Decimal('0'), help_text='Expressed in the purchase unit of measure of the product.', max_digits=12, verbose_name='Minimal Quantity')),
                ('price', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12, verbose_name='Price')),
                ('date_start', models.DateField(blank=True, null=True, verbose_name='Start Date')),
                ('date_end', models.DateField(blank=True, null=True, verbose_name='End Date')),
                ('delay', models.PositiveIntegerField(default=1, help_text='Lead time in days between the purchase order confirmation and the receipt.', verbose_name='Delivery Lead Time')),
                ('company', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='supplier_infos', to='product.company', verbose_name='Company')),
                ('currency', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='supplier_infos', to='product.currency', verbose_name='Currency')),
                ('partner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='supplied_products', to='product.partner', verbose_name='Vendor')),
                ('product', models.ForeignKey(blank=True, help_text='When this field is filled in, the vendor data will only apply to the variant.', null=True, on_delete=django.db.models.deletion.RESTRICT, related_name='variant_sellers', to='product.product', verbose_name='Product Variant')),
                ('template', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sellers', to='product.producttemplate', verbose_name='Product Template')),
            ],
            options={
                'verbose_name': 'Vendor Pricelist',
                'verbose_name_plural': 'Vendor Pricelists',
                'ordering': ['sequence', '-min_qty', 'price', 'id'],
            },
        ),
        migrations.CreateModel(
            name='ProductPackaging',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Packaging Type')),
                ('sequence', models.IntegerField(default=1, help_text='The first in the sequence is the default one.', verbose_name='Sequence')),
                ('qty', models.DecimalField(decimal_places=4, default=Decimal('0'), help_text='The total number of products you can have per pallet or box.', max_digits=12, verbose_name='Quantity per Package')),
                ('template', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='packagings', to='product.producttemplate', verbose_name='Product Template')),
            ],
            options={
                'verbose_name': 'Product Packaging',
                'verbose_name_plural': 'Product Packagings',
                'ordering': ['sequence', 'id'],
            },
        ),
        migrations.CreateModel(
            name='HistoricalProductTemplate',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('name', models.CharField(db_index=True, max_length=255, verbose_name='Name')),
                ('sequence', models.IntegerField(default=1, help_text='Gives the sequence order when displaying a product list', verbose_name='Sequence')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('description_sale', models.TextField(blank=True, help_text='Copied on sales orders and invoices', verbose_name='Sale Description')),
                ('description_purchase', models.TextField(blank=True, help_text='Copied on purchase orders and vendor bills', verbose_name='Purchase Description')),
                ('product_type', models.CharField(choices=[('consu', 'Consumable'), ('service', 'Service')], default='consu', max_length=10, verbose_name='Product Type')),
                ('rental', models.BooleanField(default=False, verbose_name='Can be Rent')),
                ('list_price', models.DecimalField(decimal_places=2, default=Decimal('1'), help_text='Base price to compute the customer price', max_digits=12, verbose_name='Sale Price')),
                ('sale_ok', models.BooleanField(default=True, verbose_name='Can be Sold')),
                ('purchase_ok', models.BooleanField(default=True, verbose_name='Can be Purchased')),
                ('color', models.PositiveIntegerField(default=0, verbose_name='Color Index')),
                ('is_active', models.BooleanField(default=True, help_text='If unchecked, it will allow you to hide the product without removing it.', verbose_name='Active')),
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Updated at')),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField(db_index=True)),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('category', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='product.productcategory', verbose_name='Internal Category')),
                ('company', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='product.company', verbose_name='Company')),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('uom', models.ForeignKey(blank=True, db_constraint=False, help_text='Default unit of measure used for all stock operations', null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='product.uom', verbose_name='Unit of Measure')),
                ('uom_po', models.ForeignKey(blank=True, db_constraint=False, help_text='Default unit of measure used for purchase orders. It must be in the same category as the default unit of measure.', null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='product.uom', verbose_name='Purchase Unit of Measure')),
            ],
            options={
                'verbose_name': 'historical Product Template',
                'verbose_name_plural': 'historical Product Templates',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='HistoricalPricelistItem',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('min_quantity', models.DecimalField(decimal_places=4, default=apps.product.models.pricelist._default_min_quantity, help_text='For the rule to apply, bought quantity must be greater than or equal to this minimum quantity, expressed in the default unit of the product.', max_digits=12, verbose_name='Min. Quantity')),
                ('applied_on', models.CharField(choices=[('3_global', 'Global'), ('2_product_category', 'Product Category'), ('1_product', 'Product'), ('0_product_variant', 'Product Variant')], default='3_global', max_length=20, verbose_name='Apply On')),
                ('sequence', models.IntegerField(default=5, verbose_name='Sequence')),
                ('base', models.CharField(choices=[('list_price', 'Public Price'), ('standard_price', 'Cost'), ('pricelist', 'Other Pricelist')], default='list_price', help_text='Base price for computation.', max_length=20, verbose_name='Based on')),
                ('price_surcharge', models.DecimalField(decimal_places=2, default=Decimal('0'), help_text='Amount added to the price after the discount and the rounding.', max_digits=12, verbose_name='Price Surcharge')),
                ('price_discount', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=7, verbose_name='Price Discount')),
                ('price_round', models.DecimalField(decimal_places=4, default=Decimal('0'), help_text='Price is rounded to this multiple. Rounding is applied after the discount and before the surcharge. To have prices ending in 9.99, set rounding 10, surcharge -0.01', max_digits=12, verbose_name='Price Rounding')),
                ('price_min_margin', models.DecimalField(blank=True, decimal_places=2, help_text='Minimal amount over the base price. Empty means no minimum.', max_digits=12, null=True, verbose_name='Min. Price Margin')),
                ('price_max_margin', models.DecimalField(blank=True, decimal_places=2, help_text='Maximal amount over the base price. Empty means no maximum.', max_digits=12, null=True, verbose_name='Max. Price Margin')),
                ('date_start', models.DateField(blank=True, help_text='Starting date for the pricelist item validation', null=True, verbose_name='Start Date')),
                ('date_end', models.DateField(blank=True, help_text='Ending valid for the pricelist item validation', null=True, verbose_name='End Date')),
                ('compute_price', models.CharField(choices=[('fixed', 'Fix Price'), ('percentage', 'Percentage (discount)'), ('formula', 'Formula')], default='fixed', max_length=20, verbose_name='Compute Price')),
                ('fixed_price', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12, verbose_name='Fixed Price')),
                ('percent_price', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=7, verbose_name='Percentage Price')),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField(db_index=True)),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('base_pricelist', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='product.pricelist', verbose_name='Other Pricelist')),
                ('category', models.ForeignKey(blank=True, db_constraint=False, help_text='Specify a category if this rule only applies to products of this category or its children categories.', null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='product.productcategory', verbose_name='Product Category')),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('pricelist', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='product.pricelist', verbose_name='Pricelist')),
                ('product', models.ForeignKey(blank=True, db_constraint=False, help_text='Specify a product if this rule only applies to one product.', null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='product.product', verbose_name='Product')),
                ('template', models.ForeignKey(blank=True, db_constraint=False, help_text='Specify a template if this rule only applies to one product template.', null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='product.producttemplate', verbose_name='Product Template')),
            ],
            options={
                'verbose_name': 'historical Pricelist Item',
                'verbose_name_plural': 'historical Pricelist Items',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
