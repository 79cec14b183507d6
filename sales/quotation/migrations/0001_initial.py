from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Quotation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('project_name', models.CharField(max_length=255)),
                ('company_name', models.CharField(blank=True, default='', max_length=255)),
                ('company_address', models.TextField(blank=True, default='')),
                ('company_city', models.CharField(blank=True, default='', max_length=100)),
                ('company_province', models.CharField(blank=True, default='', max_length=100)),
                ('company_telp', models.CharField(blank=True, default='', max_length=50)),
                ('company_email', models.EmailField(blank=True, default='', max_length=200)),
                ('production_date', models.DateField()),
                ('bill_to', models.CharField(blank=True, default='', max_length=255)),
                ('notes', models.TextField(blank=True, default='')),
                ('billing_name', models.CharField(blank=True, default='', max_length=255)),
                ('billing_bank_name', models.CharField(blank=True, default='', max_length=255)),
                ('billing_bank_account', models.CharField(blank=True, default='', max_length=100)),
                ('billing_bank_account_name', models.CharField(blank=True, default='', max_length=255)),
                ('billing_ktp', models.CharField(blank=True, default='', max_length=50)),
                ('billing_npwp', models.CharField(blank=True, default='', max_length=50)),
                ('signature_name', models.CharField(blank=True, default='', max_length=255)),
                ('signature_role', models.CharField(blank=True, default='', max_length=255)),
                ('signature_image_data', models.TextField(blank=True, default='', help_text='Base64 encoded image')),
                ('pph', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='PPh rate in percent', max_digits=5)),
                ('total_amount', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='Total after PPh', max_digits=15)),
                ('status', models.CharField(choices=[('draft', 'Draft'), ('pending', 'Pending'), ('accepted', 'Accepted'), ('rejected', 'Rejected')], db_index=True, default='draft', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('quotation_id', models.CharField(db_index=True, max_length=20, unique=True)),
            ],
            options={
                'db_table': 'quotation',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['production_date'], name='quotation_prod_date_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='QuotationItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_name', models.CharField(help_text='Product name as listed in the catalog', max_length=255)),
                ('total', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=15)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('quotation', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='quotation.quotation')),
            ],
            options={
                'db_table': 'quotation_item',
                'ordering': ['quotation', 'id'],
            },
        ),
        migrations.CreateModel(
            name='QuotationItemDetail',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('detail', models.TextField(blank=True, default='')),
                ('unit_price', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=15)),
                ('qty', models.DecimalField(decimal_places=3, default=Decimal('0.000'), max_digits=15)),
                ('amount', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=15)),
                ('item', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='details', to='quotation.quotationitem')),
            ],
            options={
                'db_table': 'quotation_item_detail',
                'ordering': ['item', 'id'],
            },
        ),
        migrations.CreateModel(
            name='QuotationRemark',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('text', models.TextField()),
                ('is_completed', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('quotation', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='remarks', to='quotation.quotation')),
            ],
            options={
                'db_table': 'quotation_remark',
                'ordering': ['quotation', 'id'],
            },
        ),
    ]
