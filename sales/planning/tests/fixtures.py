"""
Test fixtures and helper functions for planning and quotation tests.
"""
from datetime import date
from decimal import Decimal

from django.contrib.auth import get_user_model

from sales.planning.models import Planning

User = get_user_model()


def get_or_create_test_user(username='testuser', email='testuser@example.com'):
    """Get or create a test user for tests"""
    user, created = User.objects.get_or_create(
        username=username,
        defaults={'email': email}
    )
    if created:
        user.set_password('testpass123')
        user.save()
    return user


def header_values(**overrides):
    """Header fields shared by plannings and quotations"""
    values = {
        'project_name': 'Wedding Decoration',
        'company_name': 'CV Kreasi Dekor',
        'company_address': 'Jl. Merdeka 10',
        'company_city': 'Bandung',
        'company_province': 'Jawa Barat',
        'company_telp': '022-123456',
        'company_email': 'info@kreasidekor.example',
        'production_date': date(2024, 5, 10),
        'bill_to': 'PT Maju Jaya',
        'notes': 'Setup the day before',
        'billing_name': 'Budi Santoso',
        'billing_bank_name': 'BCA',
        'billing_bank_account': '1234567890',
        'billing_bank_account_name': 'Budi Santoso',
        'billing_ktp': '3273000000000001',
        'billing_npwp': '01.234.567.8-901.000',
        'signature_name': 'Budi Santoso',
        'signature_role': 'Director',
        'signature_image_data': 'data:image/png;base64,AAAA',
        'pph': Decimal('2.00'),
        'total_amount': Decimal('0.00'),
        'status': 'accepted',
    }
    values.update(overrides)
    return values


def fill_document(document, item_count=2, detail_count=2, remark_count=1):
    """
    Give a document `item_count` items with `detail_count` details each and
    `remark_count` remarks. Amounts are stored as given, not recalculated.
    """
    for i in range(1, item_count + 1):
        item = document.items.create(product_name=f"Product {i}", total=Decimal('0.00'))
        item_total = Decimal('0.00')
        for j in range(1, detail_count + 1):
            unit_price = Decimal('1000.00') * i
            qty = Decimal(j)
            amount = unit_price * qty
            item.details.create(
                detail=f"Detail {i}.{j}",
                unit_price=unit_price,
                qty=qty,
                amount=amount,
            )
            item_total += amount
        item.total = item_total
        item.save()

    for k in range(1, remark_count + 1):
        document.remarks.create(text=f"Remark {k}", is_completed=(k % 2 == 0))
    return document


def create_planning(planning_id='PLN-2024-0001', item_count=2, detail_count=2, remark_count=1, **overrides):
    """Create a planning with nested items, details and remarks"""
    planning = Planning.objects.create(planning_id=planning_id, **header_values(**overrides))
    return fill_document(planning, item_count, detail_count, remark_count)


def create_valid_planning_data(**overrides):
    """Valid planning payload for POST requests"""
    data = {
        'project_name': 'Corporate Gathering',
        'company_name': 'CV Kreasi Dekor',
        'production_date': '2024-08-17',
        'bill_to': 'PT Sinar Terang',
        'pph': '2',
        'status': 'draft',
        'items': [
            {
                'product_name': 'Backdrop',
                'details': [
                    {'detail': 'Main stage backdrop', 'unit_price': '1500000', 'qty': '1'},
                    {'detail': 'Side panels', 'unit_price': '250000', 'qty': '2'},
                ]
            },
            {
                'product_name': 'Lighting',
                'details': [
                    {'detail': 'Par LED', 'unit_price': '100000', 'qty': '10'},
                ]
            },
        ],
        'remarks': [
            {'text': 'Confirm venue size', 'is_completed': False},
        ],
    }
    data.update(overrides)
    return data
