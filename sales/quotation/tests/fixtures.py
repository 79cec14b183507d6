"""
Quotation fixtures, built on the shared document helpers of the planning tests.
"""
from decimal import Decimal

from sales.quotation.models import Quotation
from sales.planning.tests.fixtures import (  # noqa: F401
    get_or_create_test_user,
    header_values,
    fill_document,
    create_valid_planning_data,
)


def create_quotation(quotation_id='QTN-2024-0001', item_count=2, detail_count=2, remark_count=1, **overrides):
    """Create a quotation with nested items, details and remarks"""
    quotation = Quotation.objects.create(quotation_id=quotation_id, **header_values(**overrides))
    return fill_document(quotation, item_count, detail_count, remark_count)


def create_quotation_with_items(quotation_id, items, **overrides):
    """
    Create a quotation whose items are given as (product_name, total) pairs.
    total_amount is the plain sum unless overridden.
    """
    values = {'total_amount': sum((Decimal(total) for _, total in items), Decimal('0.00'))}
    values.update(overrides)
    quotation = Quotation.objects.create(quotation_id=quotation_id, **header_values(**values))
    for product_name, total in items:
        quotation.items.create(product_name=product_name, total=Decimal(total))
    return quotation


def create_valid_quotation_data(**overrides):
    """Valid quotation payload for POST requests"""
    data = create_valid_planning_data(status='pending')
    data.update(overrides)
    return data
