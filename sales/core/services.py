"""
Writing and copying document trees (header → items → details, remarks).

Callers run these inside a transaction; nothing here commits on its own.
"""
from decimal import Decimal

from sales.core.base_models import DocumentHeader


def write_children(document: DocumentHeader, items, remarks):
    """
    Create items, details and remarks from validated input and recalculate
    totals. The input dicts are not modified, so a retried create can pass
    the same data again.
    """
    for item_data in items:
        item = document.items.create(product_name=item_data['product_name'])
        for detail_data in item_data.get('details') or []:
            detail = item.details.model(
                item=item,
                detail=detail_data.get('detail', ''),
                unit_price=detail_data.get('unit_price', Decimal('0.00')),
                qty=detail_data.get('qty', Decimal('0.000')),
            )
            detail.calculate_amount()
            detail.save()

    for remark_data in remarks:
        document.remarks.create(
            text=remark_data['text'],
            is_completed=remark_data.get('is_completed', False),
        )

    document.calculate_totals()
    document.save()


def replace_children(document: DocumentHeader, items=None, remarks=None):
    """Replace-all update: None leaves a collection untouched."""
    if items is not None:
        document.items.all().delete()
    if remarks is not None:
        document.remarks.all().delete()
    write_children(document, items or [], remarks or [])


def copy_children(source: DocumentHeader, target: DocumentHeader):
    """
    Deep-copy items, details and remarks from source to target.

    Totals and amounts are copied as stored, never recalculated.
    """
    for item in source.items.all():
        new_item = target.items.create(product_name=item.product_name, total=item.total)
        for detail in item.details.all():
            new_item.details.create(
                detail=detail.detail,
                unit_price=detail.unit_price,
                qty=detail.qty,
                amount=detail.amount,
            )

    for remark in source.remarks.all():
        target.remarks.create(text=remark.text, is_completed=remark.is_completed)
