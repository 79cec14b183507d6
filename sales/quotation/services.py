"""
Quotation service: create and update quotations, and mirror them to the
Google Sheets quotation log once the write is committed.
"""
import logging

from django.apps import apps
from django.db import transaction

from sales.core.identifiers import create_with_unique_id, generate_quotation_id
from sales.core.services import replace_children, write_children
from sales.quotation.models import Quotation

logger = logging.getLogger(__name__)


def quotation_tree():
    """Queryset that loads a quotation with items, details and remarks"""
    return Quotation.objects.prefetch_related('items__details', 'remarks')


def get_sheet_sync():
    """QuotationSheetSync built at startup, or None when not configured"""
    return apps.get_app_config('quotation').sheet_sync


def sync_quotation_to_sheet(quotation_pk) -> bool:
    """Mirror the stored quotation to the sheet. Never raises."""
    sheet_sync = get_sheet_sync()
    if sheet_sync is None:
        logger.warning("Google Sheets sync not configured, quotation not logged")
        return False

    try:
        quotation = quotation_tree().get(pk=quotation_pk)
    except Quotation.DoesNotExist:
        logger.warning(f"Quotation {quotation_pk} no longer exists, not logged")
        return False
    return sheet_sync.sync_quotation(quotation)


def schedule_sheet_sync(quotation: Quotation):
    """Sync after the surrounding transaction commits"""
    pk = quotation.pk
    transaction.on_commit(lambda: sync_quotation_to_sheet(pk))


class QuotationService:
    """Service for Quotation business logic"""

    @staticmethod
    def create(data) -> Quotation:
        """Create a quotation tree with a QTN id for the current year."""
        header = {k: v for k, v in data.items() if k not in ('items', 'remarks')}
        items = data.get('items') or []
        remarks = data.get('remarks') or []

        def create(quotation_id):
            quotation = Quotation.objects.create(quotation_id=quotation_id, **header)
            write_children(quotation, items, remarks)
            return quotation

        quotation = create_with_unique_id(generate_quotation_id, create)
        logger.info(f"Created quotation {quotation.quotation_id}")
        schedule_sheet_sync(quotation)
        return quotation

    @staticmethod
    @transaction.atomic
    def update(quotation: Quotation, data) -> Quotation:
        """
        Update header fields; items/remarks, when given, replace the existing ones.

        The sheet row is upserted in the tab of the new production year. When
        the year changes, the row in the previous year's tab is left in place.
        """
        for field, value in data.items():
            if field not in ('items', 'remarks'):
                setattr(quotation, field, value)
        quotation.save()
        replace_children(quotation, data.get('items'), data.get('remarks'))
        schedule_sheet_sync(quotation)
        return quotation
