from django.db import models

from sales.core.base_models import (
    DocumentHeader,
    DocumentItem,
    DocumentItemDetail,
    DocumentRemark,
)


"""Quotation header - one customer quote, identified by QTN-YYYY-NNNN."""
class Quotation(DocumentHeader):
    quotation_id = models.CharField(max_length=20, unique=True, db_index=True)

    identifier_field = 'quotation_id'

    class Meta:
        db_table = 'quotation'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['production_date'], name='quotation_prod_date_idx'),
        ]

    def __str__(self):
        return f"{self.quotation_id} - {self.project_name} - {self.get_status_display()}"


class QuotationItem(DocumentItem):
    quotation = models.ForeignKey(Quotation, on_delete=models.CASCADE, related_name='items')

    class Meta:
        db_table = 'quotation_item'
        ordering = ['quotation', 'id']


class QuotationItemDetail(DocumentItemDetail):
    item = models.ForeignKey(QuotationItem, on_delete=models.CASCADE, related_name='details')

    class Meta:
        db_table = 'quotation_item_detail'
        ordering = ['item', 'id']


class QuotationRemark(DocumentRemark):
    quotation = models.ForeignKey(Quotation, on_delete=models.CASCADE, related_name='remarks')

    class Meta:
        db_table = 'quotation_remark'
        ordering = ['quotation', 'id']
