from django.db import models

from sales.core.base_models import (
    DocumentHeader,
    DocumentItem,
    DocumentItemDetail,
    DocumentRemark,
)


"""Planning header - one production plan, identified by PLN-YYYY-NNNN."""
class Planning(DocumentHeader):
    planning_id = models.CharField(max_length=20, unique=True, db_index=True)

    identifier_field = 'planning_id'

    class Meta:
        db_table = 'planning'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['production_date'], name='planning_prod_date_idx'),
        ]

    def __str__(self):
        return f"{self.planning_id} - {self.project_name} - {self.get_status_display()}"


class PlanningItem(DocumentItem):
    planning = models.ForeignKey(Planning, on_delete=models.CASCADE, related_name='items')

    class Meta:
        db_table = 'planning_item'
        ordering = ['planning', 'id']


class PlanningItemDetail(DocumentItemDetail):
    item = models.ForeignKey(PlanningItem, on_delete=models.CASCADE, related_name='details')

    class Meta:
        db_table = 'planning_item_detail'
        ordering = ['item', 'id']


class PlanningRemark(DocumentRemark):
    planning = models.ForeignKey(Planning, on_delete=models.CASCADE, related_name='remarks')

    class Meta:
        db_table = 'planning_remark'
        ordering = ['planning', 'id']
