from django.contrib import admin
from sales.core.identifiers import generate_planning_id
from .models import Planning, PlanningItem, PlanningRemark


class PlanningItemInline(admin.TabularInline):
    model = PlanningItem
    extra = 0
    readonly_fields = ['total']


class PlanningRemarkInline(admin.TabularInline):
    model = PlanningRemark
    extra = 0


@admin.register(Planning)
class PlanningAdmin(admin.ModelAdmin):
    list_display = ['planning_id', 'project_name', 'bill_to', 'production_date', 'status', 'total_amount']
    list_filter = ['status']
    search_fields = ['planning_id', 'project_name', 'bill_to']
    readonly_fields = ['planning_id', 'total_amount', 'created_at', 'updated_at']
    inlines = [PlanningItemInline, PlanningRemarkInline]

    def save_model(self, request, obj, form, change):
        if not obj.planning_id:
            obj.planning_id = generate_planning_id()
        super().save_model(request, obj, form, change)
