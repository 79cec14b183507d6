from django.contrib import admin
from sales.core.identifiers import generate_quotation_id
from .models import Quotation, QuotationItem, QuotationRemark


class QuotationItemInline(admin.TabularInline):
    model = QuotationItem
    extra = 0
    readonly_fields = ['total']


class QuotationRemarkInline(admin.TabularInline):
    model = QuotationRemark
    extra = 0


@admin.register(Quotation)
class QuotationAdmin(admin.ModelAdmin):
    list_display = ['quotation_id', 'project_name', 'bill_to', 'production_date', 'status', 'total_amount']
    list_filter = ['status']
    search_fields = ['quotation_id', 'project_name', 'bill_to']
    readonly_fields = ['quotation_id', 'total_amount', 'created_at', 'updated_at']
    inlines = [QuotationItemInline, QuotationRemarkInline]

    def save_model(self, request, obj, form, change):
        if not obj.quotation_id:
            obj.quotation_id = generate_quotation_id()
        super().save_model(request, obj, form, change)
