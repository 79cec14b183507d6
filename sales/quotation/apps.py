import atexit

from django.apps import AppConfig


class QuotationConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'sales.quotation'
    verbose_name = 'Quotation'

    # QuotationSheetSync, or None when Google Sheets is not configured
    sheet_sync = None

    def ready(self):
        from sales.integrations.google_sheets import build_sheet_sync

        self.sheet_sync = build_sheet_sync()
        if self.sheet_sync is not None:
            atexit.register(self.sheet_sync.close)
