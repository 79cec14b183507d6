"""
Abstract building blocks for the planning and quotation documents.

Both documents share the same tree:

    Header (planning / quotation)
      ├── Item            product line, total = Σ detail amounts
      │     └── Detail    unit_price × qty = amount
      └── Remark          free text with a completion flag

Concrete apps subclass these and add the document identifier and the
foreign keys (related names: items, details, remarks).
"""
from decimal import Decimal

from django.db import models

from sales.core.constants import STATUS_CHOICES, STATUS_DRAFT


TWO_PLACES = Decimal('0.01')


class DocumentHeader(models.Model):
    # Project / company
    project_name = models.CharField(max_length=255)
    company_name = models.CharField(max_length=255, blank=True, default='')
    company_address = models.TextField(blank=True, default='')
    company_city = models.CharField(max_length=100, blank=True, default='')
    company_province = models.CharField(max_length=100, blank=True, default='')
    company_telp = models.CharField(max_length=50, blank=True, default='')
    company_email = models.EmailField(max_length=200, blank=True, default='')

    production_date = models.DateField()
    bill_to = models.CharField(max_length=255, blank=True, default='')
    notes = models.TextField(blank=True, default='')

    # Billing
    billing_name = models.CharField(max_length=255, blank=True, default='')
    billing_bank_name = models.CharField(max_length=255, blank=True, default='')
    billing_bank_account = models.CharField(max_length=100, blank=True, default='')
    billing_bank_account_name = models.CharField(max_length=255, blank=True, default='')
    billing_ktp = models.CharField(max_length=50, blank=True, default='')
    billing_npwp = models.CharField(max_length=50, blank=True, default='')

    # Signature
    signature_name = models.CharField(max_length=255, blank=True, default='')
    signature_role = models.CharField(max_length=255, blank=True, default='')
    signature_image_data = models.TextField(blank=True, default='', help_text="Base64 encoded image")

    # Amounts
    pph = models.DecimalField(max_digits=5, decimal_places=2, default=Decimal('0.00'), help_text="PPh rate in percent")
    total_amount = models.DecimalField(max_digits=15, decimal_places=2, default=Decimal('0.00'), help_text="Total after PPh")

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_DRAFT, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Set by subclasses: name of the human-readable identifier field, never copied
    identifier_field = None

    # Fields a copy never takes over from its source
    NON_COPYABLE_FIELDS = {'id', 'project_name', 'status', 'created_at', 'updated_at'}

    class Meta:
        abstract = True

    @classmethod
    def copyable_field_names(cls):
        """Scalar header fields that a copy takes over verbatim."""
        excluded = cls.NON_COPYABLE_FIELDS | {cls.identifier_field}
        return [
            field.name for field in cls._meta.concrete_fields
            if field.name not in excluded and not field.is_relation
        ]

    # ==================== CALCULATION FUNCTIONS ====================

    def get_subtotal(self):
        return sum((item.total for item in self.items.all()), Decimal('0.00'))

    def get_pph_amount(self, subtotal=None):
        if subtotal is None:
            subtotal = self.get_subtotal()
        return (subtotal * Decimal(self.pph) / Decimal('100')).quantize(TWO_PLACES)

    def calculate_totals(self):
        """Recalculate item totals from details and the header total after PPh."""
        for item in self.items.all():
            item.calculate_total()
            item.save(update_fields=['total'])
        subtotal = self.get_subtotal()
        self.total_amount = subtotal - self.get_pph_amount(subtotal)
        return {
            'subtotal': subtotal,
            'pph_amount': subtotal - self.total_amount,
            'total_amount': self.total_amount,
        }


class DocumentItem(models.Model):
    product_name = models.CharField(max_length=255, help_text="Product name as listed in the catalog")
    total = models.DecimalField(max_digits=15, decimal_places=2, default=Decimal('0.00'))

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True

    def __str__(self):
        return f"{self.product_name}: {self.total}"

    def calculate_total(self):
        self.total = sum((detail.amount for detail in self.details.all()), Decimal('0.00'))
        return self.total


class DocumentItemDetail(models.Model):
    detail = models.TextField(blank=True, default='')
    unit_price = models.DecimalField(max_digits=15, decimal_places=2, default=Decimal('0.00'))
    qty = models.DecimalField(max_digits=15, decimal_places=3, default=Decimal('0.000'))
    amount = models.DecimalField(max_digits=15, decimal_places=2, default=Decimal('0.00'))

    class Meta:
        abstract = True

    def __str__(self):
        return f"{self.detail} ({self.qty} x {self.unit_price})"

    def calculate_amount(self):
        """amount = unit_price × qty"""
        self.amount = (Decimal(self.unit_price) * Decimal(self.qty)).quantize(TWO_PLACES)
        return self.amount


class DocumentRemark(models.Model):
    text = models.TextField()
    is_completed = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True

    def __str__(self):
        return self.text
