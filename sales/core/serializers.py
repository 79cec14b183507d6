"""
Input serializers shared by planning and quotation documents.

They only validate. Writing the document tree (and computing detail
amounts, item totals and the header total) is done by the services.
"""
from decimal import Decimal

from rest_framework import serializers

from sales.core.constants import PPH_RATES


# Writable header fields, in form order
HEADER_FIELDS = [
    'project_name',
    'company_name', 'company_address', 'company_city', 'company_province',
    'company_telp', 'company_email',
    'production_date', 'bill_to', 'notes',
    'billing_name', 'billing_bank_name', 'billing_bank_account',
    'billing_bank_account_name', 'billing_ktp', 'billing_npwp',
    'signature_name', 'signature_role', 'signature_image_data',
    'pph', 'status',
]


class ItemDetailInputSerializer(serializers.Serializer):
    detail = serializers.CharField(required=False, allow_blank=True, default='')
    unit_price = serializers.DecimalField(max_digits=15, decimal_places=2, min_value=Decimal('0'))
    qty = serializers.DecimalField(max_digits=15, decimal_places=3, min_value=Decimal('0'))


class ItemInputSerializer(serializers.Serializer):
    product_name = serializers.CharField(max_length=255)
    details = ItemDetailInputSerializer(many=True, required=False, default=list)


class RemarkInputSerializer(serializers.Serializer):
    text = serializers.CharField()
    is_completed = serializers.BooleanField(required=False, default=False)


class DocumentWriteSerializer(serializers.ModelSerializer):
    """
    Base for PlanningWriteSerializer / QuotationWriteSerializer.

    Example Request Body:
    {
        "project_name": "Wedding Decoration",
        "bill_to": "PT Maju Jaya",
        "production_date": "2024-05-10",
        "pph": "2",
        "status": "pending",
        "items": [
            {
                "product_name": "Backdrop",
                "details": [
                    {"detail": "Main stage", "unit_price": "1500000", "qty": "1"}
                ]
            }
        ],
        "remarks": [{"text": "Confirm venue size", "is_completed": false}]
    }
    """
    items = ItemInputSerializer(many=True, required=False)
    remarks = RemarkInputSerializer(many=True, required=False)

    def validate_pph(self, value):
        if Decimal(value) not in PPH_RATES:
            raise serializers.ValidationError(f"Unsupported PPh rate '{value}'")
        return value
