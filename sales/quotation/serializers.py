"""
Quotation Serializers

Same layout as the planning serializers: a write serializer that only
validates, a full read serializer and a summary serializer for lists.
"""
from rest_framework import serializers

from sales.core.serializers import DocumentWriteSerializer, HEADER_FIELDS
from sales.quotation.models import Quotation, QuotationItem, QuotationItemDetail, QuotationRemark


class QuotationItemDetailSerializer(serializers.ModelSerializer):
    class Meta:
        model = QuotationItemDetail
        fields = ['id', 'detail', 'unit_price', 'qty', 'amount']
        read_only_fields = fields


class QuotationItemSerializer(serializers.ModelSerializer):
    details = QuotationItemDetailSerializer(many=True, read_only=True)

    class Meta:
        model = QuotationItem
        fields = ['id', 'product_name', 'total', 'details']
        read_only_fields = fields


class QuotationRemarkSerializer(serializers.ModelSerializer):
    class Meta:
        model = QuotationRemark
        fields = ['id', 'text', 'is_completed', 'created_at']
        read_only_fields = fields


class QuotationWriteSerializer(DocumentWriteSerializer):
    """Serializer for creating and updating quotations"""

    class Meta:
        model = Quotation
        fields = HEADER_FIELDS + ['items', 'remarks']


class QuotationSerializer(serializers.ModelSerializer):
    """Detailed serializer for a quotation with all related data"""

    status_display = serializers.CharField(source='get_status_display', read_only=True)
    items = QuotationItemSerializer(many=True, read_only=True)
    remarks = QuotationRemarkSerializer(many=True, read_only=True)

    class Meta:
        model = Quotation
        fields = (
            ['id', 'quotation_id']
            + HEADER_FIELDS
            + ['status_display', 'total_amount', 'items', 'remarks', 'created_at', 'updated_at']
        )
        read_only_fields = fields


class QuotationListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for listing quotations"""

    class Meta:
        model = Quotation
        fields = [
            'id', 'quotation_id', 'project_name', 'bill_to',
            'production_date', 'status', 'total_amount', 'created_at'
        ]
        read_only_fields = fields
