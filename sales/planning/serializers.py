"""
Planning Serializers

Write: PlanningWriteSerializer validates header + nested items/remarks.
Read: PlanningSerializer returns the whole aggregate, PlanningListSerializer
a summary row.
"""
from rest_framework import serializers

from sales.core.serializers import DocumentWriteSerializer, HEADER_FIELDS
from sales.planning.models import Planning, PlanningItem, PlanningItemDetail, PlanningRemark


# ==================== NESTED SERIALIZERS ====================

class PlanningItemDetailSerializer(serializers.ModelSerializer):
    class Meta:
        model = PlanningItemDetail
        fields = ['id', 'detail', 'unit_price', 'qty', 'amount']
        read_only_fields = fields


class PlanningItemSerializer(serializers.ModelSerializer):
    details = PlanningItemDetailSerializer(many=True, read_only=True)

    class Meta:
        model = PlanningItem
        fields = ['id', 'product_name', 'total', 'details']
        read_only_fields = fields


class PlanningRemarkSerializer(serializers.ModelSerializer):
    class Meta:
        model = PlanningRemark
        fields = ['id', 'text', 'is_completed', 'created_at']
        read_only_fields = fields


# ==================== PLANNING SERIALIZERS ====================

class PlanningWriteSerializer(DocumentWriteSerializer):
    """Serializer for creating and updating plannings"""

    class Meta:
        model = Planning
        fields = HEADER_FIELDS + ['items', 'remarks']


class PlanningSerializer(serializers.ModelSerializer):
    """Detailed serializer for a planning with all related data"""

    status_display = serializers.CharField(source='get_status_display', read_only=True)
    items = PlanningItemSerializer(many=True, read_only=True)
    remarks = PlanningRemarkSerializer(many=True, read_only=True)

    class Meta:
        model = Planning
        fields = (
            ['id', 'planning_id']
            + HEADER_FIELDS
            + ['status_display', 'total_amount', 'items', 'remarks', 'created_at', 'updated_at']
        )
        read_only_fields = fields


class PlanningListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for listing plannings"""

    item_count = serializers.SerializerMethodField(read_only=True)

    class Meta:
        model = Planning
        fields = [
            'id', 'planning_id', 'project_name', 'company_name', 'bill_to',
            'production_date', 'status', 'total_amount', 'item_count', 'created_at'
        ]
        read_only_fields = fields

    def get_item_count(self, obj):
        """Get number of items"""
        return obj.items.count()
