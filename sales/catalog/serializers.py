"""
Serializers for the product catalog.
"""
from rest_framework import serializers
from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    """
    Full serializer for Product.
    Used for create, update, and detail views.
    """
    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'description',
            'is_active',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_name(self, value):
        """Names are column headers in the quotation sheet, compare them case-insensitively"""
        value = value.strip()
        existing = Product.objects.filter(name__iexact=value)
        if self.instance:
            existing = existing.exclude(pk=self.instance.pk)
        if existing.exists():
            raise serializers.ValidationError('A product with this name already exists.')
        return value


class ProductListSerializer(serializers.ModelSerializer):
    """
    Lightweight serializer for listing products.
    """
    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'is_active',
        ]
