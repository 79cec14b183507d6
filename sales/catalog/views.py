"""
API Views for the product catalog.
"""
from rest_framework.decorators import api_view
from rest_framework import status
from django.shortcuts import get_object_or_404
from django.db.models import Q
from django.core.exceptions import ValidationError as DjangoValidationError

from planning_project.pagination import auto_paginate
from planning_project.response_formatter import success_response, error_response

from .models import Product
from .serializers import ProductSerializer, ProductListSerializer


@api_view(['GET', 'POST'])
@auto_paginate
def product_list(request):
    """
    List all products or create a new one.

    GET /api/products/
    - Query params:
        - is_active: Filter by active status (true/false)
        - search: Search by name or description

    POST /api/products/
    - Create a new product
    """
    if request.method == 'GET':
        products = Product.objects.all()

        is_active = request.query_params.get('is_active')
        if is_active is not None:
            products = products.filter(is_active=is_active.lower() == 'true')

        search = request.query_params.get('search')
        if search:
            products = products.filter(
                Q(name__icontains=search) |
                Q(description__icontains=search)
            )

        serializer = ProductListSerializer(products, many=True)
        return success_response(
            data=serializer.data,
            message="Products retrieved successfully"
        )

    serializer = ProductSerializer(data=request.data)
    if serializer.is_valid():
        try:
            product = serializer.save()
        except DjangoValidationError as e:
            return error_response(
                message="Validation error",
                data=e.message_dict if hasattr(e, 'message_dict') else {'error': str(e)},
                status_code=status.HTTP_400_BAD_REQUEST
            )
        return success_response(
            data=ProductSerializer(product).data,
            message="Product created successfully",
            status_code=status.HTTP_201_CREATED
        )
    return error_response(
        message="Invalid data",
        data=serializer.errors,
        status_code=status.HTTP_400_BAD_REQUEST
    )


@api_view(['GET'])
def product_names(request):
    """
    GET /api/products/names/
    - Alphabetical product names, the dynamic columns of the quotation sheet
    """
    return success_response(
        data=Product.get_all_names(),
        message="Product names retrieved successfully"
    )


@api_view(['GET', 'PUT', 'DELETE'])
def product_detail(request, pk):
    """
    Retrieve, update or delete a product.

    PUT renames are allowed; items and sheet columns that use the old name keep it.
    """
    product = get_object_or_404(Product, pk=pk)

    if request.method == 'GET':
        return success_response(
            data=ProductSerializer(product).data,
            message="Product retrieved successfully"
        )

    if request.method == 'PUT':
        serializer = ProductSerializer(product, data=request.data, partial=True)
        if serializer.is_valid():
            try:
                updated = serializer.save()
            except DjangoValidationError as e:
                return error_response(
                    message="Validation error",
                    data=e.message_dict if hasattr(e, 'message_dict') else {'error': str(e)},
                    status_code=status.HTTP_400_BAD_REQUEST
                )
            return success_response(
                data=ProductSerializer(updated).data,
                message="Product updated successfully"
            )
        return error_response(
            message="Invalid data",
            data=serializer.errors,
            status_code=status.HTTP_400_BAD_REQUEST
        )

    product.delete()
    return success_response(
        message="Product deleted successfully",
        status_code=status.HTTP_204_NO_CONTENT
    )
