"""
Quotation Views - API Endpoints for Quotation Operations

Create and update trigger a Google Sheets sync after commit; /sync/ runs it
on demand and /export/ downloads the same log as an Excel file.
"""
import logging

from rest_framework.decorators import api_view
from rest_framework import status
from django.shortcuts import get_object_or_404
from django.db.models import Q
from django.utils import timezone

from planning_project.response_formatter import success_response, error_response
from planning_project.pagination import auto_paginate

from sales.catalog.models import Product
from sales.core.constants import SHEET_LOGGED_STATUSES
from sales.quotation.excel_utils import export_quotations_to_excel
from sales.quotation.models import Quotation
from sales.quotation.serializers import (
    QuotationWriteSerializer,
    QuotationSerializer,
    QuotationListSerializer,
)
from sales.quotation.services import QuotationService, quotation_tree, sync_quotation_to_sheet

logger = logging.getLogger(__name__)


@api_view(['GET', 'POST'])
@auto_paginate
def quotation_list(request):
    """
    GET: List quotations with optional filtering
    POST: Create a quotation with items and remarks

    Query Parameters for GET:
    - status: Filter by status
    - year: Filter by production date year
    - search: Search in quotation id, project name, bill to
    """
    if request.method == 'GET':
        queryset = Quotation.objects.all().order_by('-created_at')

        status_filter = request.query_params.get('status')
        if status_filter:
            queryset = queryset.filter(status=status_filter)

        year = request.query_params.get('year')
        if year:
            if not year.isdigit():
                return error_response(
                    message="year must be a number",
                    status_code=status.HTTP_400_BAD_REQUEST
                )
            queryset = queryset.filter(production_date__year=int(year))

        search = request.query_params.get('search')
        if search:
            queryset = queryset.filter(
                Q(quotation_id__icontains=search) |
                Q(project_name__icontains=search) |
                Q(bill_to__icontains=search)
            )

        serializer = QuotationListSerializer(queryset, many=True)
        return success_response(
            data=serializer.data,
            message="Quotations retrieved successfully"
        )

    serializer = QuotationWriteSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response(
            message="Invalid data provided",
            data=serializer.errors,
            status_code=status.HTTP_400_BAD_REQUEST
        )
    try:
        quotation = QuotationService.create(serializer.validated_data)
    except Exception:
        logger.exception("Error creating quotation")
        return error_response(
            message="Failed to create quotation",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return success_response(
        data=QuotationSerializer(quotation_tree().get(pk=quotation.pk)).data,
        message="Quotation created successfully",
        status_code=status.HTTP_201_CREATED
    )


@api_view(['GET', 'PUT', 'DELETE'])
def quotation_detail(request, pk):
    """
    GET: Retrieve a quotation with items and remarks
    PUT: Update a quotation (items/remarks, when sent, replace the existing ones;
    a production date moved to another year leaves the old sheet row in place)
    DELETE: Delete a quotation (its sheet row is left in place)
    """
    quotation = get_object_or_404(Quotation, pk=pk)

    if request.method == 'GET':
        return success_response(
            data=QuotationSerializer(quotation_tree().get(pk=pk)).data,
            message="Quotation retrieved successfully"
        )

    if request.method == 'PUT':
        serializer = QuotationWriteSerializer(quotation, data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response(
                message="Invalid data provided",
                data=serializer.errors,
                status_code=status.HTTP_400_BAD_REQUEST
            )
        QuotationService.update(quotation, serializer.validated_data)
        return success_response(
            data=QuotationSerializer(quotation_tree().get(pk=pk)).data,
            message="Quotation updated successfully"
        )

    quotation.delete()
    return success_response(
        message="Quotation deleted successfully",
        status_code=status.HTTP_204_NO_CONTENT
    )


@api_view(['POST'])
def quotation_sync(request, pk):
    """
    POST /api/quotation/{pk}/sync/
    - Writes the quotation to the Google Sheets log now
    - data.synced is false when the status is not logged, the sheet is not
      configured or the Sheets API failed (see server log)
    """
    quotation = get_object_or_404(Quotation, pk=pk)
    synced = sync_quotation_to_sheet(quotation.pk)
    return success_response(
        data={'quotation_id': quotation.quotation_id, 'synced': synced},
        message="Quotation logged to Google Sheets" if synced else "Quotation not logged to Google Sheets"
    )


@api_view(['GET'])
def quotation_export(request):
    """
    GET /api/quotation/export/?year=YYYY
    - Excel file laid out like the "Quotation {year}" sheet, pending and
      accepted quotations only. Defaults to the current year.
    """
    year = request.query_params.get('year') or str(timezone.localdate().year)
    if not year.isdigit():
        return error_response(
            message="year must be a number",
            status_code=status.HTTP_400_BAD_REQUEST
        )

    quotations = (
        quotation_tree()
        .filter(production_date__year=int(year), status__in=SHEET_LOGGED_STATUSES)
        .order_by('quotation_id')
    )
    return export_quotations_to_excel(quotations, int(year), Product.get_all_names())
