"""
Planning Views - API Endpoints for Planning Operations

Thin wrappers: validation lives in the serializers, business logic in
PlanningService.
"""
import logging

from rest_framework.decorators import api_view
from rest_framework import status
from django.shortcuts import get_object_or_404
from django.db.models import Q

from planning_project.response_formatter import success_response, error_response
from planning_project.pagination import auto_paginate

from sales.planning.models import Planning
from sales.planning.serializers import (
    PlanningWriteSerializer,
    PlanningSerializer,
    PlanningListSerializer,
)
from sales.planning.services import PlanningService, planning_tree

logger = logging.getLogger(__name__)


@api_view(['GET', 'POST'])
@auto_paginate
def planning_list(request):
    """
    GET: List plannings with optional filtering
    POST: Create a planning with items and remarks

    Query Parameters for GET:
    - status: Filter by status (draft, pending, accepted, rejected)
    - year: Filter by production date year
    - search: Search in planning id, project name, company, bill to
    """
    if request.method == 'GET':
        queryset = Planning.objects.all().order_by('-created_at')

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
                Q(planning_id__icontains=search) |
                Q(project_name__icontains=search) |
                Q(company_name__icontains=search) |
                Q(bill_to__icontains=search)
            )

        serializer = PlanningListSerializer(queryset, many=True)
        return success_response(
            data=serializer.data,
            message="Plannings retrieved successfully"
        )

    serializer = PlanningWriteSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response(
            message="Invalid data provided",
            data=serializer.errors,
            status_code=status.HTTP_400_BAD_REQUEST
        )
    try:
        planning = PlanningService.create(serializer.validated_data)
    except Exception:
        logger.exception("Error creating planning")
        return error_response(
            message="Failed to create planning",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return success_response(
        data=PlanningSerializer(planning_tree().get(pk=planning.pk)).data,
        message="Planning created successfully",
        status_code=status.HTTP_201_CREATED
    )


@api_view(['GET', 'PUT', 'DELETE'])
def planning_detail(request, pk):
    """
    GET: Retrieve a planning with items and remarks
    PUT: Update a planning (items/remarks, when sent, replace the existing ones)
    DELETE: Delete a planning and everything it owns
    """
    planning = get_object_or_404(Planning, pk=pk)

    if request.method == 'GET':
        return success_response(
            data=PlanningSerializer(planning_tree().get(pk=pk)).data,
            message="Planning retrieved successfully"
        )

    if request.method == 'PUT':
        serializer = PlanningWriteSerializer(planning, data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response(
                message="Invalid data provided",
                data=serializer.errors,
                status_code=status.HTTP_400_BAD_REQUEST
            )
        PlanningService.update(planning, serializer.validated_data)
        return success_response(
            data=PlanningSerializer(planning_tree().get(pk=pk)).data,
            message="Planning updated successfully"
        )

    planning.delete()
    return success_response(
        message="Planning deleted successfully",
        status_code=status.HTTP_204_NO_CONTENT
    )


@api_view(['POST'])
def planning_copy(request, pk):
    """
    POST /api/planning/{pk}/copy/
    - Duplicates the planning with a new id, " - Copy" name suffix and draft status
    - 201 with the copied planning, 404 if the source does not exist
    """
    try:
        copied = PlanningService.copy(pk)
    except Planning.DoesNotExist:
        return error_response(
            message="Planning not found",
            status_code=status.HTTP_404_NOT_FOUND
        )
    except Exception:
        logger.exception(f"Error copying planning {pk}")
        return error_response(
            message="Failed to copy planning",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return success_response(
        data=PlanningSerializer(copied).data,
        message="Planning copied successfully",
        status_code=status.HTTP_201_CREATED
    )
