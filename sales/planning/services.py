"""
Planning service: create, update and copy planning aggregates.
"""
import logging

from django.db import transaction

from sales.core.constants import STATUS_DRAFT
from sales.core.identifiers import create_with_unique_id, generate_planning_id
from sales.core.services import copy_children, replace_children, write_children
from sales.planning.models import Planning

logger = logging.getLogger(__name__)

COPY_SUFFIX = ' - Copy'


def planning_tree():
    """Queryset that loads a planning with items, details and remarks"""
    return Planning.objects.prefetch_related('items__details', 'remarks')


class PlanningService:
    """Service for Planning business logic"""

    @staticmethod
    def create(data) -> Planning:
        """
        Create a planning with its items, details and remarks.

        `data` is PlanningWriteSerializer.validated_data. The planning id is
        generated for the current year.
        """
        header = {k: v for k, v in data.items() if k not in ('items', 'remarks')}
        items = data.get('items') or []
        remarks = data.get('remarks') or []

        def create(planning_id):
            planning = Planning.objects.create(planning_id=planning_id, **header)
            write_children(planning, items, remarks)
            return planning

        planning = create_with_unique_id(generate_planning_id, create)
        logger.info(f"Created planning {planning.planning_id}")
        return planning

    @staticmethod
    @transaction.atomic
    def update(planning: Planning, data) -> Planning:
        """Update header fields; items/remarks, when given, replace the existing ones."""
        for field, value in data.items():
            if field not in ('items', 'remarks'):
                setattr(planning, field, value)
        planning.save()
        replace_children(planning, data.get('items'), data.get('remarks'))
        return planning

    @staticmethod
    def copy(planning_pk) -> Planning:
        """
        Duplicate a planning with all items, details and remarks.

        The copy gets a new id for the current year, " - Copy" appended to
        the project name and status draft; every other header field,
        item total and detail amount is copied as stored.

        Raises Planning.DoesNotExist if there is no planning with that pk.
        """
        original = planning_tree().get(pk=planning_pk)
        header = {field: getattr(original, field) for field in Planning.copyable_field_names()}

        def create(planning_id):
            copied = Planning.objects.create(
                planning_id=planning_id,
                project_name=f"{original.project_name}{COPY_SUFFIX}",
                status=STATUS_DRAFT,
                **header
            )
            copy_children(original, copied)
            return copied

        copied = create_with_unique_id(generate_planning_id, create)
        logger.info(f"Copied planning {original.planning_id} to {copied.planning_id}")
        return planning_tree().get(pk=copied.pk)
