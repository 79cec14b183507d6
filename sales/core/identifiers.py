"""
Human-readable document identifiers: {CODE}-{YEAR}-{NNNN}.

The next number is "highest stored identifier under the prefix + 1". The
highest one is found by sorting identifiers descending as strings, which is
only correct while every number has the same width, so the sequence stops at
9999 instead of growing a fifth digit.

Generation is read-then-write. Two concurrent creates can compute the same
identifier; the identifier columns are unique and create_with_unique_id()
retries on the resulting IntegrityError.
"""
import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from sales.core.constants import (
    ID_SEQUENCE_WIDTH,
    PLANNING_ID_CODE,
    QUOTATION_ID_CODE,
)
from sales.core.exceptions import IdentifierOverflowError

logger = logging.getLogger(__name__)

MAX_SEQUENCE = 10 ** ID_SEQUENCE_WIDTH - 1
CREATE_ATTEMPTS = 3


def document_prefix(code, year=None):
    """'PLN', 2024 -> 'PLN-2024-'"""
    if year is None:
        year = timezone.localdate().year
    return f"{code}-{year}-"


def parse_sequence_number(identifier):
    """Numeric segment after the second '-', or None when there is none."""
    if not identifier:
        return None
    try:
        return int(identifier.split('-')[2])
    except (ValueError, IndexError):
        return None


def generate_id(model, field_name, prefix):
    """Next identifier for `prefix` among `model.<field_name>` values."""
    last_identifier = (
        model.objects
        .filter(**{f"{field_name}__startswith": prefix})
        .order_by(f"-{field_name}")
        .values_list(field_name, flat=True)
        .first()
    )

    last_number = parse_sequence_number(last_identifier)
    if last_identifier and last_number is None:
        logger.warning(f"Could not parse sequence from '{last_identifier}', restarting at 1")
    next_number = 1 if last_number is None else last_number + 1

    if next_number > MAX_SEQUENCE:
        raise IdentifierOverflowError(prefix, next_number)

    return f"{prefix}{next_number:0{ID_SEQUENCE_WIDTH}d}"


def generate_planning_id(year=None):
    from sales.planning.models import Planning
    return generate_id(Planning, 'planning_id', document_prefix(PLANNING_ID_CODE, year))


def generate_quotation_id(year=None):
    from sales.quotation.models import Quotation
    return generate_id(Quotation, 'quotation_id', document_prefix(QUOTATION_ID_CODE, year))


def create_with_unique_id(generate, create, attempts=CREATE_ATTEMPTS):
    """
    Generate an identifier and run create(identifier) in its own savepoint.

    A unique-constraint violation means another request took the identifier
    in between; generate a fresh one and try again, up to `attempts` times.
    """
    for attempt in range(1, attempts + 1):
        identifier = generate()
        try:
            with transaction.atomic():
                return create(identifier)
        except IntegrityError:
            if attempt == attempts:
                raise
            logger.warning(f"Identifier {identifier} already taken, retrying ({attempt}/{attempts})")
