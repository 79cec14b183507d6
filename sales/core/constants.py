"""
Shared choices for planning and quotation documents.
"""
from decimal import Decimal


# Document status
STATUS_DRAFT = 'draft'
STATUS_PENDING = 'pending'
STATUS_ACCEPTED = 'accepted'
STATUS_REJECTED = 'rejected'

STATUS_CHOICES = [
    (STATUS_DRAFT, 'Draft'),
    (STATUS_PENDING, 'Pending'),
    (STATUS_ACCEPTED, 'Accepted'),
    (STATUS_REJECTED, 'Rejected'),
]

# Only these statuses are written to the quotation spreadsheet
SHEET_LOGGED_STATUSES = (STATUS_PENDING, STATUS_ACCEPTED)


# PPh (Pajak Penghasilan) withholding rates in Indonesia
PPH_OPTIONS = [
    ('0', '0% - No PPh'),
    ('0.5', '0.5% - PPh Pasal 23'),
    ('1.5', '1.5% - PPh Pasal 23 (Jasa)'),
    ('2', '2% - PPh Pasal 23 (Rental/Sewa)'),
    ('2.5', '2.5% - PPh Pasal 21 (Non-NPWP)'),
    ('3', '3% - PPh Final Konstruksi'),
    ('4', '4% - PPh Final Konstruksi (NPWP)'),
    ('6', '6% - PPh Final Konstruksi (Non-NPWP)'),
    ('10', '10% - PPh Pasal 23 (Dividen)'),
    ('15', '15% - PPh Pasal 26 (Foreign)'),
]

PPH_RATES = {Decimal(value) for value, _ in PPH_OPTIONS}


# Identifier prefixes, formatted as {code}-{year}-{sequence:04d}
PLANNING_ID_CODE = 'PLN'
QUOTATION_ID_CODE = 'QTN'
ID_SEQUENCE_WIDTH = 4
