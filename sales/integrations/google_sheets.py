"""
Quotation log in Google Sheets.

Every quotation that reaches "pending" or "accepted" is mirrored as one row
of a yearly tab named "Quotation {year}" (year of the production date):

    ID | Bill To | Status | Production Date | Total Amount (after PPH) | <product> | <product> ...

The product columns are the catalog names (alphabetical) at the time the tab
is created; each holds the sum of the quotation's item totals for that
product. A quotation already present in column A is updated in place,
otherwise a row is appended, so re-syncing the same quotation converges.

SpreadsheetClient is the small set of calls the sync needs;
GoogleSheetsClient implements it on top of googleapiclient. The sync never
raises: failures are logged and reported as False.
"""
import json
import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from django.conf import settings
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from sales.core.constants import SHEET_LOGGED_STATUSES
from sales.core.exceptions import SheetSyncError

logger = logging.getLogger(__name__)

SCOPES = ['https://www.googleapis.com/auth/spreadsheets']

SHEET_HEADER = ['ID', 'Bill To', 'Status', 'Production Date', 'Total Amount (after PPH)']

HEADER_BACKGROUND = {'red': 0.9, 'green': 0.9, 'blue': 0.9}

LAST_COLUMN = 'ZZ'


class TabAlreadyExistsError(SheetSyncError):
    """addSheet was refused because a tab with that title exists."""


# ==================== API PAYLOADS ====================

@dataclass
class SheetTab:
    sheet_id: int
    title: str


@dataclass
class SpreadsheetMetadata:
    spreadsheet_id: str
    tabs: List[SheetTab] = field(default_factory=list)

    def find_tab(self, title) -> Optional[SheetTab]:
        return next((tab for tab in self.tabs if tab.title == title), None)


def a1_range(title, cells):
    """A1 notation with a quoted tab title: 'Quotation 2024'!A:A"""
    escaped = title.replace("'", "''")
    return f"'{escaped}'!{cells}"


def tab_title_for_year(year):
    return f"Quotation {year}"


# ==================== CLIENT ====================

class SpreadsheetClient(ABC):
    """Operations on one spreadsheet used by the quotation sync."""

    @abstractmethod
    def get_metadata(self) -> SpreadsheetMetadata:
        ...

    @abstractmethod
    def create_tab(self, title) -> SheetTab:
        """Add a tab; raises TabAlreadyExistsError if the title is taken."""

    @abstractmethod
    def format_header(self, sheet_id):
        """Bold, grey background and frozen first row."""

    @abstractmethod
    def read_range(self, a1) -> List[List[str]]:
        ...

    @abstractmethod
    def write_range(self, a1, rows: Sequence[Sequence]):
        ...

    @abstractmethod
    def append_row(self, a1, row: Sequence):
        ...

    def close(self):
        pass


class GoogleSheetsClient(SpreadsheetClient):
    """SpreadsheetClient backed by the Sheets v4 REST API."""

    def __init__(self, service, spreadsheet_id):
        self.service = service
        self.spreadsheet_id = spreadsheet_id

    @classmethod
    def from_service_account_info(cls, info, spreadsheet_id):
        credentials = service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
        service = build('sheets', 'v4', credentials=credentials, cache_discovery=False)
        return cls(service, spreadsheet_id)

    def get_metadata(self):
        response = self.service.spreadsheets().get(
            spreadsheetId=self.spreadsheet_id,
            fields='sheets.properties(sheetId,title)',
        ).execute()
        tabs = [
            SheetTab(sheet_id=sheet['properties']['sheetId'], title=sheet['properties']['title'])
            for sheet in response.get('sheets', [])
        ]
        return SpreadsheetMetadata(spreadsheet_id=self.spreadsheet_id, tabs=tabs)

    def create_tab(self, title):
        body = {'requests': [{'addSheet': {'properties': {'title': title}}}]}
        try:
            response = self.service.spreadsheets().batchUpdate(
                spreadsheetId=self.spreadsheet_id, body=body
            ).execute()
        except HttpError as e:
            if 'already exists' in str(e):
                raise TabAlreadyExistsError(f"Sheet '{title}' already exists") from e
            raise
        properties = response['replies'][0]['addSheet']['properties']
        return SheetTab(sheet_id=properties['sheetId'], title=properties['title'])

    def format_header(self, sheet_id):
        requests = [
            {
                'repeatCell': {
                    'range': {'sheetId': sheet_id, 'startRowIndex': 0, 'endRowIndex': 1},
                    'cell': {
                        'userEnteredFormat': {
                            'textFormat': {'bold': True},
                            'backgroundColor': HEADER_BACKGROUND,
                        },
                    },
                    'fields': 'userEnteredFormat(textFormat,backgroundColor)',
                },
            },
            {
                'updateSheetProperties': {
                    'properties': {'sheetId': sheet_id, 'gridProperties': {'frozenRowCount': 1}},
                    'fields': 'gridProperties.frozenRowCount',
                },
            },
        ]
        self.service.spreadsheets().batchUpdate(
            spreadsheetId=self.spreadsheet_id, body={'requests': requests}
        ).execute()

    def read_range(self, a1):
        response = self.service.spreadsheets().values().get(
            spreadsheetId=self.spreadsheet_id, range=a1
        ).execute()
        return response.get('values', [])

    def write_range(self, a1, rows):
        self.service.spreadsheets().values().update(
            spreadsheetId=self.spreadsheet_id,
            range=a1,
            valueInputOption='USER_ENTERED',
            body={'values': [list(row) for row in rows]},
        ).execute()

    def append_row(self, a1, row):
        self.service.spreadsheets().values().append(
            spreadsheetId=self.spreadsheet_id,
            range=a1,
            valueInputOption='USER_ENTERED',
            insertDataOption='INSERT_ROWS',
            body={'values': [list(row)]},
        ).execute()

    def close(self):
        self.service.close()


# ==================== ROW CONTENT ====================

def to_number(value):
    """Numeric cell value; anything unparseable counts as 0."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def compute_product_totals(items: Iterable, product_names: Sequence[str]) -> Tuple[Dict[str, float], List[str]]:
    """
    Sum item totals per product column.

    Returns (totals, unknown): totals has one entry per product name (0 when
    the quotation has no such item); unknown lists item product names that
    have no column and were left out.
    """
    totals = {name: 0 for name in product_names}
    unknown = []
    for item in items:
        if item.product_name in totals:
            totals[item.product_name] += to_number(item.total)
        elif item.product_name not in unknown:
            unknown.append(item.product_name)
    return totals, unknown


def build_quotation_row(quotation, product_names, items=None):
    """Row values in SHEET_HEADER order followed by one total per product."""
    if items is None:
        items = quotation.items.all()
    totals, unknown = compute_product_totals(items, product_names)
    if unknown:
        logger.warning(
            f"Quotation {quotation.quotation_id}: products not in sheet columns, left out of totals: {', '.join(unknown)}"
        )
    return [
        quotation.quotation_id,
        quotation.bill_to,
        quotation.status,
        quotation.production_date.isoformat(),
        to_number(quotation.total_amount),
    ] + [totals[name] for name in product_names]


# ==================== SYNC SERVICE ====================

class QuotationSheetSync:
    """
    Upserts quotation rows into the yearly tabs of one spreadsheet.

    client: a SpreadsheetClient
    product_names: callable returning the catalog names, alphabetical
    """

    def __init__(self, client: SpreadsheetClient, product_names: Callable[[], Sequence[str]]):
        self.client = client
        self.product_names = product_names

    def close(self):
        self.client.close()

    def sync_quotation(self, quotation) -> bool:
        """
        Mirror one quotation into the sheet.

        Returns True when the row was written. Returns False when the status
        is not logged (no sheet calls at all) or when anything failed.
        """
        if quotation.status not in SHEET_LOGGED_STATUSES:
            logger.info(f"Skipping sheet log for {quotation.quotation_id} - status is '{quotation.status}'")
            return False

        try:
            title, columns = self.ensure_year_tab(quotation.production_date.year)
            row = build_quotation_row(quotation, columns)

            row_number = self.find_row_number(title, quotation.quotation_id)
            if row_number:
                self.client.write_range(
                    a1_range(title, f"A{row_number}:{LAST_COLUMN}{row_number}"), [row]
                )
                logger.info(f"Updated quotation in Google Sheets: {quotation.quotation_id}")
            else:
                self.client.append_row(a1_range(title, f"A:{LAST_COLUMN}"), row)
                logger.info(f"Added new quotation to Google Sheets: {quotation.quotation_id}")
            return True
        except Exception:
            logger.exception(f"Error logging quotation {quotation.quotation_id} to Google Sheets")
            return False

    def ensure_year_tab(self, year):
        """
        Make sure the tab for `year` exists; returns (title, product columns).

        A tab created by a concurrent sync between our check and our
        addSheet is reused. Its header may not be written yet, in which
        case read_product_columns() writes it.
        """
        title = tab_title_for_year(year)
        metadata = self.client.get_metadata()
        if metadata.find_tab(title) is not None:
            return title, self.read_product_columns(title)

        product_names = list(self.product_names())
        try:
            tab = self.client.create_tab(title)
        except TabAlreadyExistsError:
            logger.info(f"Sheet {title} was created concurrently, reusing it")
            return title, self.read_product_columns(title)

        self.write_header(title, product_names)
        self.client.format_header(tab.sheet_id)
        logger.info(f"Created new sheet: {title}")
        return title, product_names

    def write_header(self, title, product_names):
        self.client.write_range(a1_range(title, f"A1:{LAST_COLUMN}1"), [SHEET_HEADER + list(product_names)])

    def read_product_columns(self, title):
        """
        Product names from the header row of an existing tab.

        A missing or cut short header is rewritten from the current catalog
        so that no quotation row lands in row 1.
        """
        rows = self.client.read_range(a1_range(title, '1:1'))
        header = rows[0] if rows else []
        if len(header) < len(SHEET_HEADER):
            product_names = list(self.product_names())
            logger.warning(f"Sheet {title} has no complete header, writing it")
            self.write_header(title, product_names)
            return product_names
        return list(header[len(SHEET_HEADER):])

    def find_row_number(self, title, quotation_id) -> Optional[int]:
        """1-based row whose column A equals quotation_id, or None."""
        rows = self.client.read_range(a1_range(title, 'A:A'))
        for row_number, row in enumerate(rows, start=1):
            if row and row[0] == quotation_id:
                return row_number
        return None


# ==================== CONSTRUCTION ====================

def load_service_account_info():
    """
    Service account JSON from GOOGLE_CREDENTIALS_JSON, else from the file at
    GOOGLE_CREDENTIALS_PATH. None when neither is available.
    """
    if settings.GOOGLE_CREDENTIALS_JSON:
        return json.loads(settings.GOOGLE_CREDENTIALS_JSON)

    path = settings.GOOGLE_CREDENTIALS_PATH
    if path and not os.path.isabs(path):
        path = os.path.join(settings.BASE_DIR, path)
    if path and os.path.exists(path):
        with open(path, encoding='utf-8') as f:
            return json.load(f)
    return None


def build_sheet_sync(product_names=None) -> Optional[QuotationSheetSync]:
    """
    Build the quotation sync from settings, or None when the spreadsheet id
    or the credentials are missing or unusable.
    """
    spreadsheet_id = settings.GOOGLE_SHEET_ID
    if not spreadsheet_id:
        logger.info("GOOGLE_SHEET_ID not set, quotation sheet log disabled")
        return None

    try:
        info = load_service_account_info()
        if info is None:
            logger.warning("Google credentials not found, quotation sheet log disabled")
            return None
        client = GoogleSheetsClient.from_service_account_info(info, spreadsheet_id)
    except Exception:
        logger.exception("Error initializing Google Sheets client")
        return None

    if product_names is None:
        from sales.catalog.models import Product
        product_names = Product.get_all_names
    return QuotationSheetSync(client, product_names)
