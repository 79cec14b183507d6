"""
In-memory SpreadsheetClient for sync tests.
"""
import re

from sales.integrations.google_sheets import (
    SheetTab,
    SpreadsheetClient,
    SpreadsheetMetadata,
    TabAlreadyExistsError,
)

A1_PATTERN = re.compile(r"^'(?P<title>(?:[^']|'')*)'!(?P<cells>.+)$")
ROW_RANGE_PATTERN = re.compile(r"^A(?P<row>\d+):[A-Z]+\d+$")


def split_a1(a1):
    match = A1_PATTERN.match(a1)
    if not match:
        raise ValueError(f"Unexpected range {a1}")
    return match.group('title').replace("''", "'"), match.group('cells')


class FakeSpreadsheetClient(SpreadsheetClient):
    """
    Keeps every tab as a list of rows and records each call.

    tabs: {title: [[cell, ...], ...]}
    """

    WRITE_METHODS = ('create_tab', 'format_header', 'write_range', 'append_row')

    def __init__(self, tabs=None, fail_on=None):
        self.tabs = {title: [list(row) for row in rows] for title, rows in (tabs or {}).items()}
        self.sheet_ids = {title: index for index, title in enumerate(self.tabs)}
        self.fail_on = fail_on
        self.calls = []
        self.formatted = []
        self.closed = False
        # Title that another process "creates" right before our addSheet
        self.created_concurrently = None

    def _record(self, method, *args):
        self.calls.append((method,) + args)
        if self.fail_on == method:
            raise RuntimeError(f"{method} failed")

    @property
    def write_calls(self):
        return [call for call in self.calls if call[0] in self.WRITE_METHODS]

    def rows(self, title):
        return self.tabs[title]

    def get_metadata(self):
        self._record('get_metadata')
        tabs = [SheetTab(sheet_id=self.sheet_ids[title], title=title) for title in self.tabs]
        return SpreadsheetMetadata(spreadsheet_id='fake-sheet', tabs=tabs)

    def create_tab(self, title):
        if self.created_concurrently == title:
            self.tabs[title] = []
            self.sheet_ids[title] = len(self.sheet_ids)
            self.created_concurrently = None
        self._record('create_tab', title)
        if title in self.tabs:
            raise TabAlreadyExistsError(f"Sheet '{title}' already exists")
        self.tabs[title] = []
        self.sheet_ids[title] = len(self.sheet_ids)
        return SheetTab(sheet_id=self.sheet_ids[title], title=title)

    def format_header(self, sheet_id):
        self._record('format_header', sheet_id)
        self.formatted.append(sheet_id)

    def read_range(self, a1):
        self._record('read_range', a1)
        title, cells = split_a1(a1)
        rows = self.tabs[title]
        if cells == 'A:A':
            return [[row[0]] if row else [] for row in rows]
        if cells == '1:1':
            return [list(rows[0])] if rows else []
        raise ValueError(f"Unsupported read range {a1}")

    def write_range(self, a1, rows):
        self._record('write_range', a1, rows)
        title, cells = split_a1(a1)
        match = ROW_RANGE_PATTERN.match(cells)
        if not match:
            raise ValueError(f"Unsupported write range {a1}")
        start = int(match.group('row')) - 1
        sheet = self.tabs[title]
        for offset, row in enumerate(rows):
            while len(sheet) <= start + offset:
                sheet.append([])
            sheet[start + offset] = list(row)

    def append_row(self, a1, row):
        self._record('append_row', a1, row)
        title, _ = split_a1(a1)
        self.tabs[title].append(list(row))

    def close(self):
        self.closed = True
