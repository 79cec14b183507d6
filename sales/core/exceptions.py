"""Exceptions raised by the sales services."""


class IdentifierOverflowError(Exception):
    """The yearly sequence for a document prefix ran past its fixed width."""

    def __init__(self, prefix, number):
        self.prefix = prefix
        self.number = number
        super().__init__(f"Sequence for '{prefix}' exhausted: {number} does not fit in the identifier")


class SheetSyncError(Exception):
    """A spreadsheet call failed or returned something unusable."""
