"""
Tests for the quotation app: CRUD, sheet sync trigger and Excel export.
"""
