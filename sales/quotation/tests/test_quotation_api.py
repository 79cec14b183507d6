"""
Tests for Quotation endpoints: CRUD, the sheet sync trigger and Excel export.
"""
from datetime import date
from decimal import Decimal
from io import BytesIO
from unittest.mock import patch

from django.apps import apps
from django.test import TestCase
from django.utils import timezone
from openpyxl import load_workbook
from rest_framework.test import APIClient
from rest_framework import status

from sales.catalog.models import Product
from sales.integrations.google_sheets import SHEET_HEADER, QuotationSheetSync
from sales.integrations.tests.fixtures import FakeSpreadsheetClient
from sales.quotation.models import Quotation
from .fixtures import (
    get_or_create_test_user,
    create_quotation,
    create_quotation_with_items,
    create_valid_quotation_data,
)


class SheetSyncTestMixin:
    """Replaces the app's sheet sync with one backed by FakeSpreadsheetClient"""

    def install_fake_sheet(self, product_names=('Backdrop', 'Lighting')):
        self.sheet_client = FakeSpreadsheetClient()
        sheet_sync = QuotationSheetSync(self.sheet_client, lambda: list(product_names))
        patcher = patch.object(apps.get_app_config('quotation'), 'sheet_sync', sheet_sync)
        patcher.start()
        self.addCleanup(patcher.stop)
        return self.sheet_client


class QuotationCreateTests(SheetSyncTestMixin, TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = get_or_create_test_user()
        self.client.force_authenticate(user=self.user)
        self.url = '/api/quotation/'

    def test_create_quotation(self):
        self.install_fake_sheet()

        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.post(self.url, create_valid_quotation_data(), format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = response.data['data']
        self.assertEqual(data['quotation_id'], f"QTN-{timezone.localdate().year}-0001")
        self.assertEqual(Decimal(data['total_amount']), Decimal('2940000.00'))

    def test_create_pending_quotation_is_logged(self):
        sheet_client = self.install_fake_sheet()

        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.post(self.url, create_valid_quotation_data(), format='json')

        rows = sheet_client.rows('Quotation 2024')
        self.assertEqual(rows[0], SHEET_HEADER + ['Backdrop', 'Lighting'])
        self.assertEqual(rows[1][0], response.data['data']['quotation_id'])
        self.assertEqual(rows[1][2], 'pending')
        self.assertEqual(rows[1][5:], [2000000, 1000000])

    def test_create_draft_quotation_is_not_logged(self):
        sheet_client = self.install_fake_sheet()

        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.post(self.url, create_valid_quotation_data(status='draft'), format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(sheet_client.calls, [])

    def test_sheet_failure_does_not_fail_request(self):
        sheet_client = self.install_fake_sheet()
        sheet_client.fail_on = 'get_metadata'

        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.post(self.url, create_valid_quotation_data(), format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Quotation.objects.count(), 1)

    def test_invalid_quotation_is_not_logged(self):
        sheet_client = self.install_fake_sheet()

        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            response = self.client.post(self.url, create_valid_quotation_data(pph='9'), format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(len(callbacks), 0)
        self.assertEqual(sheet_client.calls, [])


class QuotationUpdateTests(SheetSyncTestMixin, TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = get_or_create_test_user()
        self.client.force_authenticate(user=self.user)
        self.quotation = create_quotation(status='draft')
        self.url = f'/api/quotation/{self.quotation.pk}/'

    def test_accepting_quotation_logs_it(self):
        sheet_client = self.install_fake_sheet(product_names=('Product 1', 'Product 2'))

        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.put(self.url, {'status': 'accepted'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        rows = sheet_client.rows('Quotation 2024')
        self.assertEqual(rows[1][:3], ['QTN-2024-0001', 'PT Maju Jaya', 'accepted'])
        # fixture items: Product 1 = 1000 + 2000, Product 2 = 2000 + 4000
        self.assertEqual(rows[1][5:], [3000, 6000])

    def test_update_rewrites_existing_row(self):
        sheet_client = self.install_fake_sheet(product_names=('Product 1', 'Product 2'))

        with self.captureOnCommitCallbacks(execute=True):
            self.client.put(self.url, {'status': 'pending'}, format='json')
        with self.captureOnCommitCallbacks(execute=True):
            self.client.put(self.url, {'status': 'accepted', 'bill_to': 'PT Baru'}, format='json')

        rows = sheet_client.rows('Quotation 2024')
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[1][1:3], ['PT Baru', 'accepted'])

    def test_moving_to_another_year_keeps_old_row(self):
        sheet_client = self.install_fake_sheet(product_names=('Product 1', 'Product 2'))

        with self.captureOnCommitCallbacks(execute=True):
            self.client.put(self.url, {'status': 'pending'}, format='json')
        with self.captureOnCommitCallbacks(execute=True):
            self.client.put(self.url, {'production_date': '2025-01-10'}, format='json')

        self.assertEqual(sheet_client.rows('Quotation 2024')[1][0], 'QTN-2024-0001')
        self.assertEqual(sheet_client.rows('Quotation 2025')[1][3], '2025-01-10')

    def test_get_and_delete(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['data']['items']), 2)

        response = self.client.delete(self.url)
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Quotation.objects.exists())


class QuotationSyncEndpointTests(SheetSyncTestMixin, TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = get_or_create_test_user()
        self.client.force_authenticate(user=self.user)
        self.quotation = create_quotation(status='accepted')
        self.url = f'/api/quotation/{self.quotation.pk}/sync/'

    def test_sync_not_configured(self):
        with patch.object(apps.get_app_config('quotation'), 'sheet_sync', None):
            response = self.client.post(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data'], {'quotation_id': 'QTN-2024-0001', 'synced': False})

    def test_sync_writes_row(self):
        sheet_client = self.install_fake_sheet()

        response = self.client.post(self.url)

        self.assertTrue(response.data['data']['synced'])
        self.assertEqual(sheet_client.rows('Quotation 2024')[1][0], 'QTN-2024-0001')

    def test_sync_missing_quotation(self):
        self.install_fake_sheet()

        response = self.client.post('/api/quotation/999999/sync/')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class QuotationExportTests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = get_or_create_test_user()
        self.client.force_authenticate(user=self.user)
        for name in ['Lighting', 'Backdrop']:
            Product.objects.create(name=name)
        create_quotation_with_items('QTN-2024-0002', [('Lighting', '300')], status='pending')
        create_quotation_with_items('QTN-2024-0001', [('Backdrop', '100'), ('Backdrop', '50')], status='accepted')
        create_quotation_with_items('QTN-2024-0003', [('Backdrop', '10')], status='draft')
        create_quotation_with_items(
            'QTN-2023-0001', [('Backdrop', '10')], status='accepted', production_date=date(2023, 6, 1)
        )

    def test_export_year(self):
        response = self.client.get('/api/quotation/export/', {'year': '2024'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('Quotation_2024.xlsx', response['Content-Disposition'])

        wb = load_workbook(BytesIO(response.content))
        ws = wb['Quotation 2024']
        rows = [list(row) for row in ws.iter_rows(values_only=True)]
        self.assertEqual(rows[0], SHEET_HEADER + ['Backdrop', 'Lighting'])
        self.assertEqual([row[0] for row in rows[1:]], ['QTN-2024-0001', 'QTN-2024-0002'])
        self.assertEqual(rows[1][5:], [150, 0])
        self.assertEqual(rows[2][5:], [0, 300])
        self.assertTrue(ws['A1'].font.bold)

    def test_export_invalid_year(self):
        response = self.client.get('/api/quotation/export/', {'year': 'last'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
