"""
Tests for catalog Celery tasks: media chaining, retry policy and the
failed-jobs record.
"""
from unittest import mock

from celery.exceptions import Retry
from django.db import OperationalError
from django.test import TestCase, override_settings

from application.tasks.catalog_tasks import download_product_media, import_catalog_product
from config.celery import route_task
from infrastructure.persistence.models import FailedJob, Product
from tests.utils import TestDataFactory


class ImportCatalogProductTaskTests(TestCase):

    def setUp(self):
        self.item_data = TestDataFactory.build_payload(
            image_main='https://cdn.vendor.test/main.jpg',
        ).to_dict()

    @mock.patch('application.tasks.catalog_tasks.download_product_media.delay')
    def test_media_job_queued_after_import(self, media_delay):
        product_id = import_catalog_product.delay(self.item_data).get()

        product = Product.objects.get(external_id='uid-100')
        self.assertEqual(product_id, str(product.pk))
        media_delay.assert_called_once_with(str(product.pk), self.item_data)

    @mock.patch('application.tasks.catalog_tasks.download_product_media.delay')
    def test_skip_media(self, media_delay):
        import_catalog_product.delay(self.item_data, True).get()

        self.assertTrue(Product.objects.filter(external_id='uid-100').exists())
        media_delay.assert_not_called()

    def test_invalid_payload_not_retried(self):
        from domain.shared.exceptions import InvalidPayloadException

        with mock.patch.object(import_catalog_product, 'retry') as retry:
            with self.assertRaises(InvalidPayloadException):
                import_catalog_product.run({'external_id': ''}, True)
        retry.assert_not_called()

    def test_transient_error_retried(self):
        error = OperationalError('database is locked')

        with mock.patch('application.catalog.importer.ProductImporter.import_item', side_effect=error), \
                mock.patch.object(import_catalog_product, 'retry', side_effect=Retry()) as retry:
            with self.assertRaises(Retry):
                import_catalog_product.run(self.item_data, True)

        retry.assert_called_once_with(exc=error, countdown=10)

    def test_retry_policy(self):
        self.assertEqual(import_catalog_product.max_retries, 2)
        self.assertTrue(import_catalog_product.acks_late)
        self.assertEqual(import_catalog_product.time_limit, 120)
        self.assertEqual(download_product_media.max_retries, 1)
        self.assertEqual(download_product_media.time_limit, 300)


class DownloadProductMediaTaskTests(TestCase):

    @mock.patch('application.catalog.media.MediaSynchronizer.sync', return_value=3)
    def test_delegates_to_synchronizer(self, sync):
        self.assertEqual(download_product_media.run('pid', {'external_id': 'x'}), 3)
        sync.assert_called_once_with('pid', {'external_id': 'x'})

    def test_error_retried(self):
        error = RuntimeError('storage unavailable')

        with mock.patch('application.catalog.media.MediaSynchronizer.sync', side_effect=error), \
                mock.patch.object(download_product_media, 'retry', side_effect=Retry()) as retry:
            with self.assertRaises(Retry):
                download_product_media.run('pid', {})

        retry.assert_called_once_with(exc=error, countdown=10)


class FailedJobTests(TestCase):

    def test_exhausted_job_recorded(self):
        error = RuntimeError('boom')

        import_catalog_product.on_failure(error, 'task-1', ({'external_id': 'uid-1'}, False), {}, None)

        job = FailedJob.objects.get()
        self.assertEqual(job.task_id, 'task-1')
        self.assertEqual(job.task_name, import_catalog_product.name)
        self.assertEqual(job.args, [{'external_id': 'uid-1'}, False])
        self.assertIn('boom', job.exception)


class LaneRoutingTests(TestCase):

    def _queue(self, task):
        return route_task(task.name, (), {}, {})['queue']

    def test_default_lanes(self):
        self.assertEqual(self._queue(import_catalog_product), 'catalog-import')
        self.assertEqual(self._queue(download_product_media), 'catalog-media')

    @override_settings(CATALOG_IMPORT_QUEUE='import-eu', CATALOG_MEDIA_QUEUE='media-eu')
    def test_lanes_follow_settings(self):
        self.assertEqual(self._queue(import_catalog_product), 'import-eu')
        self.assertEqual(self._queue(download_product_media), 'media-eu')

    def test_erp_jobs_on_erp_lane(self):
        self.assertEqual(route_task('application.tasks.erp_tasks.publish_erp_message', (), {}, {}),
                         {'queue': 'erp'})
        self.assertIsNone(route_task('celery.backend_cleanup', (), {}, {}))
