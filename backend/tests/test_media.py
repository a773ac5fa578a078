"""
Tests for media download and the per-product media rebuild.
"""
from unittest import mock

import requests
from django.test import SimpleTestCase, TestCase

from application.catalog.media import MediaDownloader, MediaSynchronizer
from domain.shared.exceptions import MediaDownloadException
from infrastructure.persistence.models import Media
from tests.utils import TestDataFactory


class FakeDownloader:
    """Serves canned bodies; URLs containing 'broken' fail."""

    def __init__(self):
        self.requested = []

    def download(self, url):
        self.requested.append(url)
        if 'broken' in url:
            raise MediaDownloadException(url, 'HTTP 404')
        if 'timeout' in url:
            raise requests.Timeout('read timed out')
        if url.endswith('/..'):
            return '..', b'data', ''
        return url.rsplit('/', 1)[-1], b'data', 'image/jpeg'


def streamed_response(status_code=200, chunks=(b'abc',), content_type='image/png'):
    response = mock.MagicMock()
    response.__enter__.return_value = response
    response.status_code = status_code
    response.headers = {'Content-Type': content_type}
    response.iter_content.return_value = iter(chunks)
    return response


class MediaSynchronizerTests(TestCase):

    def setUp(self):
        self.product = TestDataFactory.create_product(external_id='uid-m')
        self.downloader = FakeDownloader()
        self.synchronizer = MediaSynchronizer(self.downloader)

    def _item(self, **overrides):
        return TestDataFactory.build_payload(external_id='uid-m', **overrides).to_dict()

    def test_collections_rebuilt_in_feed_order(self):
        attached = self.synchronizer.sync(self.product.pk, self._item(
            image_main='https://cdn.test/main.jpg',
            additional_images=['https://cdn.test/a1.jpg', 'https://cdn.test/a2.jpg'],
            videos=['https://cdn.test/v.mp4'],
        ))

        self.assertEqual(attached, 4)
        additional = Media.objects.filter(product=self.product, collection='additional')
        self.assertEqual(
            list(additional.values_list('source_url', 'order_column')),
            [('https://cdn.test/a1.jpg', 0), ('https://cdn.test/a2.jpg', 1)],
        )
        self.assertEqual(Media.objects.get(collection='main').size, 4)

    def test_broken_url_skipped(self):
        attached = self.synchronizer.sync(self.product.pk, self._item(
            image_main='https://cdn.test/broken.jpg',
            additional_images=['https://cdn.test/timeout.jpg', 'https://cdn.test/ok.jpg'],
        ))

        self.assertEqual(attached, 1)
        self.assertEqual(Media.objects.get().source_url, 'https://cdn.test/ok.jpg')

    def test_unstorable_file_skipped(self):
        attached = self.synchronizer.sync(self.product.pk, self._item(
            image_main='https://cdn.test/img/..',
            additional_images=['https://cdn.test/a1.jpg', 'https://cdn.test/a2.jpg'],
        ))

        self.assertEqual(attached, 2)
        self.assertEqual(
            sorted(Media.objects.values_list('collection', flat=True)),
            ['additional', 'additional'],
        )

    def test_previous_media_replaced(self):
        self.synchronizer.sync(self.product.pk, self._item(
            image_main='https://cdn.test/old.jpg',
            additional_images=['https://cdn.test/old1.jpg'],
        ))
        self.synchronizer.sync(self.product.pk, self._item(image_main='https://cdn.test/new.jpg'))

        self.assertEqual(
            list(Media.objects.values_list('source_url', flat=True)),
            ['https://cdn.test/new.jpg'],
        )

    def test_missing_product_is_not_an_error(self):
        product_id = self.product.pk
        self.product.delete()

        attached = self.synchronizer.sync(product_id, self._item(image_main='https://cdn.test/a.jpg'))

        self.assertEqual(attached, 0)
        self.assertEqual(self.downloader.requested, [])


class MediaDownloaderTests(SimpleTestCase):

    def _downloader(self, response, max_bytes=1024):
        session = mock.Mock()
        session.get.return_value = response
        return MediaDownloader(session=session, timeout=5, max_bytes=max_bytes)

    def test_downloads_body(self):
        downloader = self._downloader(streamed_response(chunks=[b'ab', b'cd']))

        filename, content, mime_type = downloader.download('https://cdn.test/path/pic.png?v=2')

        self.assertEqual((filename, content, mime_type), ('pic.png', b'abcd', 'image/png'))

    def test_extension_guessed_from_mime(self):
        downloader = self._downloader(streamed_response(content_type='image/png; charset=binary'))

        filename, _, _ = downloader.download('https://cdn.test/media/12345')

        self.assertEqual(filename, '12345.png')

    def test_http_error(self):
        downloader = self._downloader(streamed_response(status_code=404))

        with self.assertRaises(MediaDownloadException):
            downloader.download('https://cdn.test/missing.jpg')

    def test_size_limit(self):
        downloader = self._downloader(streamed_response(chunks=[b'x' * 600, b'x' * 600]))

        with self.assertRaises(MediaDownloadException):
            downloader.download('https://cdn.test/huge.jpg')

    def test_empty_body(self):
        downloader = self._downloader(streamed_response(chunks=[]))

        with self.assertRaises(MediaDownloadException):
            downloader.download('https://cdn.test/empty.jpg')
