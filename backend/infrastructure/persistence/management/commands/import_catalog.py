"""
Import Catalog Command.

Downloads the vendor XML feed and queues one import job per product.
The actual import runs in the catalog-import / catalog-media workers.
"""

from django.conf import settings
from django.core.management.base import BaseCommand

from domain.shared.exceptions import FeedFetchException, FeedParseException


class Command(BaseCommand):
    help = 'Импорт каталога товаров из внешнего XML-эндпоинта (через очереди)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--url',
            type=str,
            default=None,
            help='URL эндпоинта экспорта (по умолчанию CATALOG_FEED_URL)'
        )
        parser.add_argument(
            '--no-media',
            action='store_true',
            help='Пропустить загрузку изображений и видео'
        )

    def handle(self, *args, **options):
        from application.catalog.feed import CatalogImportDispatcher

        skip_media = options['no_media']
        self._total = 0
        self._dispatched = 0

        self.stdout.write('Загрузка XML-файла каталога...')

        try:
            summary = CatalogImportDispatcher().run(
                url=options['url'],
                skip_media=skip_media,
                on_total=self._on_total,
                on_dispatched=self._on_dispatched,
            )
        except FeedFetchException as e:
            self.stderr.write(self.style.ERROR(f'Ошибка загрузки: {e.message}'))
            return
        except FeedParseException as e:
            self.stderr.write(self.style.ERROR(f'Ошибка парсинга XML: {e.message}'))
            return

        if summary.total == 0:
            self.stdout.write(self.style.WARNING('XML не содержит товаров.'))
            return

        self.stdout.write('')
        self.stdout.write(self.style.SUCCESS('Задачи отправлены в очередь'))
        self.stdout.write(f'  Товаров в очереди:     {summary.dispatched}')
        if summary.skipped:
            self.stdout.write(f'  Пропущено (без uid):   {summary.skipped}')
        self.stdout.write(f'  Очередь данных:        {settings.CATALOG_IMPORT_QUEUE}')
        if not skip_media:
            self.stdout.write(f'  Очередь медиа:         {settings.CATALOG_MEDIA_QUEUE}')
        self.stdout.write('Обработка выполняется воркерами в фоне.')

    def _on_total(self, total):
        self._total = total
        if total:
            self.stdout.write(f'Найдено товаров: {total}')

    def _on_dispatched(self, payload):
        self._dispatched += 1
        if self._dispatched % 100 == 0 or self._dispatched == self._total:
            self.stdout.write(f'  {self._dispatched}/{self._total} {payload.name[:50]}')
