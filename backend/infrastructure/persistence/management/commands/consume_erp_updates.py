"""
Consume ERP Updates Command.

Runs the inbound ERP consumer until interrupted.
"""

from django.conf import settings
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = 'Слушает очередь входящих сообщений ERP и применяет обновления'

    def add_arguments(self, parser):
        parser.add_argument(
            '--queue',
            type=str,
            default=None,
            help='Имя очереди (по умолчанию ERP_INCOMING_QUEUE)'
        )
        parser.add_argument(
            '--requeue-delay',
            type=float,
            default=None,
            help='Пауза перед возвратом сообщения в очередь при ошибке, сек.'
        )

    def handle(self, *args, **options):
        from infrastructure.messaging.erp_broker import erp_connection
        from infrastructure.messaging.erp_consumer import ErpIncomingConsumer

        queue_name = options['queue'] or settings.ERP_INCOMING_QUEUE

        with erp_connection() as connection:
            consumer = ErpIncomingConsumer(
                connection,
                queue_name=queue_name,
                requeue_delay=options['requeue_delay'],
            )
            self.stdout.write(self.style.SUCCESS(f'Слушаем очередь {queue_name}...'))
            try:
                consumer.run()
            except KeyboardInterrupt:
                self.stdout.write('Остановлено.')
