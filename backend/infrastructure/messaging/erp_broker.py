"""
ERP Broker Adapters.

kombu-backed implementation of the ERP publisher port and the queue
declarations shared by the outbound publisher and the inbound consumer.
Each ERP queue is durable and bound to a direct exchange of the same
name; messages are raw JSON bodies, not Celery task envelopes.
"""

import json
import logging
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from kombu import Connection, Exchange, Queue
from kombu.exceptions import KombuError

from domain.erp.ports import ErpEventPublisher
from domain.shared.exceptions import ErpPublishException

logger = logging.getLogger(__name__)


def erp_queue(name: str) -> Queue:
    """Durable queue bound to its own direct exchange."""
    exchange = Exchange(name, type='direct', durable=True)
    return Queue(name, exchange=exchange, routing_key=name, durable=True)


def erp_connection(url: Optional[str] = None) -> Connection:
    return Connection(
        url or settings.ERP_BROKER_URL,
        connect_timeout=settings.ERP_CONNECT_TIMEOUT,
        heartbeat=settings.ERP_HEARTBEAT,
    )


def encode_message(message: Dict[str, Any]) -> str:
    return json.dumps(message, cls=DjangoJSONEncoder, ensure_ascii=False)


class KombuErpEventPublisher(ErpEventPublisher):
    """
    Publishes raw JSON messages to durable ERP queues.

    A connection is opened per publish; outbound ERP traffic is
    low-volume and this keeps the publisher safe to use from any
    process (web, worker, management command).
    """

    def __init__(self, broker_url: Optional[str] = None, retry_policy: Optional[Dict[str, Any]] = None):
        self.broker_url = broker_url
        self.retry_policy = retry_policy or {
            'max_retries': 3,
            'interval_start': 0,
            'interval_step': 1,
            'interval_max': 5,
        }

    def publish(self, queue_name: str, message: Dict[str, Any]) -> None:
        queue = erp_queue(queue_name)
        body = encode_message(message)

        with erp_connection(self.broker_url) as connection:
            transport_errors = (OSError, KombuError) + tuple(connection.connection_errors) \
                + tuple(connection.channel_errors)
            try:
                producer = connection.Producer()
                producer.publish(
                    body,
                    exchange=queue.exchange,
                    routing_key=queue.routing_key,
                    declare=[queue],
                    content_type='application/json',
                    content_encoding='utf-8',
                    delivery_mode=2,
                    retry=True,
                    retry_policy=self.retry_policy,
                )
            except transport_errors as exc:
                raise ErpPublishException(queue_name, str(exc)) from exc

        logger.info(f"Published {message.get('event')} to ERP queue {queue_name}")


_default_publisher: Optional[ErpEventPublisher] = None


def get_erp_publisher() -> ErpEventPublisher:
    """Process-wide publisher configured from settings."""
    global _default_publisher
    if _default_publisher is None:
        _default_publisher = KombuErpEventPublisher()
    return _default_publisher
