"""
ERP Inbound Consumer.

Long-running kombu consumer for the `erp_incoming` queue. Messages are
raw JSON from the ERP (not Celery envelopes) and are processed one at
a time (prefetch 1):

- body is not valid JSON    -> rejected without requeue (poison message)
- routed successfully       -> acknowledged
- routing raised            -> requeued after a delay, redelivered later
"""

from enum import Enum
import json
import logging
import time
from typing import Any, Callable, Optional

from django.conf import settings
from kombu.mixins import ConsumerMixin

from .erp_broker import erp_queue

logger = logging.getLogger(__name__)


class Delivery(str, Enum):
    """What happened to a delivered message."""

    ACKED = "acked"
    REJECTED = "rejected"
    REQUEUED = "requeued"


def decode_body(body) -> Any:
    if isinstance(body, (bytes, bytearray)):
        body = body.decode('utf-8')
    return json.loads(body)


class ErpIncomingConsumer(ConsumerMixin):
    """Consumes inbound ERP messages and routes them to internal jobs."""

    def __init__(
        self,
        connection,
        queue_name: Optional[str] = None,
        router: Optional[Callable[[Any], Any]] = None,
        requeue_delay: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if router is None:
            from application.erp.inbound import route_erp_message
            router = route_erp_message

        self.connection = connection
        self.queue = erp_queue(queue_name or settings.ERP_INCOMING_QUEUE)
        self.router = router
        self.requeue_delay = settings.ERP_REQUEUE_DELAY if requeue_delay is None else requeue_delay
        self.sleep = sleep

    def get_consumers(self, Consumer, channel):
        return [
            Consumer(
                queues=[self.queue],
                on_message=self.on_message,
                prefetch_count=1,
            ),
        ]

    def on_connection_error(self, exc, interval):
        logger.warning(f"ERP broker connection lost: {exc}; retry in {interval}s")

    def on_consume_ready(self, connection, channel, consumers, **kwargs):
        logger.info(f"Waiting for ERP messages on '{self.queue.name}'")

    def on_message(self, message):
        self.handle(message)

    def handle(self, message) -> Delivery:
        try:
            payload = decode_body(message.body)
        except (ValueError, UnicodeDecodeError) as e:
            logger.error(f"Invalid JSON in ERP message, discarded: {e}")
            message.reject(requeue=False)
            return Delivery.REJECTED

        try:
            self.router(payload)
        except Exception as e:
            logger.exception(f"Error processing ERP message, requeue in {self.requeue_delay}s: {e}")
            if self.requeue_delay:
                self.sleep(self.requeue_delay)
            message.requeue()
            return Delivery.REQUEUED

        message.ack()
        return Delivery.ACKED
