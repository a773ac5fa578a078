"""
ERP Outbound Listeners.

Map user / company / order domain events to ERP envelopes and hand
them to the publisher port. Two delivery paths exist:

- queued: the envelope is wrapped in a retryable `publish_erp_message`
  job, so a broker hiccup never fails the request that caused the event;
- direct: the envelope is published synchronously through the port.
"""

import functools
import json
import logging
from typing import Any, Callable, Dict, Optional

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder

from domain.erp.messages import ErpEnvelope
from domain.erp.ports import ErpEventPublisher
from domain.shared.events import (
    DomainEvent,
    UserCreated, UserUpdated, UserDeleted,
    CompanyCreated, CompanyUpdated, CompanyDeleted,
    OrderCreated, OrderUpdated, OrderDeleted,
)
from infrastructure.messaging.serializers import (
    UserErpSerializer,
    CompanyErpSerializer,
    OrderErpSerializer,
)

logger = logging.getLogger(__name__)


def normalize_message(message: Dict[str, Any]) -> Dict[str, Any]:
    """Reduce a message to plain JSON types (UUID, Decimal, datetime -> str)."""
    return json.loads(json.dumps(message, cls=DjangoJSONEncoder))


class ErpEventListener:
    """Base listener: snapshot the event's aggregate and publish it."""

    entity_key: str = ''
    queue_setting: str = ''
    default_queue: str = ''
    serializer_class = None
    queued: bool = True

    def __init__(self, publisher: Optional[ErpEventPublisher] = None):
        self._publisher = publisher

    @property
    def queue_name(self) -> str:
        return getattr(settings, self.queue_setting, self.default_queue)

    @property
    def publisher(self) -> ErpEventPublisher:
        if self._publisher is None:
            from infrastructure.messaging.erp_broker import get_erp_publisher
            self._publisher = get_erp_publisher()
        return self._publisher

    def should_publish(self, event: DomainEvent) -> bool:
        return True

    def snapshot(self, instance) -> Dict[str, Any]:
        return self.serializer_class(instance).data

    def extra(self, instance) -> Dict[str, Any]:
        return {}

    def build_message(self, event: DomainEvent) -> Dict[str, Any]:
        envelope = ErpEnvelope(
            event=event.event_type,
            entity_key=self.entity_key,
            snapshot=self.snapshot(event.instance),
            extra=self.extra(event.instance),
        )
        return normalize_message(envelope.to_message())

    def prepare(self, event: DomainEvent) -> Optional[Callable[[], None]]:
        """
        Snapshot the event now and return a callable that publishes it.

        Returns None when the event is filtered out.
        """
        if event.instance is None:
            return None
        if not self.should_publish(event):
            logger.debug(f"{event.event_type} skipped: no significant changes")
            return None
        message = self.build_message(event)
        return functools.partial(self.send, message)

    def handle(self, event: DomainEvent) -> None:
        publish = self.prepare(event)
        if publish is not None:
            publish()

    def send(self, message: Dict[str, Any]) -> None:
        if self.queued:
            from application.tasks.erp_tasks import publish_erp_message
            publish_erp_message.delay(self.queue_name, message)
            logger.info(f"Queued {message['event']} for ERP queue {self.queue_name}")
        else:
            self.publisher.publish(self.queue_name, message)


class UserErpListener(ErpEventListener):
    """Publishes users to `erp_users`, skipping insignificant updates."""

    entity_key = 'user'
    queue_setting = 'ERP_USERS_QUEUE'
    default_queue = 'erp_users'
    serializer_class = UserErpSerializer
    queued = True

    INSIGNIFICANT_FIELDS = frozenset({'updated_at', 'currency_code'})

    def should_publish(self, event: DomainEvent) -> bool:
        if not isinstance(event, UserUpdated) or not event.changes:
            return True
        return bool(set(event.changes) - self.INSIGNIFICANT_FIELDS)


class CompanyErpListener(ErpEventListener):
    """Publishes companies with bank accounts and the owner's ERP id."""

    entity_key = 'company'
    queue_setting = 'ERP_EVENTS_QUEUE'
    default_queue = 'erp_events'
    serializer_class = CompanyErpSerializer
    queued = True

    def extra(self, instance) -> Dict[str, Any]:
        return {
            'user': {
                'id': instance.user_id,
                'erp_id': instance.user.erp_id if instance.user_id else None,
            },
        }


class OrderErpListener(ErpEventListener):
    """Publishes orders synchronously to `erp_orders`."""

    entity_key = 'order'
    queue_setting = 'ERP_ORDERS_QUEUE'
    default_queue = 'erp_orders'
    serializer_class = OrderErpSerializer
    queued = False


EVENT_LISTENERS = {
    UserCreated: [UserErpListener],
    UserUpdated: [UserErpListener],
    UserDeleted: [UserErpListener],
    CompanyCreated: [CompanyErpListener],
    CompanyUpdated: [CompanyErpListener],
    CompanyDeleted: [CompanyErpListener],
    OrderCreated: [OrderErpListener],
    OrderUpdated: [OrderErpListener],
    OrderDeleted: [OrderErpListener],
}


def prepare_domain_event(event: DomainEvent, publisher: Optional[ErpEventPublisher] = None):
    """Snapshot an event for every listener; returns the publish callables."""
    publications = []
    for listener_cls in EVENT_LISTENERS.get(type(event), []):
        publish = listener_cls(publisher=publisher).prepare(event)
        if publish is not None:
            publications.append(publish)
    return publications


def dispatch_domain_event(event: DomainEvent, publisher: Optional[ErpEventPublisher] = None) -> None:
    """Snapshot and publish an event to every listener registered for it."""
    for publish in prepare_domain_event(event, publisher=publisher):
        publish()
