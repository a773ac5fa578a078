"""
ERP Tasks.

Retryable outbound publication and inbound update application.
"""

from celery import shared_task
from django.db import DatabaseError
import logging

from domain.shared.exceptions import ErpPublishException

from .base import PipelineTask

logger = logging.getLogger(__name__)


@shared_task(bind=True, base=PipelineTask, max_retries=2, acks_late=True)
def publish_erp_message(self, queue_name: str, message: dict):
    """Publish a prepared envelope to an ERP queue (3 tries, 10s apart)."""
    from infrastructure.messaging.erp_broker import get_erp_publisher

    try:
        get_erp_publisher().publish(queue_name, message)
    except ErpPublishException as e:
        logger.error(f"Error publishing {message.get('event')} to {queue_name}: {e}")
        raise self.retry(exc=e, countdown=10)


@shared_task(bind=True, base=PipelineTask, max_retries=3, acks_late=True)
def process_erp_user_update(self, payload: dict):
    """Apply the ERP id / status the ERP assigned to a user."""
    from application.erp.user_updates import apply_erp_user_update

    try:
        return apply_erp_user_update(payload)
    except DatabaseError as e:
        logger.error(f"Error applying ERP user update: {e}")
        raise self.retry(exc=e, countdown=30)
