"""
Base Celery task for pipeline jobs.

Jobs that exhaust their retries are recorded in the failed-jobs table
so they can be inspected and replayed.
"""

from celery import Task
import logging

logger = logging.getLogger(__name__)


class PipelineTask(Task):
    """Task base class with failure bookkeeping."""

    abstract = True

    def on_retry(self, exc, task_id, args, kwargs, einfo):
        logger.warning(
            f"{self.name}[{task_id}] retry {self.request.retries + 1}/{self.max_retries}: {exc}"
        )

    def on_failure(self, exc, task_id, args, kwargs, einfo):
        from infrastructure.persistence.models import FailedJob

        logger.error(f"{self.name}[{task_id}] failed permanently: {exc}")

        delivery_info = getattr(self.request, 'delivery_info', None) or {}
        FailedJob.objects.create(
            task_id=task_id or '',
            task_name=self.name,
            queue=delivery_info.get('routing_key') or '',
            args=list(args or []),
            kwargs=dict(kwargs or {}),
            exception=repr(exc),
            traceback=str(einfo) if einfo else '',
        )
