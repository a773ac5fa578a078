"""
Failed Job ORM Model.

Dead-letter store: queue jobs that exhausted their try budget are kept
here for operator inspection instead of being dropped.
"""

from django.db import models

import uuid


class FailedJob(models.Model):
    """Задача очереди, исчерпавшая попытки."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    task_id = models.CharField(
        max_length=255,
        db_index=True,
        verbose_name="ID задачи"
    )
    task_name = models.CharField(
        max_length=255,
        db_index=True,
        verbose_name="Задача"
    )
    queue = models.CharField(
        max_length=100,
        blank=True,
        verbose_name="Очередь"
    )
    args = models.JSONField(
        default=list,
        blank=True,
        verbose_name="Аргументы"
    )
    kwargs = models.JSONField(
        default=dict,
        blank=True,
        verbose_name="Именованные аргументы"
    )
    exception = models.TextField(
        verbose_name="Исключение"
    )
    traceback = models.TextField(
        blank=True,
        verbose_name="Трассировка"
    )
    failed_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        verbose_name="Время"
    )

    class Meta:
        db_table = 'failed_jobs'
        verbose_name = 'Неудачная задача'
        verbose_name_plural = 'Неудачные задачи'
        ordering = ['-failed_at']

    def __str__(self):
        return f"{self.task_name} [{self.task_id}]"
