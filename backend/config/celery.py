"""
Celery configuration for the storefront catalog backend.
"""

import os

from celery import Celery

# Set the default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

app = Celery('storefront')

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Load task modules from all registered Django apps.
app.autodiscover_tasks()

CATALOG_TASK_LANES = {
    'application.tasks.catalog_tasks.import_catalog_product': 'CATALOG_IMPORT_QUEUE',
    'application.tasks.catalog_tasks.download_product_media': 'CATALOG_MEDIA_QUEUE',
}


def route_task(name, args, kwargs, options, task=None, **kw):
    """Catalog import and media download run on separate, configurable lanes."""
    from django.conf import settings

    if name in CATALOG_TASK_LANES:
        return {'queue': getattr(settings, CATALOG_TASK_LANES[name])}
    if name.startswith('application.tasks.erp_tasks.'):
        return {'queue': 'erp'}
    return None


app.conf.task_routes = (route_task,)
