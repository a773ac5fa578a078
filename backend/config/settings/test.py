"""
Test settings.

SQLite, eager Celery, in-memory kombu transport for the ERP broker.
"""

import tempfile

from .base import *

DEBUG = False

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

MEDIA_ROOT = tempfile.mkdtemp(prefix='storefront-test-media-')

# =============================================================================
# CELERY - run tasks inline
# =============================================================================
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = None

# =============================================================================
# ERP / FEED
# =============================================================================
ERP_BROKER_URL = 'memory://'
ERP_PUBLISH_ENABLED = False
ERP_REQUEUE_DELAY = 0

CATALOG_FEED_URL = 'http://feed.test/export.xml'
CATALOG_MEDIA_MAX_BYTES = 1024 * 1024

# =============================================================================
# LOGGING - console only
# =============================================================================
LOGGING['loggers']['application']['handlers'] = ['console']
LOGGING['loggers']['infrastructure']['handlers'] = ['console']
LOGGING['loggers']['storefront']['handlers'] = ['console']
LOGGING['root']['level'] = 'WARNING'
