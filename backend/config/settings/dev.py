"""
Development settings for the storefront catalog backend.
"""

import os

from .base import *

# =============================================================================
# DEBUG
# =============================================================================
DEBUG = True

# =============================================================================
# ALLOWED HOSTS
# =============================================================================
ALLOWED_HOSTS = ['*']

# =============================================================================
# EMAIL - Development (Console)
# =============================================================================
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

# =============================================================================
# LOGGING - Development
# =============================================================================
LOGGING['root']['level'] = 'DEBUG'
LOGGING['loggers']['application']['level'] = 'DEBUG'
LOGGING['loggers']['infrastructure']['level'] = 'DEBUG'

# =============================================================================
# CACHE - Development (no Redis required)
# =============================================================================
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'storefront-dev-cache',
    }
}

# =============================================================================
# CELERY - Development Override (Filesystem broker, no Redis)
# =============================================================================
CELERY_BROKER_URL = config('CELERY_BROKER_URL', default='filesystem://')
if CELERY_BROKER_URL == 'filesystem://':
    CELERY_RESULT_BACKEND = None
    CELERY_BROKER_TRANSPORT_OPTIONS = {
        'data_folder_in': os.path.join(BASE_DIR, 'broker', 'out'),
        'data_folder_out': os.path.join(BASE_DIR, 'broker', 'out'),
        'data_folder_processed': os.path.join(BASE_DIR, 'broker', 'processed'),
    }
    # Create broker directories if they don't exist
    for folder in CELERY_BROKER_TRANSPORT_OPTIONS.values():
        os.makedirs(folder, exist_ok=True)
