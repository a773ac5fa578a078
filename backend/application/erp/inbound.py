"""
Inbound ERP message routing.

Decides which job handles a decoded ERP message. Unknown message
shapes are acknowledged and dropped.
"""

import logging
from typing import Any, List

logger = logging.getLogger(__name__)


def route_erp_message(payload: Any) -> List[str]:
    """Enqueue handlers for a decoded message; returns the routes taken."""
    from application.tasks.erp_tasks import process_erp_user_update

    routes = []
    if isinstance(payload, dict) and 'user' in payload:
        process_erp_user_update.delay(payload)
        routes.append('user')

    if not routes:
        keys = sorted(payload) if isinstance(payload, dict) else type(payload).__name__
        logger.info(f"ERP message ignored, no handler for {keys}")

    return routes
