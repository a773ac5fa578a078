"""
Inbound ERP user updates.

Applies the ERP's verdict on a storefront user (ERP id and moderation
status). The write goes through a queryset update: no model signals
fire, so the change is never echoed back to the ERP.
"""

import logging
from typing import Any

from django.core.exceptions import ValidationError

from domain.erp.messages import extract_user_update
from infrastructure.persistence.models import User, UserStatusChoices

logger = logging.getLogger(__name__)


def apply_erp_user_update(payload: Any) -> bool:
    """
    Apply one inbound user update.

    Idempotent: re-applying the same message changes nothing. Returns
    True when the stored user changed.
    """
    update = extract_user_update(payload)
    if update is None:
        logger.info("ERP user update ignored: user id or erp_id missing")
        return False

    try:
        user = User.objects.get(pk=update['user_id'])
    except (User.DoesNotExist, ValidationError, ValueError):
        logger.warning(f"ERP user update for unknown user {update['user_id']}")
        return False

    values = {}
    if user.erp_id != update['erp_id']:
        values['erp_id'] = update['erp_id']

    status = update['status']
    if status:
        if status not in UserStatusChoices.values:
            logger.warning(f"ERP user update for {user.pk}: unknown status '{status}' ignored")
        elif user.status != status:
            values['status'] = status

    if not values:
        return False

    User.objects.filter(pk=user.pk).update(**values)
    logger.info(f"User {user.pk} updated from ERP: {', '.join(sorted(values))}")
    return True
