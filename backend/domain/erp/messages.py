"""
ERP Domain - Message Envelope.

Every message exchanged with the ERP is a JSON object of the form
``{event, timestamp, <entity>: <snapshot>}``. There is no schema
version: consumers tolerate unknown and missing fields.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ErpEnvelope:
    """Outbound envelope for one domain event."""

    event: str
    entity_key: str
    snapshot: Dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_message(self) -> Dict[str, Any]:
        """Render the JSON-ready message body."""
        message = {
            'event': self.event,
            'timestamp': self.timestamp.isoformat(),
            self.entity_key: self.snapshot,
        }
        for key, value in self.extra.items():
            message.setdefault(key, value)
        return message


def extract_user_update(payload: Any) -> Optional[Dict[str, Any]]:
    """
    Pull the user-update fields out of an inbound ERP message.

    Returns ``{'user_id', 'erp_id', 'status'}`` or None when the message
    does not identify both the user and the ERP id.
    """
    if not isinstance(payload, dict):
        return None

    user = payload.get('user')
    user_id = user.get('id') if isinstance(user, dict) else None
    erp_id = payload.get('erp_id')

    if not user_id or not erp_id:
        return None

    return {
        'user_id': user_id,
        'erp_id': str(erp_id),
        'status': payload.get('status') or None,
    }
