"""
ERP Domain - Publisher Interface (Port).

Abstract interface through which outbound envelopes leave the system.
The broker-backed implementation lives in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class ErpEventPublisher(ABC):
    """Port for publishing raw ERP messages to named durable queues."""

    @abstractmethod
    def publish(self, queue_name: str, message: Dict[str, Any]) -> None:
        """Publish one message body to the given queue."""
        pass
