"""
Domain Events.

Domain events are records of significant business occurrences.
They are used for decoupling and eventual consistency: the ERP
outbound publisher listens to them instead of being called from
the code that changes users, companies and orders.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for all domain events.

    Domain events are immutable records of something that happened in the domain.
    """

    instance: Any = None
    changes: Dict[str, Any] = field(default_factory=dict)
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__


# =============================================================================
# USER EVENTS
# =============================================================================

@dataclass(frozen=True)
class UserCreated(DomainEvent):
    """Event raised when a user registers or is created by an administrator."""


@dataclass(frozen=True)
class UserUpdated(DomainEvent):
    """Event raised when user fields change. `changes` maps field -> new value."""


@dataclass(frozen=True)
class UserDeleted(DomainEvent):
    """Event raised when a user is deleted."""


# =============================================================================
# COMPANY EVENTS
# =============================================================================

@dataclass(frozen=True)
class CompanyCreated(DomainEvent):
    """Event raised when a company (legal entity of a customer) is created."""


@dataclass(frozen=True)
class CompanyUpdated(DomainEvent):
    """Event raised when a company is updated."""


@dataclass(frozen=True)
class CompanyDeleted(DomainEvent):
    """Event raised when a company is (soft) deleted."""


# =============================================================================
# ORDER EVENTS
# =============================================================================

@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    """Event raised when an order is placed."""


@dataclass(frozen=True)
class OrderUpdated(DomainEvent):
    """Event raised when an order changes (status, comment, totals)."""


@dataclass(frozen=True)
class OrderDeleted(DomainEvent):
    """Event raised when an order is (soft) deleted."""
