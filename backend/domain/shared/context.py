"""
Storefront Context.

Explicit carrier for "who is asking and from where". Services that
depend on the current user or region receive it as an argument
instead of looking it up from request-global state.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class StorefrontContext:
    """Current user and region for stock, discount and currency lookups."""

    user: Optional[Any] = None
    region: Optional[Any] = None

    @classmethod
    def for_user(cls, user: Optional[Any]) -> StorefrontContext:
        """Build a context whose region is the user's own region."""
        region = getattr(user, 'region', None) if user is not None else None
        return cls(user=user, region=region)

    @classmethod
    def anonymous(cls) -> StorefrontContext:
        return cls()

    @property
    def region_id(self) -> Optional[Any]:
        return getattr(self.region, 'pk', None)
