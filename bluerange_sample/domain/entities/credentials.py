"""Credentials attached to every request sent to the server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True, frozen=True)
class Credentials:
    """Access token and tenant scope, fixed for the lifetime of the process."""

    access_token: Optional[str] = None
    tenant_organization_uuid: Optional[str] = None

    @property
    def has_access_token(self) -> bool:
        return self.access_token is not None

    def __repr__(self) -> str:
        token = "***" if self.access_token is not None else None
        return (
            f"Credentials(access_token={token!r}, "
            f"tenant_organization_uuid={self.tenant_organization_uuid!r})"
        )
