"""Store interface for the audit log."""

from abc import ABC, abstractmethod
from typing import Any

from audit.domain import AuditAction, AuditEvent
from common.results import WriteResult


class AuditStore(ABC):
    @abstractmethod
    def append(
        self, user_id: int | None, action: AuditAction, details: dict[str, Any]
    ) -> WriteResult[AuditEvent]:
        """Append an event; the store assigns the timestamp."""
        ...

    @abstractmethod
    def list_events(self, action: AuditAction | None = None) -> list[AuditEvent]:
        """Return events newest first."""
        ...
