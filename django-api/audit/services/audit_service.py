"""Audit service: append and read the audit log."""

import logging
from typing import Any

from audit.domain import AuditAction, AuditEvent
from audit.stores.interfaces import AuditStore
from common.results import WriteResult

logger = logging.getLogger(__name__)


class AuditService:
    def __init__(self, store: AuditStore) -> None:
        self._store = store

    def record(
        self, user_id: int | None, action: AuditAction, details: dict[str, Any] | None = None
    ) -> WriteResult[AuditEvent]:
        """Append an audit event.

        A failed append is logged and returned; it never fails the action
        being audited.
        """
        result = self._store.append(user_id, action, details or {})
        if not result.ok:
            logger.error(
                "Audit event was not recorded",
                extra={"user_id": user_id, "action": action.value},
            )
        return result

    def list_events(self, action: str | None = None) -> list[AuditEvent]:
        """Return audit events newest first. Unknown action filters match nothing."""
        if not action:
            return self._store.list_events()
        try:
            parsed = AuditAction(action)
        except ValueError:
            return []
        return self._store.list_events(parsed)
