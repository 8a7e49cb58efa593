"""Django ORM implementation of the AuditStore."""

import logging
from typing import Any

from django.db import DatabaseError

from audit import models
from audit.domain import AuditAction, AuditEvent
from audit.stores.interfaces import AuditStore
from common.errors import PersistenceError
from common.results import WriteResult

logger = logging.getLogger(__name__)


def to_domain(event: models.AuditEvent) -> AuditEvent:
    return AuditEvent(
        id=event.id,
        user_id=event.user_id,
        action=AuditAction(event.action),
        timestamp=event.timestamp,
        details=event.details or {},
    )


class DjangoAuditStore(AuditStore):
    def append(
        self, user_id: int | None, action: AuditAction, details: dict[str, Any]
    ) -> WriteResult[AuditEvent]:
        try:
            event = models.AuditEvent.objects.create(
                user_id=user_id, action=action.value, details=details
            )
        except DatabaseError:
            logger.exception("Audit append failed", extra={"action": action.value})
            return WriteResult.failure(PersistenceError("create", "audit_logs"))
        return WriteResult.success(to_domain(event))

    def list_events(self, action: AuditAction | None = None) -> list[AuditEvent]:
        events = models.AuditEvent.objects.all()
        if action is not None:
            events = events.filter(action=action.value)
        return [to_domain(event) for event in events]
