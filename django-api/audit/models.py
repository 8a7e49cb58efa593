"""Django ORM models (persistence layer) for the audit log."""

import uuid

from django.db import models

from audit.domain import AuditAction

APPEND_ONLY = "Audit events are append-only"


class AuditEventQuerySet(models.QuerySet):
    def update(self, **kwargs):
        raise ValueError(APPEND_ONLY)

    def delete(self):
        raise ValueError(APPEND_ONLY)


class AuditEvent(models.Model):
    """Append-only audit record. Saving an existing row or deleting one is refused.

    ``user_id`` is a plain column, not a foreign key, so removing an account
    leaves its history untouched.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.BigIntegerField(null=True, db_index=True)
    action = models.CharField(
        max_length=40,
        choices=[(action.value, action.value) for action in AuditAction],
    )
    timestamp = models.DateTimeField(auto_now_add=True)
    details = models.JSONField(default=dict, blank=True)

    objects = AuditEventQuerySet.as_manager()

    class Meta:
        ordering = ["-timestamp"]
        indexes = [
            models.Index(fields=["-timestamp"], name="audit_timestamp_idx"),
            models.Index(fields=["action"], name="audit_action_idx"),
        ]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError(APPEND_ONLY)
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError(APPEND_ONLY)

    def __str__(self) -> str:
        return f"{self.action} by {self.user_id} at {self.timestamp}"
