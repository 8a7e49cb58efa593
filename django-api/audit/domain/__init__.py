from audit.domain.models import AuditAction, AuditEvent

__all__ = ["AuditAction", "AuditEvent"]
