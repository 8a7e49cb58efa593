from audit.handlers.views import AuditLogView

__all__ = ["AuditLogView"]
