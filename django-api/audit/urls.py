from django.urls import path

from audit.handlers import AuditLogView

urlpatterns = [
    path("audit-logs", AuditLogView.as_view(), name="admin-audit-logs"),
]
