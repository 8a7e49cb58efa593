"""HTTP handlers for the admin audit log viewer."""

from rest_framework.pagination import LimitOffsetPagination
from rest_framework.permissions import IsAdminUser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.stores.django_store import DjangoAccountStore
from audit.handlers.serializers import AuditEventSerializer
from audit.services.audit_service import AuditService
from audit.stores.django_store import DjangoAuditStore


def get_audit_service() -> AuditService:
    return AuditService(DjangoAuditStore())


class AuditLogView(APIView):
    """Handler for GET /api/admin/audit-logs"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request) -> Response:
        events = get_audit_service().list_events(request.query_params.get("action"))
        users = {account.id: account for account in DjangoAccountStore().list_accounts()}

        paginator = LimitOffsetPagination()
        page = paginator.paginate_queryset(events, request, view=self)
        data = AuditEventSerializer(page, many=True, context={"users": users}).data
        return paginator.get_paginated_response(data)
