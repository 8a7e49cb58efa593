"""Tests for the append-only audit log."""

import pytest

from audit.domain import AuditAction
from audit.models import AuditEvent as AuditEventModel
from audit.services.audit_service import AuditService
from audit.stores.django_store import DjangoAuditStore
from fakes import FakeAuditStore


class TestActivity:
    def test_booking_activity_mentions_ticket_count(self):
        audit = AuditService(FakeAuditStore())
        event = audit.record(1, AuditAction.CREATE_BOOKING, {"number_of_tickets": 2}).value
        assert event.activity == "Booked 2 ticket(s)"

    def test_unknown_action_filter_matches_nothing(self):
        audit = AuditService(FakeAuditStore())
        audit.record(1, AuditAction.USER_LOGIN)
        assert audit.list_events("deleted-everything") == []


@pytest.mark.django_db
class TestAuditStore:
    def test_rows_cannot_be_updated_or_deleted(self, verified_user):
        DjangoAuditStore().append(verified_user.pk, AuditAction.USER_LOGIN, {})
        row = AuditEventModel.objects.get()

        row.details = {"tampered": True}
        with pytest.raises(ValueError):
            row.save()
        with pytest.raises(ValueError):
            row.delete()

    def test_bulk_update_and_delete_are_refused(self, verified_user):
        DjangoAuditStore().append(verified_user.pk, AuditAction.USER_LOGIN, {})

        with pytest.raises(ValueError):
            AuditEventModel.objects.update(details={"tampered": True})
        with pytest.raises(ValueError):
            AuditEventModel.objects.filter(action="user-login").delete()
        assert AuditEventModel.objects.get().details == {}

    def test_deleting_the_user_keeps_their_history(self, verified_user):
        user_id = verified_user.pk
        DjangoAuditStore().append(user_id, AuditAction.USER_LOGIN, {})

        verified_user.delete()

        row = AuditEventModel.objects.get()
        assert row.user_id == user_id
        assert row.action == "user-login"

    def test_filter_by_action(self, verified_user):
        store = DjangoAuditStore()
        store.append(verified_user.pk, AuditAction.USER_LOGIN, {})
        store.append(verified_user.pk, AuditAction.CREATE_BOOKING, {"number_of_tickets": 1})

        assert len(store.list_events()) == 2
        assert len(store.list_events(AuditAction.USER_LOGIN)) == 1


@pytest.mark.django_db
class TestAuditLogApi:
    """Tests for GET /api/admin/audit-logs"""

    def test_lists_events_with_user_details(self, api_client, admin_user, verified_user):
        DjangoAuditStore().append(verified_user.pk, AuditAction.CREATE_BOOKING, {"number_of_tickets": 3})
        api_client.force_login(admin_user)

        response = api_client.get("/api/admin/audit-logs")

        assert response.status_code == 200
        assert response.data["count"] == 1
        (entry,) = response.data["results"]
        assert entry["action"] == "create-booking"
        assert entry["activity"] == "Booked 3 ticket(s)"
        assert entry["user_email"] == verified_user.email

    def test_filters_by_action(self, api_client, admin_user, verified_user):
        store = DjangoAuditStore()
        store.append(verified_user.pk, AuditAction.USER_LOGIN, {})
        store.append(verified_user.pk, AuditAction.CANCEL_BOOKING_USER, {})
        api_client.force_login(admin_user)

        response = api_client.get("/api/admin/audit-logs", {"action": "cancel-booking-user"})
        assert [entry["action"] for entry in response.data["results"]] == ["cancel-booking-user"]
