"""Tests for registration, login, profile and identity uploads."""

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from accounts.domain import VerificationStatus
from accounts.domain.errors import (
    EmailTakenError,
    InvalidUploadError,
    VerificationNotAllowedError,
    VerificationRejectedError,
    WrongPasswordError,
)
from accounts.services.account_service import AccountService
from audit.domain import AuditAction
from audit.models import AuditEvent
from audit.services.audit_service import AuditService
from fakes import FakeAccountStore, FakeAuditStore, make_account
from verification.flows import AIServiceError, IdCardVerdict

GOOD_ID = IdCardVerdict(is_id_card=True, has_face=True, date_of_birth="1990-04-01", reason="Valid ID.")
NO_FACE = IdCardVerdict(is_id_card=True, has_face=False, date_of_birth=None, reason="No face visible.")


def id_photo(content_type: str = "image/jpeg", size: int = 128) -> SimpleUploadedFile:
    return SimpleUploadedFile("id.jpg", b"\xff\xd8\xff" + b"0" * size, content_type=content_type)


def service_with(*accounts, checker=None, max_upload_bytes=1024 * 1024):
    def default_checker(data_uri):
        return GOOD_ID

    store = FakeAccountStore(*accounts)
    audit = FakeAuditStore()
    service = AccountService(
        store, AuditService(audit), id_checker=checker or default_checker, max_upload_bytes=max_upload_bytes
    )
    return service, store, audit


class TestAccountService:
    def test_register_refuses_taken_email(self):
        service, _, _ = service_with(make_account(email="ada@example.com"))
        with pytest.raises(EmailTakenError):
            service.register("Ada", "ADA@example.com", "secret-pass")

    def test_register_starts_unverified(self):
        service, _, _ = service_with()
        account = service.register("Grace", "Grace@Example.com", "secret-pass").unwrap()

        assert account.verification_status is VerificationStatus.NOT_SUBMITTED
        assert account.email == "grace@example.com"

    def test_login_is_audited(self):
        account = make_account()
        service, _, audit = service_with(account)
        service.record_login(account)

        assert audit.events[0].action is AuditAction.USER_LOGIN
        assert audit.events[0].user_id == account.id

    def test_change_password_checks_current_one(self):
        service, store, _ = service_with()
        account = service.register("Grace", "grace@example.com", "secret-pass").unwrap()

        with pytest.raises(WrongPasswordError):
            service.change_password(account.id, "not-it", "new-secret")
        assert store.check_password(account.id, "secret-pass")

        assert service.change_password(account.id, "secret-pass", "new-secret").ok
        assert store.check_password(account.id, "new-secret")

    def test_identity_upload_moves_to_pending(self):
        service, _, _ = service_with(make_account(status=VerificationStatus.NOT_SUBMITTED))
        submission = service.submit_identity(1, id_photo())

        assert submission.result.value.verification_status is VerificationStatus.PENDING
        assert submission.advisory == "AI verification successful. DOB found: 1990-04-01."

    def test_rejected_user_may_resubmit(self):
        service, _, _ = service_with(make_account(status=VerificationStatus.REJECTED))
        assert service.submit_identity(1, id_photo()).result.ok

    @pytest.mark.parametrize("status", [VerificationStatus.PENDING, VerificationStatus.VERIFIED])
    def test_upload_refused_while_pending_or_verified(self, status):
        service, _, _ = service_with(make_account(status=status))
        with pytest.raises(VerificationNotAllowedError):
            service.submit_identity(1, id_photo())

    def test_negative_screening_rejects_upload(self):
        service, store, _ = service_with(
            make_account(status=VerificationStatus.NOT_SUBMITTED), checker=lambda data_uri: NO_FACE
        )
        with pytest.raises(VerificationRejectedError) as excinfo:
            service.submit_identity(1, id_photo())

        assert excinfo.value.message == "No face visible."
        assert store.accounts[1].verification_status is VerificationStatus.NOT_SUBMITTED

    def test_unavailable_screening_accepts_for_manual_review(self):
        def unavailable(data_uri):
            raise AIServiceError("down")

        service, _, _ = service_with(make_account(status=VerificationStatus.NOT_SUBMITTED), checker=unavailable)
        submission = service.submit_identity(1, id_photo())

        assert submission.result.value.verification_status is VerificationStatus.PENDING
        assert "reviewed manually" in submission.advisory

    def test_rejects_non_image_types(self):
        service, _, _ = service_with(make_account(status=VerificationStatus.NOT_SUBMITTED))
        with pytest.raises(InvalidUploadError):
            service.submit_identity(1, id_photo(content_type="image/gif"))

    def test_rejects_large_files(self):
        service, _, _ = service_with(make_account(status=VerificationStatus.NOT_SUBMITTED), max_upload_bytes=100)
        with pytest.raises(InvalidUploadError):
            service.submit_identity(1, id_photo(size=200))


@pytest.mark.django_db
class TestAuthApi:
    """Tests for /api/auth/*"""

    def test_register_logs_in(self, api_client):
        response = api_client.post(
            "/api/auth/register",
            {"name": "Grace", "email": "grace@example.com", "password": "secret-pass"},
            format="json",
        )
        assert response.status_code == 201
        assert response.data["verification_status"] == "NotSubmitted"
        assert api_client.get("/api/profile").status_code == 200

    def test_register_duplicate_email(self, api_client, verified_user):
        response = api_client.post(
            "/api/auth/register",
            {"name": "Ada", "email": verified_user.email, "password": "secret-pass"},
            format="json",
        )
        assert response.status_code == 409

    def test_login_records_audit_event(self, api_client, verified_user):
        response = api_client.post(
            "/api/auth/login", {"email": verified_user.email, "password": "secret-pass"}, format="json"
        )
        assert response.status_code == 200
        assert AuditEvent.objects.filter(action="user-login", user_id=verified_user.pk).count() == 1

    def test_login_wrong_password(self, api_client, verified_user):
        response = api_client.post(
            "/api/auth/login", {"email": verified_user.email, "password": "wrong"}, format="json"
        )
        assert response.status_code == 401

    def test_disabled_account_cannot_log_in(self, api_client, make_user):
        user = make_user(email="off@example.com", is_disabled=True)
        response = api_client.post(
            "/api/auth/login", {"email": user.email, "password": "secret-pass"}, format="json"
        )
        assert response.status_code == 403
        assert response.data["error"]["code"] == "ACCOUNT_DISABLED"

    def test_logout(self, api_client, verified_user):
        api_client.force_login(verified_user)
        assert api_client.post("/api/auth/logout").status_code == 204
        response = api_client.get("/api/profile")
        assert response.status_code == 403
        assert response.data["error"]["code"] == "NOT_AUTHENTICATED"


@pytest.mark.django_db
class TestProfileApi:
    """Tests for /api/profile"""

    def test_update_name(self, api_client, verified_user):
        api_client.force_login(verified_user)
        response = api_client.patch("/api/profile", {"name": "Ada Lovelace"}, format="json")

        assert response.status_code == 200
        assert response.data["name"] == "Ada Lovelace"

    def test_identity_upload_without_screening_service(self, api_client, make_user):
        user = make_user(email="new@example.com", status=VerificationStatus.NOT_SUBMITTED)
        api_client.force_login(user)

        response = api_client.post("/api/profile/identity", {"image": id_photo()}, format="multipart")

        assert response.status_code == 202
        assert response.data["account"]["verification_status"] == "Pending"
        assert "reviewed manually" in response.data["advisory"]
        user.refresh_from_db()
        assert user.id_document.name.startswith("identity/")

    def test_identity_upload_refused_when_verified(self, api_client, verified_user):
        api_client.force_login(verified_user)
        response = api_client.post("/api/profile/identity", {"image": id_photo()}, format="multipart")
        assert response.status_code == 409

    def test_change_password_keeps_session(self, api_client, verified_user):
        api_client.force_login(verified_user)
        response = api_client.post(
            "/api/profile/password",
            {"current_password": "secret-pass", "new_password": "brand-new", "confirm_password": "brand-new"},
            format="json",
        )

        assert response.status_code == 204
        assert api_client.get("/api/profile").status_code == 200
        verified_user.refresh_from_db()
        assert verified_user.check_password("brand-new")

    def test_change_password_wrong_current(self, api_client, verified_user):
        api_client.force_login(verified_user)
        response = api_client.post(
            "/api/profile/password",
            {"current_password": "guess", "new_password": "brand-new", "confirm_password": "brand-new"},
            format="json",
        )

        assert response.status_code == 400
        assert response.data["error"]["code"] == "WRONG_PASSWORD"
        verified_user.refresh_from_db()
        assert verified_user.check_password("secret-pass")

    @pytest.mark.parametrize(
        "new_password,confirm_password,message",
        [
            ("short", "short", "Ensure this field has at least 6 characters."),
            ("brand-new", "brand-old", "New passwords don't match."),
        ],
    )
    def test_change_password_validation(
        self, api_client, verified_user, new_password, confirm_password, message
    ):
        api_client.force_login(verified_user)
        response = api_client.post(
            "/api/profile/password",
            {
                "current_password": "secret-pass",
                "new_password": new_password,
                "confirm_password": confirm_password,
            },
            format="json",
        )

        assert response.status_code == 400
        assert response.data["error"]["code"] == "VALIDATION_ERROR"
        assert response.data["error"]["message"] == message
