"""Account service: registration, profile, identity upload and admin flags."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from django.core.files.uploadedfile import UploadedFile

from accounts.domain import UPLOADABLE_STATUSES, Account
from accounts.domain.errors import (
    EmailTakenError,
    InvalidUploadError,
    UserNotFoundError,
    VerificationNotAllowedError,
    VerificationRejectedError,
    WrongPasswordError,
)
from accounts.stores.interfaces import AccountStore
from audit.domain import AuditAction, AuditEvent
from audit.services.audit_service import AuditService
from common.results import WriteResult
from verification.flows import AIServiceError, IdCardVerdict, to_data_uri, verify_id_card

logger = logging.getLogger(__name__)

ID_DOCUMENT_CONTENT_TYPES = frozenset({"image/jpeg", "image/png"})


@dataclass(frozen=True)
class IdentitySubmission:
    result: WriteResult[Account]
    # Screening outcome shown to the user alongside the submission.
    advisory: str


class AccountService:
    def __init__(
        self,
        store: AccountStore,
        audit: AuditService,
        id_checker: Callable[[str], IdCardVerdict] = verify_id_card,
        max_upload_bytes: int = 1024 * 1024,
    ) -> None:
        self._store = store
        self._audit = audit
        self._id_checker = id_checker
        self._max_upload_bytes = max_upload_bytes

    def register(self, name: str, email: str, password: str) -> WriteResult[Account]:
        """Create an account that still needs identity verification.

        Raises:
            EmailTakenError: If the email is already registered.
        """
        if self._store.email_taken(email):
            raise EmailTakenError()
        result = self._store.create_account(name, email.lower(), password)
        if result.ok:
            logger.info("Account registered", extra={"user_id": result.value.id})
        return result

    def record_login(self, account: Account) -> WriteResult[AuditEvent]:
        return self._audit.record(account.id, AuditAction.USER_LOGIN)

    def get_account(self, user_id: int) -> Account:
        account = self._store.get_account(user_id)
        if account is None:
            raise UserNotFoundError(user_id)
        return account

    def list_accounts(self) -> list[Account]:
        return self._store.list_accounts()

    def update_name(self, user_id: int, name: str) -> WriteResult[Account]:
        self.get_account(user_id)
        return self._store.update_name(user_id, name)

    def change_password(self, user_id: int, current: str, new: str) -> WriteResult[Account]:
        """Replace the password after checking the current one.

        Raises:
            UserNotFoundError: If the account does not exist.
            WrongPasswordError: If ``current`` does not match.
        """
        self.get_account(user_id)
        if not self._store.check_password(user_id, current):
            raise WrongPasswordError()
        result = self._store.set_password(user_id, new)
        if result.ok:
            logger.info("Password changed", extra={"user_id": user_id})
        return result

    def submit_identity(self, user_id: int, upload: UploadedFile) -> IdentitySubmission:
        """Screen an identity document and put the account under review.

        The screening check is advisory, but a negative verdict blocks the
        upload; an unreachable screening service does not.

        Raises:
            UserNotFoundError: If the account does not exist.
            VerificationNotAllowedError: If the account is Pending or Verified.
            InvalidUploadError: If the file is not a JPEG/PNG under the size limit.
            VerificationRejectedError: If screening says it is not a usable ID.
        """
        account = self.get_account(user_id)
        if account.verification_status not in UPLOADABLE_STATUSES:
            raise VerificationNotAllowedError(account.verification_status.value)

        if upload.content_type not in ID_DOCUMENT_CONTENT_TYPES:
            raise InvalidUploadError("Please upload a JPG or PNG image file.")
        if upload.size > self._max_upload_bytes:
            limit_mb = self._max_upload_bytes / (1024 * 1024)
            raise InvalidUploadError(f"Please upload an image smaller than {limit_mb:g}MB.")

        try:
            verdict = self._id_checker(to_data_uri(upload))
        except AIServiceError:
            logger.warning("ID screening unavailable, accepting for manual review", extra={"user_id": user_id})
            advisory = "Could not run AI check. Your submission will be reviewed manually."
        else:
            if not verdict.accepted:
                raise VerificationRejectedError(verdict.reason)
            advisory = "AI verification successful."
            if verdict.date_of_birth:
                advisory += f" DOB found: {verdict.date_of_birth}."

        result = self._store.submit_identity(user_id, upload)
        if result.ok:
            logger.info("Identity document submitted", extra={"user_id": user_id})
        return IdentitySubmission(result=result, advisory=advisory)

    def set_admin(self, user_id: int, is_admin: bool) -> WriteResult[Account]:
        self.get_account(user_id)
        result = self._store.set_admin(user_id, is_admin)
        if result.ok:
            logger.info("Admin flag set to %s", is_admin, extra={"user_id": user_id})
        return result

    def set_disabled(self, user_id: int, is_disabled: bool) -> WriteResult[Account]:
        self.get_account(user_id)
        result = self._store.set_disabled(user_id, is_disabled)
        if result.ok:
            logger.info("Disabled flag set to %s", is_disabled, extra={"user_id": user_id})
        return result
