"""Django ORM implementation of the AccountStore."""

import logging

from django.core.files import File
from django.db import DatabaseError

from accounts.domain import Account, VerificationStatus
from accounts.models import User
from accounts.stores.interfaces import AccountStore
from common.errors import PersistenceError
from common.results import WriteResult

logger = logging.getLogger(__name__)


def to_domain(user: User) -> Account:
    return Account(
        id=user.pk,
        name=user.name,
        email=user.email,
        verification_status=VerificationStatus(user.verification_status),
        is_admin=user.is_staff,
        is_disabled=user.is_disabled,
        date_joined=user.date_joined,
    )


class DjangoAccountStore(AccountStore):
    """Account store backed by the custom auth user model."""

    def get_account(self, user_id: int) -> Account | None:
        user = User.objects.filter(pk=user_id).first()
        return to_domain(user) if user is not None else None

    def list_accounts(self) -> list[Account]:
        return [to_domain(user) for user in User.objects.order_by("-date_joined")]

    def count_accounts(self) -> int:
        return User.objects.count()

    def email_taken(self, email: str) -> bool:
        return User.objects.filter(email__iexact=email).exists()

    def create_account(self, name: str, email: str, password: str) -> WriteResult[Account]:
        try:
            user = User.objects.create_user(
                username=email, email=email, password=password, name=name
            )
        except DatabaseError:
            logger.exception("Account create failed")
            return WriteResult.failure(PersistenceError("create", "users"))
        return WriteResult.success(to_domain(user))

    def update_name(self, user_id: int, name: str) -> WriteResult[Account]:
        return self._update(user_id, name=name)

    def check_password(self, user_id: int, password: str) -> bool:
        user = User.objects.filter(pk=user_id).first()
        return user is not None and user.check_password(password)

    def set_password(self, user_id: int, password: str) -> WriteResult[Account]:
        try:
            user = User.objects.get(pk=user_id)
            user.set_password(password)
            user.save(update_fields=["password"])
        except (DatabaseError, User.DoesNotExist):
            logger.exception("Password change failed", extra={"user_id": user_id})
            return WriteResult.failure(PersistenceError("update", f"users/{user_id}"))
        return WriteResult.success(to_domain(user))

    def submit_identity(self, user_id: int, document: File) -> WriteResult[Account]:
        path = f"users/{user_id}"
        try:
            user = User.objects.get(pk=user_id)
            user.id_document.save(document.name, document, save=False)
            user.verification_status = VerificationStatus.PENDING.value
            user.save(update_fields=["id_document", "verification_status"])
        except (DatabaseError, OSError):
            logger.exception("Identity submission failed", extra={"user_id": user_id})
            return WriteResult.failure(PersistenceError("update", path))
        return WriteResult.success(to_domain(user))

    def set_verification_status(
        self, user_id: int, status: VerificationStatus
    ) -> WriteResult[Account]:
        return self._update(user_id, verification_status=status.value)

    def set_admin(self, user_id: int, is_admin: bool) -> WriteResult[Account]:
        return self._update(user_id, is_staff=is_admin)

    def set_disabled(self, user_id: int, is_disabled: bool) -> WriteResult[Account]:
        return self._update(user_id, is_disabled=is_disabled)

    def announcement_recipients(self) -> list[str]:
        return list(
            User.objects.filter(is_disabled=False)
            .exclude(email="")
            .values_list("email", flat=True)
        )

    def _update(self, user_id: int, **fields) -> WriteResult[Account]:
        try:
            User.objects.filter(pk=user_id).update(**fields)
            user = User.objects.get(pk=user_id)
        except (DatabaseError, User.DoesNotExist):
            logger.exception("Account update failed", extra={"user_id": user_id})
            return WriteResult.failure(PersistenceError("update", f"users/{user_id}"))
        return WriteResult.success(to_domain(user))
