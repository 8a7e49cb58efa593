"""Store interfaces for accounts."""

from abc import ABC, abstractmethod

from django.core.files import File

from accounts.domain import Account, VerificationStatus
from common.results import WriteResult


class AccountStore(ABC):
    """Interface for account persistence operations."""

    @abstractmethod
    def get_account(self, user_id: int) -> Account | None:
        ...

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """Return all accounts, newest first."""
        ...

    @abstractmethod
    def count_accounts(self) -> int:
        ...

    @abstractmethod
    def email_taken(self, email: str) -> bool:
        ...

    @abstractmethod
    def create_account(self, name: str, email: str, password: str) -> WriteResult[Account]:
        """Create an account in NotSubmitted status."""
        ...

    @abstractmethod
    def update_name(self, user_id: int, name: str) -> WriteResult[Account]:
        ...

    @abstractmethod
    def check_password(self, user_id: int, password: str) -> bool:
        ...

    @abstractmethod
    def set_password(self, user_id: int, password: str) -> WriteResult[Account]:
        """Store a new password hash for the account."""
        ...

    @abstractmethod
    def submit_identity(self, user_id: int, document: File) -> WriteResult[Account]:
        """Store the identity document and move the account to Pending."""
        ...

    @abstractmethod
    def set_verification_status(
        self, user_id: int, status: VerificationStatus
    ) -> WriteResult[Account]:
        ...

    @abstractmethod
    def set_admin(self, user_id: int, is_admin: bool) -> WriteResult[Account]:
        ...

    @abstractmethod
    def set_disabled(self, user_id: int, is_disabled: bool) -> WriteResult[Account]:
        ...

    @abstractmethod
    def announcement_recipients(self) -> list[str]:
        """Emails of accounts that are not disabled."""
        ...
