"""Domain errors for the accounts module."""

from common.errors import DomainError, ErrorCode


class UserNotFoundError(DomainError):
    """Raised when a user is not found."""

    def __init__(self, user_id: int | str) -> None:
        super().__init__(code=ErrorCode.USER_NOT_FOUND, message="User not found")
        self.user_id = user_id


class InvalidCredentialsError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid email or password.",
        )


class WrongPasswordError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.WRONG_PASSWORD,
            message="The current password you entered is incorrect.",
        )


class AccountDisabledError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ACCOUNT_DISABLED,
            message="Your account has been deactivated. Please contact support.",
        )


class EmailTakenError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMAIL_TAKEN,
            message="An account with this email already exists.",
        )


class InvalidUploadError(DomainError):
    """Raised when an uploaded image fails type or size checks."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_UPLOAD, message=message)


class VerificationRejectedError(DomainError):
    """Raised when the screening check says the upload is not a usable ID card."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.VERIFICATION_REJECTED,
            message=reason or "This does not appear to be a valid ID card. Please try again.",
        )


class VerificationNotAllowedError(DomainError):
    """Raised when the account's status does not accept a new upload."""

    def __init__(self, status: str) -> None:
        super().__init__(
            code=ErrorCode.VERIFICATION_NOT_ALLOWED,
            message=f"Identity documents cannot be submitted while verification is {status}.",
        )
        self.status = status
