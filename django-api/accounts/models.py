"""Django ORM models (persistence layer) for accounts."""

from django.contrib.auth.models import AbstractUser
from django.db import models

from accounts.domain import VerificationStatus


class User(AbstractUser):
    """Authentication identity plus booking-related profile fields.

    ``is_staff`` is the admin flag. Only the verification status is stored;
    whether the user is verified is derived from it.
    """

    name = models.CharField(max_length=150, blank=True)
    email = models.EmailField(unique=True)
    verification_status = models.CharField(
        max_length=20,
        choices=[(status.value, status.value) for status in VerificationStatus],
        default=VerificationStatus.NOT_SUBMITTED.value,
    )
    id_document = models.FileField(upload_to="identity/", blank=True)
    is_disabled = models.BooleanField(default=False)

    class Meta:
        indexes = [
            models.Index(fields=["verification_status"], name="user_verification_idx"),
        ]

    def __str__(self) -> str:
        return self.name or self.email
