"""Pytest configuration and shared fixtures."""

import uuid
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.domain import VerificationStatus


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def isolated_settings(settings, tmp_path):
    """Keep uploads in a temp dir and the screening service unconfigured."""
    settings.MEDIA_ROOT = tmp_path
    settings.TICKETSWIFT_AI = {
        "BASE_URL": "https://ai.test/v1",
        "API_KEY": None,
        "MODEL": "test-model",
        "TIMEOUT": 5.0,
    }
    settings.TICKETSWIFT_MAX_TICKETS_PER_EVENT = 3
    return settings


@pytest.fixture
def make_user(db):
    from accounts.models import User

    def factory(
        email: str = "ada@example.com",
        status: VerificationStatus = VerificationStatus.VERIFIED,
        is_staff: bool = False,
        is_disabled: bool = False,
    ) -> User:
        return User.objects.create_user(
            username=email,
            email=email,
            password="secret-pass",
            name=email.split("@")[0].title(),
            verification_status=status.value,
            is_staff=is_staff,
            is_disabled=is_disabled,
        )

    return factory


@pytest.fixture
def verified_user(make_user):
    return make_user()


@pytest.fixture
def admin_user(make_user):
    return make_user(email="admin@example.com", is_staff=True)


@pytest.fixture
def make_db_event(db):
    from events.models import Event, TicketCategory

    def factory(
        name: str = "Summer Fest",
        categories: tuple[tuple[str, str, int, int], ...] = (("General", "75.00", 100, 0),),
        booking_deadline=None,
        starts_at=None,
        category: str = "Music",
    ) -> Event:
        event = Event.objects.create(
            name=name,
            description="An evening of live music.",
            venue="Main Hall",
            category=category,
            starts_at=starts_at or timezone.now() + timedelta(days=30),
            booking_deadline=booking_deadline,
        )
        for position, (category_name, price, limit, sold) in enumerate(categories):
            TicketCategory.objects.create(
                event=event,
                name=category_name,
                price=Decimal(price),
                limit=limit,
                sold=sold,
                position=position,
            )
        return event

    return factory


@pytest.fixture
def png_upload():
    from django.core.files.uploadedfile import SimpleUploadedFile

    def factory(name: str = "receipt.png", content_type: str = "image/png", size: int = 64):
        return SimpleUploadedFile(name, b"\x89PNG\r\n\x1a\n" + b"0" * size, content_type=content_type)

    return factory


@pytest.fixture
def random_id() -> str:
    return str(uuid.uuid4())
