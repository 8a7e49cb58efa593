"""Screening flows: a prompt template, an output schema, and a parsed verdict.

- verify_id_card: is the image a government ID with a visible face?
- verify_payment_receipt: is the image a receipt for the expected amount?
- generate_event_insights: summary and recommendations for an event's sales.
"""

import base64
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from django.core.files.uploadedfile import UploadedFile
from django.template.loader import render_to_string
from rest_framework import serializers

from verification.client import ScreeningClient
from verification.errors import AIServiceError, AIServiceUnavailableError
from verification.schemas import (
    EVENT_INSIGHTS_SCHEMA,
    ID_CARD_SCHEMA,
    PAYMENT_RECEIPT_SCHEMA,
    PAYMENT_RECEIPT_WITH_NAME_SCHEMA,
    EventInsightsOutputSerializer,
    IdCardOutputSerializer,
    PaymentReceiptOutputSerializer,
)

__all__ = [
    "AIServiceError",
    "AIServiceUnavailableError",
    "IdCardVerdict",
    "ReceiptVerdict",
    "EventInsights",
    "to_data_uri",
    "verify_id_card",
    "verify_payment_receipt",
    "generate_event_insights",
]


@dataclass(frozen=True)
class IdCardVerdict:
    is_id_card: bool
    has_face: bool
    date_of_birth: str | None
    reason: str

    @property
    def accepted(self) -> bool:
        return self.is_id_card and self.has_face


@dataclass(frozen=True)
class ReceiptVerdict:
    is_receipt: bool
    amount_matches: bool
    reason: str
    name_matches: bool | None = None

    @property
    def accepted(self) -> bool:
        return self.is_receipt and self.amount_matches and self.name_matches is not False


@dataclass(frozen=True)
class EventInsights:
    summary: str
    recommendations: str


def to_data_uri(upload: UploadedFile) -> str:
    """Encode an uploaded image as ``data:<mimetype>;base64,<data>``."""
    upload.seek(0)
    encoded = base64.b64encode(upload.read()).decode("ascii")
    upload.seek(0)
    return f"data:{upload.content_type};base64,{encoded}"


def _validated(serializer_class: type[serializers.Serializer], output: dict[str, Any]) -> dict:
    serializer = serializer_class(data=output)
    if not serializer.is_valid():
        raise AIServiceError(f"Screening output failed validation: {serializer.errors}")
    return serializer.validated_data


def verify_id_card(photo_data_uri: str, client: ScreeningClient | None = None) -> IdCardVerdict:
    client = client or ScreeningClient.from_settings()
    output = client.complete_json(
        "verifyIdCard",
        render_to_string("verification/id_card_prompt.txt"),
        ID_CARD_SCHEMA,
        image_data_uri=photo_data_uri,
    )
    data = _validated(IdCardOutputSerializer, output)
    return IdCardVerdict(
        is_id_card=data["isIdCard"],
        has_face=data["hasFace"],
        date_of_birth=data.get("dateOfBirth") or None,
        reason=data["reason"],
    )


def verify_payment_receipt(
    photo_data_uri: str,
    expected_amount: Decimal,
    expected_name: str | None = None,
    client: ScreeningClient | None = None,
) -> ReceiptVerdict:
    client = client or ScreeningClient.from_settings()
    prompt = render_to_string(
        "verification/payment_receipt_prompt.txt",
        {"expected_amount": f"{expected_amount:.2f}", "expected_name": expected_name},
    )
    schema = PAYMENT_RECEIPT_WITH_NAME_SCHEMA if expected_name else PAYMENT_RECEIPT_SCHEMA
    output = client.complete_json(
        "verifyPaymentReceipt", prompt, schema, image_data_uri=photo_data_uri
    )
    data = _validated(PaymentReceiptOutputSerializer, output)
    return ReceiptVerdict(
        is_receipt=data["isReceipt"],
        amount_matches=data["amountMatches"],
        reason=data["reason"],
        name_matches=data.get("nameMatches"),
    )


def generate_event_insights(
    total_tickets_sold: int,
    total_revenue: Decimal,
    category_distribution: dict[str, int],
    client: ScreeningClient | None = None,
) -> EventInsights:
    client = client or ScreeningClient.from_settings()
    prompt = render_to_string(
        "verification/event_insights_prompt.txt",
        {
            "total_tickets_sold": total_tickets_sold,
            "total_revenue": f"{total_revenue:.2f}",
            "category_distribution": category_distribution,
        },
    )
    output = client.complete_json("realTimeEventInsights", prompt, EVENT_INSIGHTS_SCHEMA)
    data = _validated(EventInsightsOutputSerializer, output)
    return EventInsights(summary=data["summary"], recommendations=data["recommendations"])
