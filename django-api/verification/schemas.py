"""Output schemas for screening requests.

Each flow sends a JSON schema to the model and validates the answer with the
matching DRF serializer.
"""

from rest_framework import serializers

ID_CARD_SCHEMA = {
    "type": "object",
    "properties": {
        "isIdCard": {
            "type": "boolean",
            "description": "Whether the image appears to be a government-issued ID card.",
        },
        "hasFace": {
            "type": "boolean",
            "description": "Whether a person's face is clearly visible on the ID card.",
        },
        "dateOfBirth": {
            "type": ["string", "null"],
            "description": "Date of birth in YYYY-MM-DD format, or null if not found.",
        },
        "reason": {
            "type": "string",
            "description": "Brief explanation for the decision, especially if it fails.",
        },
    },
    "required": ["isIdCard", "hasFace", "dateOfBirth", "reason"],
    "additionalProperties": False,
}

PAYMENT_RECEIPT_SCHEMA = {
    "type": "object",
    "properties": {
        "isReceipt": {
            "type": "boolean",
            "description": "Whether the image appears to be a payment receipt or transaction screenshot.",
        },
        "amountMatches": {
            "type": "boolean",
            "description": "Whether the amount matches the expected amount. True if no amount is found.",
        },
        "reason": {
            "type": "string",
            "description": "Brief explanation for the decision, especially if it fails.",
        },
    },
    "required": ["isReceipt", "amountMatches", "reason"],
    "additionalProperties": False,
}

# The older request shape also checks the sender's name.
PAYMENT_RECEIPT_WITH_NAME_SCHEMA = {
    **PAYMENT_RECEIPT_SCHEMA,
    "properties": {
        **PAYMENT_RECEIPT_SCHEMA["properties"],
        "nameMatches": {
            "type": "boolean",
            "description": "Whether the name loosely matches the expected name. True if no name is found.",
        },
    },
    "required": ["isReceipt", "amountMatches", "nameMatches", "reason"],
}

EVENT_INSIGHTS_SCHEMA = {
    "type": "object",
    "properties": {
        "summary": {
            "type": "string",
            "description": "A concise summary of the event performance.",
        },
        "recommendations": {
            "type": "string",
            "description": "Recommendations for improving event performance in the future.",
        },
    },
    "required": ["summary", "recommendations"],
    "additionalProperties": False,
}


class IdCardOutputSerializer(serializers.Serializer):
    isIdCard = serializers.BooleanField()
    hasFace = serializers.BooleanField()
    dateOfBirth = serializers.CharField(allow_null=True, allow_blank=True, required=False)
    reason = serializers.CharField(allow_blank=True)


class PaymentReceiptOutputSerializer(serializers.Serializer):
    isReceipt = serializers.BooleanField()
    amountMatches = serializers.BooleanField()
    nameMatches = serializers.BooleanField(required=False, allow_null=True)
    reason = serializers.CharField(allow_blank=True)


class EventInsightsOutputSerializer(serializers.Serializer):
    summary = serializers.CharField()
    recommendations = serializers.CharField()
