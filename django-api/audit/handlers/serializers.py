from rest_framework import serializers


class AuditEventSerializer(serializers.Serializer):
    """Serializer for AuditEvent domain model.

    Expects ``context["users"]`` mapping user id to Account for name lookup.
    """

    id = serializers.UUIDField()
    user_id = serializers.IntegerField(allow_null=True)
    user_name = serializers.SerializerMethodField()
    user_email = serializers.SerializerMethodField()
    action = serializers.CharField(source="action.value")
    activity = serializers.CharField()
    timestamp = serializers.DateTimeField()
    details = serializers.DictField()

    def _user(self, event):
        return self.context.get("users", {}).get(event.user_id)

    def get_user_name(self, event) -> str | None:
        user = self._user(event)
        return user.name if user else None

    def get_user_email(self, event) -> str | None:
        user = self._user(event)
        return user.email if user else None
