from rest_framework import serializers


class AccountSerializer(serializers.Serializer):
    """Serializer for Account domain model."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.EmailField()
    verification_status = serializers.CharField(source="verification_status.value")
    is_verified = serializers.BooleanField()
    is_admin = serializers.BooleanField()
    is_disabled = serializers.BooleanField()
    date_joined = serializers.DateTimeField()


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=2, max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class ProfileUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=2, max_length=150)


class ImageUploadSerializer(serializers.Serializer):
    image = serializers.FileField()


class FlagSerializer(serializers.Serializer):
    value = serializers.BooleanField()


class PasswordChangeSerializer(serializers.Serializer):
    current_password = serializers.CharField(write_only=True)
    new_password = serializers.CharField(min_length=6, write_only=True)
    confirm_password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        if attrs["new_password"] != attrs["confirm_password"]:
            raise serializers.ValidationError({"confirm_password": "New passwords don't match."})
        return attrs
