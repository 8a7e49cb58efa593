"""HTTP handlers for authentication, profile and admin user management."""

from django.conf import settings
from django.contrib.auth import authenticate, login, logout, update_session_auth_hash
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.domain.errors import AccountDisabledError, InvalidCredentialsError
from accounts.handlers.serializers import (
    AccountSerializer,
    FlagSerializer,
    ImageUploadSerializer,
    LoginSerializer,
    PasswordChangeSerializer,
    ProfileUpdateSerializer,
    RegisterSerializer,
)
from accounts.models import User
from accounts.services.account_service import AccountService
from accounts.stores.django_store import DjangoAccountStore
from audit.services.audit_service import AuditService
from audit.stores.django_store import DjangoAuditStore


def get_account_service() -> AccountService:
    return AccountService(
        DjangoAccountStore(),
        AuditService(DjangoAuditStore()),
        max_upload_bytes=settings.TICKETSWIFT_ID_UPLOAD_MAX_BYTES,
    )


class RegisterView(APIView):
    """Handler for POST /api/auth/register"""

    def post(self, request: Request) -> Response:
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        account = get_account_service().register(**serializer.validated_data).unwrap()
        login(request, User.objects.get(pk=account.id), backend="django.contrib.auth.backends.ModelBackend")
        return Response(AccountSerializer(account).data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    def post(self, request: Request) -> Response:
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = authenticate(
            request,
            username=serializer.validated_data["email"].lower(),
            password=serializer.validated_data["password"],
        )
        if user is None:
            raise InvalidCredentialsError()
        if user.is_disabled:
            raise AccountDisabledError()
        login(request, user)

        service = get_account_service()
        account = service.get_account(user.pk)
        service.record_login(account)
        return Response(AccountSerializer(account).data)


class LogoutView(APIView):
    """Handler for POST /api/auth/logout"""

    def post(self, request: Request) -> Response:
        logout(request)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ProfileView(APIView):
    """Handler for GET/PATCH /api/profile"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        account = get_account_service().get_account(request.user.pk)
        return Response(AccountSerializer(account).data)

    def patch(self, request: Request) -> Response:
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        account = get_account_service().update_name(
            request.user.pk, serializer.validated_data["name"]
        ).unwrap()
        return Response(AccountSerializer(account).data)


class PasswordChangeView(APIView):
    """Handler for POST /api/profile/password"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request) -> Response:
        serializer = PasswordChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        get_account_service().change_password(
            request.user.pk,
            serializer.validated_data["current_password"],
            serializer.validated_data["new_password"],
        ).unwrap()
        # Keep this session signed in; other sessions are invalidated.
        request.user.refresh_from_db()
        update_session_auth_hash(request, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


class IdentityUploadView(APIView):
    """Handler for POST /api/profile/identity"""

    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request: Request) -> Response:
        serializer = ImageUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        submission = get_account_service().submit_identity(
            request.user.pk, serializer.validated_data["image"]
        )
        account = submission.result.unwrap()
        return Response(
            {"account": AccountSerializer(account).data, "advisory": submission.advisory},
            status=status.HTTP_202_ACCEPTED,
        )


class AdminUserListView(APIView):
    """Handler for GET /api/admin/users"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request) -> Response:
        accounts = get_account_service().list_accounts()
        return Response(AccountSerializer(accounts, many=True).data)


class AdminUserAdminFlagView(APIView):
    """Handler for POST /api/admin/users/{user_id}/admin"""

    permission_classes = [IsAdminUser]

    def post(self, request: Request, user_id: int) -> Response:
        serializer = FlagSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        account = get_account_service().set_admin(
            user_id, serializer.validated_data["value"]
        ).unwrap()
        return Response(AccountSerializer(account).data)


class AdminUserDisabledView(APIView):
    """Handler for POST /api/admin/users/{user_id}/disabled"""

    permission_classes = [IsAdminUser]

    def post(self, request: Request, user_id: int) -> Response:
        serializer = FlagSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        account = get_account_service().set_disabled(
            user_id, serializer.validated_data["value"]
        ).unwrap()
        return Response(AccountSerializer(account).data)
