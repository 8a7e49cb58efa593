from accounts.handlers.views import (
    AdminUserAdminFlagView,
    AdminUserDisabledView,
    AdminUserListView,
    IdentityUploadView,
    LoginView,
    LogoutView,
    PasswordChangeView,
    ProfileView,
    RegisterView,
)

__all__ = [
    "RegisterView",
    "LoginView",
    "LogoutView",
    "ProfileView",
    "PasswordChangeView",
    "IdentityUploadView",
    "AdminUserListView",
    "AdminUserAdminFlagView",
    "AdminUserDisabledView",
]
