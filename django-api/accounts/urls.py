from django.urls import path

from accounts.handlers import (
    IdentityUploadView,
    LoginView,
    LogoutView,
    PasswordChangeView,
    ProfileView,
    RegisterView,
)

urlpatterns = [
    path("auth/register", RegisterView.as_view(), name="auth-register"),
    path("auth/login", LoginView.as_view(), name="auth-login"),
    path("auth/logout", LogoutView.as_view(), name="auth-logout"),
    path("profile", ProfileView.as_view(), name="profile"),
    path("profile/password", PasswordChangeView.as_view(), name="profile-password"),
    path("profile/identity", IdentityUploadView.as_view(), name="profile-identity"),
]
