from django.urls import path

from accounts.handlers import AdminUserAdminFlagView, AdminUserDisabledView, AdminUserListView

urlpatterns = [
    path("users", AdminUserListView.as_view(), name="admin-user-list"),
    path("users/<int:user_id>/admin", AdminUserAdminFlagView.as_view(), name="admin-user-admin"),
    path(
        "users/<int:user_id>/disabled",
        AdminUserDisabledView.as_view(),
        name="admin-user-disabled",
    ),
]
