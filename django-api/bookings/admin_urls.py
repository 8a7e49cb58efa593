from django.urls import path

from bookings.handlers import (
    AdminBookingCancelView,
    AdminBookingListView,
    AdminDashboardView,
    AdminPaymentStatusView,
    AdminUserVerificationView,
)

urlpatterns = [
    path("dashboard", AdminDashboardView.as_view(), name="admin-dashboard"),
    path("bookings", AdminBookingListView.as_view(), name="admin-booking-list"),
    path(
        "bookings/<str:booking_id>/payment-status",
        AdminPaymentStatusView.as_view(),
        name="admin-booking-payment-status",
    ),
    path(
        "bookings/<str:booking_id>/cancel",
        AdminBookingCancelView.as_view(),
        name="admin-booking-cancel",
    ),
    path(
        "users/<int:user_id>/verification",
        AdminUserVerificationView.as_view(),
        name="admin-user-verification",
    ),
]
