from bookings.handlers.views import (
    AdminBookingCancelView,
    AdminBookingListView,
    AdminDashboardView,
    AdminPaymentStatusView,
    AdminUserVerificationView,
    BookingAttemptView,
    BookingBackView,
    BookingProceedView,
    BookingQuantityView,
    BookingReceiptView,
    BookingSubmitView,
    MyBookingCancelView,
    MyBookingListView,
    MyBookingTicketsView,
)

__all__ = [
    "BookingAttemptView",
    "BookingQuantityView",
    "BookingProceedView",
    "BookingBackView",
    "BookingReceiptView",
    "BookingSubmitView",
    "MyBookingListView",
    "MyBookingCancelView",
    "MyBookingTicketsView",
    "AdminDashboardView",
    "AdminBookingListView",
    "AdminPaymentStatusView",
    "AdminBookingCancelView",
    "AdminUserVerificationView",
]
