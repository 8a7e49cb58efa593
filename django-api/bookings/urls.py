from django.urls import path

from bookings.handlers import (
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

urlpatterns = [
    path("events/<str:event_id>/booking", BookingAttemptView.as_view(), name="booking-attempt"),
    path(
        "events/<str:event_id>/booking/quantities",
        BookingQuantityView.as_view(),
        name="booking-quantities",
    ),
    path("events/<str:event_id>/booking/proceed", BookingProceedView.as_view(), name="booking-proceed"),
    path("events/<str:event_id>/booking/back", BookingBackView.as_view(), name="booking-back"),
    path("events/<str:event_id>/booking/receipt", BookingReceiptView.as_view(), name="booking-receipt"),
    path("events/<str:event_id>/booking/submit", BookingSubmitView.as_view(), name="booking-submit"),
    path("profile/bookings", MyBookingListView.as_view(), name="my-booking-list"),
    path(
        "profile/bookings/<str:booking_id>/cancel",
        MyBookingCancelView.as_view(),
        name="my-booking-cancel",
    ),
    path(
        "profile/bookings/<str:booking_id>/tickets",
        MyBookingTicketsView.as_view(),
        name="my-booking-tickets",
    ),
]
