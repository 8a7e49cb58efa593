from django.urls import path

from events.handlers import AdminEventDetailView, AdminEventInsightsView, AdminEventListView

urlpatterns = [
    path("events", AdminEventListView.as_view(), name="admin-event-list"),
    path("events/<str:event_id>", AdminEventDetailView.as_view(), name="admin-event-detail"),
    path(
        "events/<str:event_id>/insights",
        AdminEventInsightsView.as_view(),
        name="admin-event-insights",
    ),
]
