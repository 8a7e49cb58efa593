from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("django-admin/", admin.site.urls),
    path("api/", include("accounts.urls")),
    path("api/", include("events.urls")),
    path("api/", include("bookings.urls")),
    path("api/admin/", include("events.admin_urls")),
    path("api/admin/", include("accounts.admin_urls")),
    path("api/admin/", include("bookings.admin_urls")),
    path("api/admin/", include("audit.urls")),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
