"""Root URL configuration for the GatherGuru API."""

from django.contrib import admin
from django.urls import include, path

from accounts.urls import admin_urlpatterns, auth_urlpatterns, organizer_urlpatterns
from common.views import health
from payments.urls import payments_urlpatterns, stripe_urlpatterns

urlpatterns = [
    path("api/health", health, name="health"),
    path("api/", include("events.urls")),
    path("api/", include("bookings.urls")),
    path("api/auth/", include(auth_urlpatterns)),
    path("api/organizer/", include(organizer_urlpatterns)),
    # stats routes shadow users/<account_id>
    path("api/admin/", include("dashboard.urls")),
    path("api/admin/", include(admin_urlpatterns)),
    path("api/profile/", include("profiles.urls")),
    path("api/payments/", include(payments_urlpatterns)),
    path("api/stripe/", include(stripe_urlpatterns)),
    path("django-admin/", admin.site.urls),
]

handler404 = "common.views.not_found"
handler500 = "common.views.server_error"
