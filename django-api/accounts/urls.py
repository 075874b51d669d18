from django.urls import path

from accounts.handlers import (
    AdminLoginView,
    AdminPhotoView,
    AdminProfileView,
    AdminRegisterView,
    AttendeeDetailView,
    AttendeeListView,
    AttendeeStatusView,
    LoginView,
    LogoutView,
    OrganizerLoginView,
    OrganizerProfileView,
    OrganizerRegisterView,
    ProfileView,
    RegisterView,
)

# /api/auth/
auth_urlpatterns = [
    path("admin/login", AdminLoginView.as_view(), name="auth-admin-login"),
    path("admin/logout", LogoutView.as_view(), name="auth-admin-logout"),
    path("admin/profile", AdminProfileView.as_view(), name="auth-admin-profile"),
    path("organizer/register", OrganizerRegisterView.as_view(), name="auth-organizer-register"),
    path("organizer/login", OrganizerLoginView.as_view(), name="auth-organizer-login"),
    path("organizer/logout", LogoutView.as_view(), name="auth-organizer-logout"),
    path("organizer/profile", OrganizerProfileView.as_view(), name="auth-organizer-profile"),
    path("register", RegisterView.as_view(), name="auth-register"),
    path("login", LoginView.as_view(), name="auth-login"),
    path("logout", LogoutView.as_view(), name="auth-logout"),
    path("profile", ProfileView.as_view(), name="auth-profile"),
]

# /api/organizer/
organizer_urlpatterns = [
    path("register", OrganizerRegisterView.as_view(), name="organizer-register"),
    path("profile", OrganizerProfileView.as_view(), name="organizer-profile"),
    path("logout", LogoutView.as_view(), name="organizer-logout"),
]

# /api/admin/
admin_urlpatterns = [
    path("register", AdminRegisterView.as_view(), name="admin-register"),
    path("login", AdminLoginView.as_view(), name="admin-login"),
    path("logout", LogoutView.as_view(), name="admin-logout"),
    path("profile", AdminProfileView.as_view(), name="admin-profile"),
    path("profile/photo", AdminPhotoView.as_view(), name="admin-profile-photo"),
    path("users", AttendeeListView.as_view(), name="admin-user-list"),
    path("users/<str:account_id>", AttendeeDetailView.as_view(), name="admin-user-detail"),
    path("users/<str:account_id>/status", AttendeeStatusView.as_view(), name="admin-user-status"),
]
