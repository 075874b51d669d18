from accounts.handlers.views import (
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

__all__ = [
    "AdminLoginView",
    "AdminPhotoView",
    "AdminProfileView",
    "AdminRegisterView",
    "AttendeeDetailView",
    "AttendeeListView",
    "AttendeeStatusView",
    "LoginView",
    "LogoutView",
    "OrganizerLoginView",
    "OrganizerProfileView",
    "OrganizerRegisterView",
    "ProfileView",
    "RegisterView",
]
