from django.urls import path

from profiles.handlers import (
    InterestedEventsView,
    InterestToggleView,
    ProfileImageUploadView,
    ProfileImageView,
    ProfileUpdateView,
    ProfileView,
)

# /api/profile/
urlpatterns = [
    path("me", ProfileView.as_view(), name="profile-me"),
    path("update", ProfileUpdateView.as_view(), name="profile-update"),
    path("upload-image", ProfileImageUploadView.as_view(), name="profile-upload-image"),
    path("image", ProfileImageView.as_view(), name="profile-image"),
    path("toggle-interest", InterestToggleView.as_view(), name="profile-toggle-interest"),
    path("interested-events", InterestedEventsView.as_view(), name="profile-interested-events"),
]
