from profiles.handlers.views import (
    InterestedEventsView,
    InterestToggleView,
    ProfileImageUploadView,
    ProfileImageView,
    ProfileUpdateView,
    ProfileView,
)

__all__ = [
    "InterestedEventsView",
    "InterestToggleView",
    "ProfileImageUploadView",
    "ProfileImageView",
    "ProfileUpdateView",
    "ProfileView",
]
