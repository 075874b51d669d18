from django.urls import path

from events.handlers import (
    AdminPastEventsView,
    AdminUpcomingEventsView,
    CategoryEventsView,
    EventBannerView,
    EventCategoryListView,
    EventCreateView,
    EventDetailView,
    EventEditView,
    EventListView,
    EventPublishView,
    EventSearchView,
    EventTicketingView,
    OrganizerEventListView,
    PopularEventsView,
    UpcomingEventsView,
)

# Literal paths come before the <event_id> patterns.
urlpatterns = [
    path("events", EventCreateView.as_view(), name="event-create"),
    path("events/categories", EventCategoryListView.as_view(), name="event-categories"),
    path("events/popular", PopularEventsView.as_view(), name="event-popular"),
    path("events/category/<str:category>", CategoryEventsView.as_view(), name="event-by-category"),
    path("events/search", EventSearchView.as_view(), name="event-search"),
    path("events/all", EventListView.as_view(), name="event-list"),
    path("events/upcoming", UpcomingEventsView.as_view(), name="event-upcoming"),
    path("events/admin/upcoming", AdminUpcomingEventsView.as_view(), name="event-admin-upcoming"),
    path("events/admin/past", AdminPastEventsView.as_view(), name="event-admin-past"),
    path("events/organizer/events", OrganizerEventListView.as_view(), name="event-organizer-list"),
    path("events/edit/<str:event_id>", EventEditView.as_view(), name="event-edit"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/banner", EventBannerView.as_view(), name="event-banner"),
    path("events/<str:event_id>/ticketing", EventTicketingView.as_view(), name="event-ticketing"),
    path("events/<str:event_id>/publish", EventPublishView.as_view(), name="event-publish"),
]
