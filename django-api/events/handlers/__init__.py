from events.handlers.views import (
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

__all__ = [
    "AdminPastEventsView",
    "AdminUpcomingEventsView",
    "CategoryEventsView",
    "EventBannerView",
    "EventCategoryListView",
    "EventCreateView",
    "EventDetailView",
    "EventEditView",
    "EventListView",
    "EventPublishView",
    "EventSearchView",
    "EventTicketingView",
    "OrganizerEventListView",
    "PopularEventsView",
    "UpcomingEventsView",
]
