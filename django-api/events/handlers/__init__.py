from events.handlers.views import (
    CategoryListView,
    EventDetailView,
    EventListView,
    FeaturedEventListView,
    LoginView,
    PurchaseView,
    QuoteView,
    RegisterView,
)

__all__ = [
    "CategoryListView",
    "EventDetailView",
    "EventListView",
    "FeaturedEventListView",
    "LoginView",
    "PurchaseView",
    "QuoteView",
    "RegisterView",
]
