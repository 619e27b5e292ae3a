from django.urls import path

from events.handlers import (
    CategoryListView,
    EventDetailView,
    EventListView,
    FeaturedEventListView,
    LoginView,
    PurchaseView,
    QuoteView,
    RegisterView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/featured", FeaturedEventListView.as_view(), name="event-featured"),
    path("events/categories", CategoryListView.as_view(), name="event-categories"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/quote", QuoteView.as_view(), name="event-quote"),
    path(
        "events/<str:event_id>/purchase",
        PurchaseView.as_view(),
        name="event-purchase",
    ),
    path("auth/login", LoginView.as_view(), name="auth-login"),
    path("auth/register", RegisterView.as_view(), name="auth-register"),
]
