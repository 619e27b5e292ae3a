"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to events.handlers.exceptions
- Never contain business logic
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.query import ALL_CATEGORIES
from events.handlers.serializers import (
    AuthResultSerializer,
    CatalogQuerySerializer,
    EventSerializer,
    LoginSerializer,
    PurchaseConfirmationSerializer,
    PurchaseRequestSerializer,
    QuoteRequestSerializer,
    QuoteSerializer,
    RegisterSerializer,
)
from events.services import get_auth_service, get_checkout_service, get_event_service


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        params = CatalogQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        events = get_event_service().search(params.to_query())
        return Response(
            {"count": len(events), "results": EventSerializer(events, many=True).data}
        )


class FeaturedEventListView(APIView):
    """Handler for GET /api/events/featured"""

    def get(self, request: Request) -> Response:
        events = get_event_service().featured_events()
        return Response(
            {"count": len(events), "results": EventSerializer(events, many=True).data}
        )


class CategoryListView(APIView):
    """Handler for GET /api/events/categories"""

    def get(self, request: Request) -> Response:
        categories = get_event_service().categories()
        return Response({"categories": [ALL_CATEGORIES, *categories]})


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = get_event_service().get_event(event_id)
        data = EventSerializer(event).data
        data["max_quantity"] = get_checkout_service().max_quantity(event)
        return Response(data)


class QuoteView(APIView):
    """Handler for POST /api/events/{event_id}/quote"""

    def post(self, request: Request, event_id: str) -> Response:
        body = QuoteRequestSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        quote = get_checkout_service().quote(event_id, body.validated_data["quantity"])
        return Response(QuoteSerializer(quote).data)


class PurchaseView(APIView):
    """Handler for POST /api/events/{event_id}/purchase"""

    def post(self, request: Request, event_id: str) -> Response:
        form = PurchaseRequestSerializer(data=request.data)
        form.is_valid(raise_exception=True)
        confirmation = get_checkout_service().purchase(event_id, form.to_order())
        return Response(
            PurchaseConfirmationSerializer(confirmation).data,
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    def post(self, request: Request) -> Response:
        form = LoginSerializer(data=request.data)
        form.is_valid(raise_exception=True)
        result = get_auth_service().login(form.to_credentials())
        return Response(AuthResultSerializer(result).data)


class RegisterView(APIView):
    """Handler for POST /api/auth/register"""

    def post(self, request: Request) -> Response:
        form = RegisterSerializer(data=request.data)
        form.is_valid(raise_exception=True)
        result = get_auth_service().register(form.to_registration())
        return Response(
            AuthResultSerializer(result).data, status=status.HTTP_201_CREATED
        )
