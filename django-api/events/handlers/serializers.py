"""Serializers for request input and domain model output."""

from rest_framework import serializers

from events.conf import storefront_settings
from events.domain import (
    CatalogQuery,
    Credentials,
    PurchaseOrder,
    Registration,
    SortCriterion,
)
from events.domain.query import ALL_CATEGORIES
from events.services.checkout_service import PAYMENT_METHODS


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    date = serializers.DateField()
    time = serializers.TimeField(format="%H:%M")
    starts_at = serializers.SerializerMethodField()
    venue = serializers.CharField()
    address = serializers.CharField()
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, source="price.amount"
    )
    category = serializers.CharField()
    available_tickets = serializers.IntegerField(source="available_tickets.value")
    sold_out = serializers.BooleanField()
    image = serializers.CharField()
    organizer = serializers.CharField()
    featured = serializers.BooleanField()

    def get_starts_at(self, event) -> str:
        # Local venue time, no offset.
        return event.starts_at.isoformat()


class CatalogQuerySerializer(serializers.Serializer):
    """Parses catalog query parameters from the query string."""

    search = serializers.CharField(
        required=False, allow_blank=True, default="", trim_whitespace=False
    )
    category = serializers.CharField(
        required=False, allow_blank=True, default=ALL_CATEGORIES
    )
    min_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False
    )
    max_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False
    )
    sort = serializers.ChoiceField(
        choices=[criterion.value for criterion in SortCriterion],
        required=False,
        default=SortCriterion.DATE.value,
    )

    def to_query(self) -> CatalogQuery:
        conf = storefront_settings()
        data = self.validated_data
        min_price = data.get("min_price")
        max_price = data.get("max_price")
        return CatalogQuery(
            search=data["search"],
            category=data["category"] or ALL_CATEGORIES,
            min_price=conf["DEFAULT_MIN_PRICE"] if min_price is None else min_price,
            max_price=conf["DEFAULT_MAX_PRICE"] if max_price is None else max_price,
            sort=SortCriterion(data["sort"]),
        )


class QuoteRequestSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(required=False, default=1)


class QuoteSerializer(serializers.Serializer):
    """Serializer for Quote domain model."""

    event_id = serializers.CharField(source="event.id.value")
    quantity = serializers.IntegerField(source="quantity.value")
    unit_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, source="event.price.amount"
    )
    subtotal = serializers.DecimalField(
        max_digits=12, decimal_places=2, source="subtotal.amount"
    )
    service_fee = serializers.DecimalField(
        max_digits=12, decimal_places=2, source="service_fee.amount"
    )
    total = serializers.DecimalField(
        max_digits=12, decimal_places=2, source="total.amount"
    )


class PurchaseRequestSerializer(serializers.Serializer):
    """Checkout form. Presence rules are enforced by CheckoutService."""

    quantity = serializers.IntegerField(required=False, default=1)
    first_name = serializers.CharField(required=False, allow_blank=True, default="")
    last_name = serializers.CharField(required=False, allow_blank=True, default="")
    email = serializers.EmailField(required=False, allow_blank=True, default="")
    phone = serializers.CharField(required=False, allow_blank=True, default="")
    payment_method = serializers.ChoiceField(
        choices=PAYMENT_METHODS, required=False, default="credit"
    )
    card_number = serializers.CharField(
        required=False, allow_blank=True, default="", write_only=True
    )
    expiry_date = serializers.CharField(required=False, allow_blank=True, default="")
    cvv = serializers.CharField(
        required=False, allow_blank=True, default="", write_only=True
    )
    card_name = serializers.CharField(required=False, allow_blank=True, default="")

    def to_order(self) -> PurchaseOrder:
        return PurchaseOrder(**self.validated_data)


class PurchaseConfirmationSerializer(serializers.Serializer):
    """Serializer for PurchaseConfirmation domain model."""

    confirmation_code = serializers.CharField()
    event_title = serializers.CharField()
    ticket_count = serializers.IntegerField()
    quote = QuoteSerializer()


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(required=False, allow_blank=True, default="")
    password = serializers.CharField(
        required=False, allow_blank=True, default="", trim_whitespace=False
    )

    def to_credentials(self) -> Credentials:
        return Credentials(**self.validated_data)


class RegisterSerializer(LoginSerializer):
    confirm_password = serializers.CharField(
        required=False, allow_blank=True, default="", trim_whitespace=False
    )
    first_name = serializers.CharField(required=False, allow_blank=True, default="")
    last_name = serializers.CharField(required=False, allow_blank=True, default="")

    def to_registration(self) -> Registration:
        return Registration(**self.validated_data)


class AuthResultSerializer(serializers.Serializer):
    email = serializers.EmailField()
    display_name = serializers.CharField()
    message = serializers.CharField()
