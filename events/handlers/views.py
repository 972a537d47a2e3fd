"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic

Domain errors are mapped to HTTP responses by
core.exception_handler.domain_exception_handler.
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.pagination import paginated_response
from events.handlers.serializers import (
    DiscountSerializer,
    DiscountTermsSerializer,
    PriceQuoteSerializer,
    PurchaseSerializer,
    TicketSerializer,
)
from events.services.discount_service import DiscountService
from events.services.purchase_service import TicketPurchaseService
from events.stores.django_store import (
    DjangoDiscountStore,
    DjangoEventStore,
    DjangoTicketStore,
)


def discount_service() -> DiscountService:
    return DiscountService(DjangoEventStore(), DjangoDiscountStore())


def purchase_service() -> TicketPurchaseService:
    return TicketPurchaseService(DjangoEventStore(), DjangoDiscountStore(), DjangoTicketStore())


class DiscountListView(APIView):
    """Handler for /api/events/{event_id}/ticket-types/{ticket_type_id}/discounts"""

    def get(self, request: Request, event_id: str, ticket_type_id: str) -> Response:
        discounts = discount_service().list_discounts(request.user.pk, event_id, ticket_type_id)
        return paginated_response(request, self, discounts, DiscountSerializer)

    def post(self, request: Request, event_id: str, ticket_type_id: str) -> Response:
        serializer = DiscountTermsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        discount = discount_service().create_discount(
            request.user.pk, event_id, ticket_type_id, serializer.to_terms()
        )
        return Response(DiscountSerializer(discount).data, status=status.HTTP_201_CREATED)


class DiscountDetailView(APIView):
    """Handler for /api/events/{event_id}/ticket-types/{ticket_type_id}/discounts/{discount_id}"""

    def get(
        self, request: Request, event_id: str, ticket_type_id: str, discount_id: str
    ) -> Response:
        discount = discount_service().get_discount(
            request.user.pk, event_id, ticket_type_id, discount_id
        )
        return Response(DiscountSerializer(discount).data)

    def put(
        self, request: Request, event_id: str, ticket_type_id: str, discount_id: str
    ) -> Response:
        serializer = DiscountTermsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        discount = discount_service().update_discount(
            request.user.pk, event_id, ticket_type_id, discount_id, serializer.to_terms()
        )
        return Response(DiscountSerializer(discount).data)

    def delete(
        self, request: Request, event_id: str, ticket_type_id: str, discount_id: str
    ) -> Response:
        discount_service().delete_discount(request.user.pk, event_id, ticket_type_id, discount_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class TicketPriceView(APIView):
    """Handler for GET /api/events/{event_id}/ticket-types/{ticket_type_id}/price"""

    def get(self, request: Request, event_id: str, ticket_type_id: str) -> Response:
        quote = purchase_service().quote(event_id, ticket_type_id)
        return Response(PriceQuoteSerializer(quote).data)


class TicketPurchaseView(APIView):
    """Handler for POST /api/events/{event_id}/ticket-types/{ticket_type_id}/tickets"""

    def post(self, request: Request, event_id: str, ticket_type_id: str) -> Response:
        serializer = PurchaseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tickets = purchase_service().purchase(
            request.user.pk, event_id, ticket_type_id, serializer.validated_data["quantity"]
        )
        return Response(
            {"tickets": TicketSerializer(tickets, many=True).data},
            status=status.HTTP_201_CREATED,
        )
