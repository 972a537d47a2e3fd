from django.urls import path

from events.handlers import (
    DiscountDetailView,
    DiscountListView,
    TicketPriceView,
    TicketPurchaseView,
)

ticket_type_prefix = "events/<str:event_id>/ticket-types/<str:ticket_type_id>"

urlpatterns = [
    path(
        f"{ticket_type_prefix}/discounts",
        DiscountListView.as_view(),
        name="discount-list",
    ),
    path(
        f"{ticket_type_prefix}/discounts/<str:discount_id>",
        DiscountDetailView.as_view(),
        name="discount-detail",
    ),
    path(f"{ticket_type_prefix}/price", TicketPriceView.as_view(), name="ticket-price"),
    path(f"{ticket_type_prefix}/tickets", TicketPurchaseView.as_view(), name="ticket-purchase"),
]
