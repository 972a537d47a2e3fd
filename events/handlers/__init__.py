from events.handlers.views import (
    DiscountDetailView,
    DiscountListView,
    TicketPriceView,
    TicketPurchaseView,
)

__all__ = [
    "DiscountListView",
    "DiscountDetailView",
    "TicketPriceView",
    "TicketPurchaseView",
]
