from django.contrib import admin

from events.models import Discount, Event, Ticket, TicketType


class TicketTypeInline(admin.TabularInline):
    model = TicketType
    extra = 1


class DiscountInline(admin.TabularInline):
    model = Discount
    extra = 0


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "organizer", "status", "sales_start", "sales_end", "created_at"]
    list_filter = ["status"]
    search_fields = ["name"]
    inlines = [TicketTypeInline]


@admin.register(TicketType)
class TicketTypeAdmin(admin.ModelAdmin):
    list_display = ["name", "event", "price", "total_available"]
    list_filter = ["event"]
    inlines = [DiscountInline]


@admin.register(Discount)
class DiscountAdmin(admin.ModelAdmin):
    list_display = ["ticket_type", "discount_type", "value", "valid_from", "valid_to", "active"]
    list_filter = ["discount_type", "active"]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["id", "ticket_type", "purchaser", "original_price", "price_paid", "discount_applied"]
    readonly_fields = ["original_price", "price_paid", "discount_applied"]
