"""Serializers for parsing requests and rendering domain models."""

from rest_framework import serializers

from events.domain import DiscountTerms, DiscountType


class DiscountTermsSerializer(serializers.Serializer):
    """Input format for creating or replacing a discount."""

    discount_type = serializers.ChoiceField(choices=[t.value for t in DiscountType])
    value = serializers.DecimalField(max_digits=10, decimal_places=2)
    valid_from = serializers.DateTimeField()
    valid_to = serializers.DateTimeField()
    active = serializers.BooleanField(required=False, allow_null=True, default=None)
    description = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=500, default=None
    )

    def to_terms(self) -> DiscountTerms:
        data = self.validated_data
        return DiscountTerms(
            discount_type=DiscountType(data["discount_type"]),
            value=data["value"],
            valid_from=data["valid_from"],
            valid_to=data["valid_to"],
            active=data.get("active"),
            description=data.get("description"),
        )


class DiscountSerializer(serializers.Serializer):
    """Serializer for Discount domain model."""

    id = serializers.UUIDField(source="id.value")
    ticket_type_id = serializers.UUIDField(source="ticket_type_id.value")
    discount_type = serializers.CharField(source="discount_type.value")
    value = serializers.DecimalField(max_digits=10, decimal_places=2)
    valid_from = serializers.DateTimeField()
    valid_to = serializers.DateTimeField()
    active = serializers.BooleanField()
    description = serializers.CharField(allow_null=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class PriceQuoteSerializer(serializers.Serializer):
    """Serializer for PriceQuote."""

    original_price = serializers.DecimalField(
        source="original_price.amount", max_digits=10, decimal_places=2
    )
    final_price = serializers.DecimalField(
        source="final_price.amount", max_digits=10, decimal_places=2
    )
    discount_amount = serializers.DecimalField(
        source="discount_amount.amount", max_digits=10, decimal_places=2
    )


class PurchaseSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1, max_value=50, default=1)


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.UUIDField(source="id.value")
    ticket_type_id = serializers.UUIDField(source="ticket_type_id.value")
    original_price = serializers.DecimalField(
        source="original_price.amount", max_digits=10, decimal_places=2
    )
    price_paid = serializers.DecimalField(
        source="price_paid.amount", max_digits=10, decimal_places=2
    )
    discount_applied = serializers.DecimalField(
        source="discount_applied.amount", max_digits=10, decimal_places=2
    )
    created_at = serializers.DateTimeField()
