"""Serializers for parsing invite requests and rendering invite codes."""

from rest_framework import serializers


class IssueInviteSerializer(serializers.Serializer):
    role_name = serializers.CharField(max_length=50)
    event_id = serializers.UUIDField(required=False, allow_null=True, default=None)
    expiration_hours = serializers.IntegerField(
        required=False, allow_null=True, min_value=1, default=None
    )


class RedeemSerializer(serializers.Serializer):
    code = serializers.CharField(max_length=32)


class RevokeSerializer(serializers.Serializer):
    reason = serializers.CharField(max_length=500)


class InviteCodeSerializer(serializers.Serializer):
    """Serializer for InviteCode domain model."""

    id = serializers.UUIDField(source="id.value")
    code = serializers.CharField()
    role_name = serializers.CharField()
    event_id = serializers.UUIDField(allow_null=True)
    status = serializers.CharField(source="status.value")
    created_by = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    expires_at = serializers.DateTimeField()
    redeemed_by = serializers.IntegerField(allow_null=True)
    redeemed_at = serializers.DateTimeField(allow_null=True)
    revoked_at = serializers.DateTimeField(allow_null=True)
    revoked_reason = serializers.CharField(allow_null=True)
