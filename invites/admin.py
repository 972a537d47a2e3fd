from django.contrib import admin

from invites.models import InviteCode


@admin.register(InviteCode)
class InviteCodeAdmin(admin.ModelAdmin):
    list_display = ["code", "role_name", "event", "status", "created_by", "expires_at"]
    list_filter = ["status", "role_name"]
    search_fields = ["code"]
    readonly_fields = ["version", "redeemed_by", "redeemed_at", "revoked_at", "revoked_reason"]
