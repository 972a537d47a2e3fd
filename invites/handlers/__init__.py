from invites.handlers.views import (
    EventInviteCodeListView,
    InviteCodeAdminListView,
    InviteCodeDetailView,
    InviteCodeListView,
    InviteCodeRedeemView,
    InviteCodeRevokeView,
)

__all__ = [
    "InviteCodeListView",
    "InviteCodeAdminListView",
    "InviteCodeRedeemView",
    "InviteCodeDetailView",
    "InviteCodeRevokeView",
    "EventInviteCodeListView",
]
