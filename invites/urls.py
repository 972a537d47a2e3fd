from django.urls import path

from invites.handlers import (
    EventInviteCodeListView,
    InviteCodeAdminListView,
    InviteCodeDetailView,
    InviteCodeListView,
    InviteCodeRedeemView,
    InviteCodeRevokeView,
)

urlpatterns = [
    path("invites", InviteCodeListView.as_view(), name="invite-list"),
    path("invites/redeem", InviteCodeRedeemView.as_view(), name="invite-redeem"),
    path("invites/all", InviteCodeAdminListView.as_view(), name="invite-admin-list"),
    path(
        "invites/events/<str:event_id>",
        EventInviteCodeListView.as_view(),
        name="event-invite-list",
    ),
    path("invites/<str:code_id>", InviteCodeDetailView.as_view(), name="invite-detail"),
    path("invites/<str:code_id>/revoke", InviteCodeRevokeView.as_view(), name="invite-revoke"),
]
