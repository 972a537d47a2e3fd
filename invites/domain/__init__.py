from invites.domain.models import InviteCode, InviteCodeId, InviteCodeStatus, NewInviteCode

__all__ = [
    "InviteCode",
    "InviteCodeId",
    "InviteCodeStatus",
    "NewInviteCode",
]
