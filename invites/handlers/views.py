"""HTTP handlers for invite codes.

Staff users (``is_staff``) act as platform admins: they may issue
platform-wide codes and manage any event's codes.
"""

from uuid import UUID

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.pagination import paginated_response
from invites.domain.errors import InvalidEventIdError
from invites.handlers.serializers import (
    InviteCodeSerializer,
    IssueInviteSerializer,
    RedeemSerializer,
    RevokeSerializer,
)
from invites.wiring import invite_service


class InviteCodeListView(APIView):
    """Handler for /api/invites"""

    def get(self, request: Request) -> Response:
        codes = invite_service().list_created_by(request.user.pk)
        return paginated_response(request, self, codes, InviteCodeSerializer)

    def post(self, request: Request) -> Response:
        serializer = IssueInviteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        invite = invite_service().issue(
            request.user.pk,
            data["role_name"],
            event_id=data.get("event_id"),
            expiration_hours=data.get("expiration_hours"),
            is_admin=request.user.is_staff,
        )
        return Response(InviteCodeSerializer(invite).data, status=status.HTTP_201_CREATED)


class InviteCodeAdminListView(APIView):
    """Handler for GET /api/invites/all (admins only)"""

    def get(self, request: Request) -> Response:
        codes = invite_service().list_all(is_admin=request.user.is_staff)
        return paginated_response(request, self, codes, InviteCodeSerializer)


class InviteCodeRedeemView(APIView):
    """Handler for POST /api/invites/redeem"""

    def post(self, request: Request) -> Response:
        serializer = RedeemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        service = invite_service()
        invite = service.redeem(request.user.pk, serializer.validated_data["code"])
        return Response(
            {
                "invite": InviteCodeSerializer(invite).data,
                "roles": service.roles_of(request.user.pk),
            }
        )


class InviteCodeDetailView(APIView):
    """Handler for GET /api/invites/{code_id}"""

    def get(self, request: Request, code_id: str) -> Response:
        service = invite_service()
        invite = service.get(request.user.pk, code_id, is_admin=request.user.is_staff)
        return Response(
            {
                **InviteCodeSerializer(invite).data,
                "is_valid": service.is_valid(code_id),
            }
        )


class InviteCodeRevokeView(APIView):
    """Handler for POST /api/invites/{code_id}/revoke"""

    def post(self, request: Request, code_id: str) -> Response:
        serializer = RevokeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        invite = invite_service().revoke(
            request.user.pk,
            code_id,
            serializer.validated_data["reason"],
            is_admin=request.user.is_staff,
        )
        return Response(InviteCodeSerializer(invite).data)


class EventInviteCodeListView(APIView):
    """Handler for GET /api/invites/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            event_key = UUID(event_id)
        except ValueError as exc:
            raise InvalidEventIdError() from exc
        codes = invite_service().list_for_event(
            request.user.pk, event_key, is_admin=request.user.is_staff
        )
        return paginated_response(request, self, codes, InviteCodeSerializer)
