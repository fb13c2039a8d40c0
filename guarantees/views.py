"""
Guarantee claims endpoints.
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from common.errors import log_error
from .claims_list import ERROR, UNAUTHENTICATED, ClaimsList, claim_card
from .serializers import GuaranteeClaimCreateSerializer
from .store import get_claim_store

logger = logging.getLogger(__name__)

LIST_ROLES = ('homeowner', 'provider', 'admin')
SUBMIT_ERROR = 'Failed to submit claim. Please try again.'

_STATE_STATUS = {
    UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error(code, message, http_status):
    return Response(
        {'error': {'code': code, 'message': message, 'status': http_status}},
        status=http_status,
    )


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def claims(request):
    """
    GET  /api/v1/guarantees/claims/?role=homeowner|provider - Claims list state.
    POST /api/v1/guarantees/claims/ - Submit a claim as the current homeowner.
    """
    if request.method == 'POST':
        return _submit_claim(request)

    user = request.user
    role = request.query_params.get('role') or getattr(user, 'role', None) or 'homeowner'
    if role not in LIST_ROLES:
        return _error('INVALID_ROLE', f"Unknown role: {role}", status.HTTP_400_BAD_REQUEST)
    if role == 'admin' and user.is_authenticated and not user.is_content_admin:
        return _error('FORBIDDEN', 'Only admins can list every claim', status.HTTP_403_FORBIDDEN)

    listing = ClaimsList(role=role).load(user, get_claim_store())
    return Response(listing.to_dict(), status=_STATE_STATUS.get(listing.state, status.HTTP_200_OK))


def _submit_claim(request):
    if not request.user.is_authenticated:
        return _error(
            'NOT_AUTHENTICATED',
            'You must be logged in to submit a guarantee claim',
            status.HTTP_401_UNAUTHORIZED,
        )

    serializer = GuaranteeClaimCreateSerializer(data=request.data, context={'request': request})
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data
    try:
        claim = get_claim_store().create_claim(
            homeowner=request.user,
            project=data['project'],
            provider=data['provider'],
            claim_reason=data['claim_reason'],
            claim_amount=data['claim_amount'],
        )
    except Exception as e:
        log_error(e, location='guarantee claim submit', user_id=request.user.id)
        return _error('SUBMIT_FAILED', SUBMIT_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(claim_card(claim, 'homeowner'), status=status.HTTP_201_CREATED)
