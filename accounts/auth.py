"""
Dashboard sign-in.

Homeowners and providers sign in with email and password and get a JWT pair
back; the dashboard sends the access token as a bearer header afterwards.
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken

from .serializers import LoginSerializer, RegisterSerializer, UserSerializer

logger = logging.getLogger(__name__)


def _signed_in(user, message, status_code=status.HTTP_200_OK):
    """Response body shared by login and register."""
    refresh = RefreshToken.for_user(user)
    body = {
        'message': message,
        'token': str(refresh.access_token),
        'refresh_token': str(refresh),
        'user': UserSerializer(user).data,
    }
    return Response(body, status=status_code)


@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """
    POST /api/v1/auth/login/ with {"email", "password"}.

    Answers 400 with the serializer errors when the credentials are wrong.
    """
    serializer = LoginSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning("Rejected login attempt")
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    return _signed_in(serializer.validated_data['user'], 'Login successful')


@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """
    POST /api/v1/auth/register/

    Takes email, password, an optional full `name` (or first/last name), phone
    and `role`. Providers must also send `business_name`. The new account is
    signed in straight away.
    """
    serializer = RegisterSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    user = serializer.save()
    logger.info(f"Registered {user.role} account {user.id}")
    return _signed_in(user, 'Registration successful', status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me(request):
    """GET /api/v1/auth/me/ - the signed-in user."""
    return Response({'user': UserSerializer(request.user).data})
