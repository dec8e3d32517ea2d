"""
E-Learning User Authentication Views

This module provides the authentication endpoints for the E-Learning system:
registration, JWT login/refresh/logout and the password reset flow.

Views:
- RegistrationView: Self-service sign-up as student or instructor
- CustomTokenObtainPairView: JWT login, tokens stored in HTTP-only cookies
- CustomTokenRefreshView: Token refresh from cookie or request body
- LogoutView: Token invalidation and cookie removal
- ForgotPasswordView: Issue a reset token and e-mail the reset link
- ResetPasswordView: Set a new password with a reset token

Features:
- Rate limiting of all public endpoints (scope "auth")
- Secure token blacklisting for logout
- Fire-and-forget e-mails (welcome, password reset)

Author: EduSync Development Team
Version: 1.0.0
"""

import logging

from django.conf import settings
from django.contrib.auth.models import User
from django.http import JsonResponse
from django.utils.translation import gettext_lazy as _
from rest_framework import status, generics
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.serializers import TokenRefreshSerializer
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from ...services.email import EmailService
from ..models import PasswordResetToken, get_user_role
from ..serializers import (
    CustomTokenObtainPairSerializer,
    RegistrationSerializer,
    ForgotPasswordSerializer,
    ResetPasswordSerializer,
)

logger = logging.getLogger(__name__)

ACCESS_COOKIE = "access_token"
REFRESH_COOKIE = "refresh_token"


def _set_token_cookies(response: Response, access=None, refresh=None) -> None:
    """
    Store JWT tokens in secure HTTP-only cookies.
     * httponly=True → prevents JavaScript access (mitigates XSS attacks)
     * secure=True → transmits cookies only over HTTPS
     * samesite="None" → required for the cross-site frontend
    """
    if refresh:
        response.set_cookie(
            REFRESH_COOKIE,
            refresh,
            httponly=True,
            secure=True,
            samesite="None",
            path="/",
            max_age=settings.SIMPLE_JWT["REFRESH_TOKEN_LIFETIME"],
        )
    if access:
        response.set_cookie(
            ACCESS_COOKIE,
            access,
            httponly=True,
            secure=True,
            samesite="None",
            path="/",
            max_age=settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"],
        )


class AuthThrottleMixin:
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "auth"


class RegistrationView(AuthThrottleMixin, generics.CreateAPIView):
    """
    API endpoint for the self-service registration of students and instructors.

    - Validates name, e-mail, password and role via RegistrationSerializer.
    - Sends a welcome e-mail; a failing mail server never fails the request.
    - Returns HTTP 201 with a confirmation message, HTTP 400 with field errors otherwise.
    """

    serializer_class = RegistrationSerializer
    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        role = get_user_role(user)
        logger.info(f"Neuer User registriert: {user.email} ({role})")

        EmailService().send_welcome_email(user.email, user.first_name, role.capitalize())

        return Response(
            {
                "detail": f"Registration successful as {role.capitalize()}!",
                "user_id": user.id,
                "role": role,
            },
            status=status.HTTP_201_CREATED,
        )


class CustomTokenObtainPairView(AuthThrottleMixin, TokenObtainPairView):
    """
    Custom view extending SimpleJWT's TokenObtainPairView to store JWT tokens in secure HTTP-only cookies
    instead of returning them in the response body.
    - Calls the parent class's `post` method to get access/refresh tokens.
    - Removes tokens from the response payload to avoid exposing them in JSON.
    - The remaining payload carries user_id, username, name and role.
    """

    serializer_class = CustomTokenObtainPairSerializer

    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)
        if response.status_code == 200:
            data = response.data
            refresh = data.pop("refresh", None)
            access = data.pop("access", None)
            _set_token_cookies(response, access=access, refresh=refresh)
        return response


class CustomTokenRefreshView(AuthThrottleMixin, TokenRefreshView):
    """
    Custom view extending SimpleJWT's TokenRefreshView. The refresh token is read
    from the `refresh_token` cookie (or the `refresh` field of the body), the new
    tokens are written back as HTTP-only cookies.
    """

    def post(self, request, *args, **kwargs):
        refresh_token = request.COOKIES.get(REFRESH_COOKIE) or request.data.get("refresh")
        if not refresh_token:
            return Response(
                {"title": "Validation error", "detail": "Refresh token not provided"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = TokenRefreshSerializer(data={"refresh": refresh_token})
        try:
            serializer.is_valid(raise_exception=True)
        except TokenError as e:
            return Response(
                {"title": "Validation error", "detail": str(e)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        data = serializer.validated_data
        response = Response({"detail": "Token refreshed."}, status=status.HTTP_200_OK)
        _set_token_cookies(response, access=data.get("access"), refresh=data.get("refresh"))
        return response


class LogoutView(APIView):
    """
    API endpoint to handle user logout by invalidating JWT tokens and clearing cookies.
    - If a refresh token cookie is present it is blacklisted.
    - Always returns a 205 Reset Content response and deletes both token cookies.
    """

    permission_classes = [AllowAny]

    def post(self, request):
        refresh_token = request.COOKIES.get(REFRESH_COOKIE)
        if refresh_token:
            try:
                RefreshToken(refresh_token).blacklist()
            except TokenError as e:
                logger.info(f"Logout mit ungültigem Refresh-Token: {e}")
        response = JsonResponse({"detail": "Successfully logged out."}, status=205)
        response.delete_cookie(REFRESH_COOKIE)
        response.delete_cookie(ACCESS_COOKIE)
        return response


class ForgotPasswordView(AuthThrottleMixin, APIView):
    """
    Issue a password reset token and e-mail the reset link.

    Always answers with 200 so the endpoint cannot be used to probe
    which e-mail addresses are registered.
    """

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = ForgotPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = serializer.validated_data["email"]

        user = User.objects.filter(email__iexact=email).first()
        if user is not None:
            reset_token = PasswordResetToken.objects.create(user=user)
            logger.info(f"Passwort-Reset angefordert für {user.email}")
            EmailService().send_password_reset_email(
                user.email, user.first_name or user.username, reset_token.token
            )

        return Response(
            {"detail": _("If the e-mail address is registered, a reset link has been sent.")},
            status=status.HTTP_200_OK,
        )


class ResetPasswordView(AuthThrottleMixin, APIView):
    """Set a new password with a valid, unused and unexpired reset token."""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = ResetPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"Passwort zurückgesetzt für {user.email}")
        return Response(
            {"detail": _("Password has been reset successfully.")},
            status=status.HTTP_200_OK,
        )
