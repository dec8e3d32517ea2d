"""
E-Learning User Management Serializers

This module provides the serializers for user registration, authentication
and the password reset flow in the E-Learning system.

Serializers:
- CustomTokenObtainPairSerializer: JWT token pair with role information
- UserSerializer: Current user data including role
- RegistrationSerializer: Self-service sign-up as student or instructor
- ForgotPasswordSerializer: Request a password reset e-mail
- ResetPasswordSerializer: Set a new password with a reset token

Author: EduSync Development Team
Version: 1.0.0
"""

from typing import Dict, Any
from django.contrib.auth.models import User
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.tokens import RefreshToken

from .models import Profile, PasswordResetToken, UserRole, get_user_role


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    JWT token serializer with user metadata.

    Users sign in with their e-mail address as ``username``.

    Token Payload Includes:
    - username: User identification
    - role: Platform role (student / instructor)
    """

    @classmethod
    def get_token(cls, user: User) -> RefreshToken:
        token = super().get_token(user)
        token["username"] = user.username
        token["role"] = get_user_role(user) or UserRole.STUDENT
        return token

    def validate(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        data = super().validate(attrs)

        # Add user information to response for frontend convenience
        data.update(
            {
                "user_id": self.user.id,
                "username": self.user.username,
                "name": self.user.first_name or self.user.username,
                "role": get_user_role(self.user) or UserRole.STUDENT,
            }
        )
        return data


class UserSerializer(serializers.ModelSerializer):
    """Current user data including the profile role."""

    role = serializers.SerializerMethodField()
    name = serializers.CharField(source="first_name", read_only=True)

    class Meta:
        model = User
        fields = ("id", "username", "email", "name", "role", "date_joined", "last_login")
        read_only_fields = fields

    def get_role(self, obj: User) -> str:
        return get_user_role(obj) or UserRole.STUDENT


class RegistrationSerializer(serializers.Serializer):
    """
    Self-service registration for students and instructors.

    The e-mail address doubles as username. The role is accepted
    case-insensitively ("Student", "student", ...).

    Request Body Example (JSON):
        {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "password": "secret-Pass-1234",
            "role": "Student"
        }
    """

    name = serializers.CharField(min_length=3, max_length=150, trim_whitespace=True)
    email = serializers.EmailField(max_length=150)
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        style={"input_type": "password"},
        help_text=_("Password must be at least 8 characters long"),
    )
    role = serializers.CharField()

    def validate_role(self, value: str) -> str:
        role = value.strip().lower()
        if role not in UserRole.values:
            raise serializers.ValidationError(
                _("Role must be either 'Student' or 'Instructor'.")
            )
        return role

    def validate_email(self, value: str) -> str:
        value = value.strip().lower()
        if User.objects.filter(email__iexact=value).exists() or User.objects.filter(
            username__iexact=value
        ).exists():
            raise serializers.ValidationError(_("Email already in use."))
        return value

    def validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        candidate = User(username=data["email"], email=data["email"], first_name=data["name"])
        try:
            validate_password(data["password"], user=candidate)
        except DjangoValidationError as e:
            raise serializers.ValidationError({"password": list(e.messages)})
        return data

    @transaction.atomic
    def create(self, validated_data: Dict[str, Any]) -> User:
        user = User.objects.create_user(
            username=validated_data["email"],
            email=validated_data["email"],
            password=validated_data["password"],
            first_name=validated_data["name"],
        )
        # Profile wird per Signal angelegt, hier nur die Rolle setzen
        try:
            profile = user.profile
        except Profile.DoesNotExist:
            profile = Profile(user=user)
        profile.role = validated_data["role"]
        profile.save()
        return user


class ForgotPasswordSerializer(serializers.Serializer):
    email = serializers.EmailField()


class ResetPasswordSerializer(serializers.Serializer):
    """
    Set a new password using a reset token.

    The token must exist, be unused and not expired. The validated data
    carries the matching PasswordResetToken instance as ``reset_token``.
    """

    token = serializers.CharField()
    new_password = serializers.CharField(
        write_only=True, min_length=8, style={"input_type": "password"}
    )

    def validate_token(self, value: str) -> str:
        if not PasswordResetToken.objects.valid().filter(token=value).exists():
            raise serializers.ValidationError(_("Invalid or expired reset token."))
        return value

    def validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        reset_token = PasswordResetToken.objects.select_related("user").get(token=data["token"])
        try:
            validate_password(data["new_password"], user=reset_token.user)
        except DjangoValidationError as e:
            raise serializers.ValidationError({"new_password": list(e.messages)})
        data["reset_token"] = reset_token
        return data

    @transaction.atomic
    def save(self) -> User:
        reset_token = self.validated_data["reset_token"]
        user = reset_token.user
        user.set_password(self.validated_data["new_password"])
        user.save(update_fields=["password"])
        reset_token.mark_used()
        return user
