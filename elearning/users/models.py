"""
E-Learning User Management Models

This module defines the user-related models for the E-Learning system,
extending Django's built-in User model with a role profile and providing
single-use password reset tokens.

Models:
- Profile: Role of the user on the platform (student or instructor)
- PasswordResetToken: Short-lived token sent by e-mail to reset a password

Features:
- Automatic profile creation for new users
- Role helpers used by the API permission classes
- Expiring, single-use reset tokens

Author: EduSync Development Team
Version: 1.0.0
"""

import secrets
from typing import Optional
from datetime import timedelta

from django.conf import settings
from django.db import models
from django.db.models.signals import post_save
from django.dispatch import receiver
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class UserRole(models.TextChoices):
    STUDENT = "student", _("Student")
    INSTRUCTOR = "instructor", _("Instructor")


class Profile(models.Model):
    """
    Extended user profile model for the E-Learning system.

    Attributes:
        user: One-to-one relationship with Django User model
        role: Platform role deciding which endpoints the user may call

    The profile is automatically created when a new user is registered
    and maintains a one-to-one relationship with the User model.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
        verbose_name=_("User"),
        help_text=_("Associated user account"),
    )

    role = models.CharField(
        max_length=20,
        choices=UserRole.choices,
        default=UserRole.STUDENT,
        verbose_name=_("Role"),
        help_text=_("Role of the user on the platform"),
    )

    class Meta:
        verbose_name = _("User Profile")
        verbose_name_plural = _("User Profiles")
        db_table = "elearning_profile"

    def __str__(self) -> str:
        return f"{self.user.username} Profile"

    def __repr__(self) -> str:
        return f"<Profile(user={self.user.username}, role={self.role})>"

    @property
    def is_student(self) -> bool:
        return self.role == UserRole.STUDENT

    @property
    def is_instructor(self) -> bool:
        return self.role == UserRole.INSTRUCTOR


def get_user_role(user) -> Optional[str]:
    """
    Return the role of a user, or None for anonymous users and users without profile.

    Args:
        user: Django user instance (may be AnonymousUser)
    """
    if not user or not user.is_authenticated:
        return None
    try:
        return user.profile.role
    except Profile.DoesNotExist:
        return None


def _default_expiry():
    return timezone.now() + timedelta(minutes=settings.PASSWORD_RESET_TOKEN_MINUTES)


def _generate_token() -> str:
    return secrets.token_urlsafe(32)


class PasswordResetTokenQuerySet(models.QuerySet):
    def valid(self):
        """Tokens that are unused and not yet expired."""
        return self.filter(used=False, expires_at__gt=timezone.now())

    def stale(self):
        """Tokens that can never be redeemed anymore."""
        return self.filter(models.Q(used=True) | models.Q(expires_at__lte=timezone.now()))


class PasswordResetToken(models.Model):
    """
    Single-use token for the forgot-password flow.

    Attributes:
        user: Owner of the token
        token: Random url-safe secret sent to the user by e-mail
        expires_at: Point in time after which the token is rejected
        used: Set once the password has been reset with this token
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="password_reset_tokens",
        verbose_name=_("User"),
    )
    token = models.CharField(
        max_length=64,
        unique=True,
        default=_generate_token,
        verbose_name=_("Token"),
    )
    expires_at = models.DateTimeField(default=_default_expiry, verbose_name=_("Expires At"))
    used = models.BooleanField(default=False, verbose_name=_("Used"))
    created_at = models.DateTimeField(auto_now_add=True)

    objects = PasswordResetTokenQuerySet.as_manager()

    class Meta:
        verbose_name = _("Password Reset Token")
        verbose_name_plural = _("Password Reset Tokens")
        db_table = "elearning_password_reset_token"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"Reset token for {self.user.username} (used={self.used})"

    @property
    def is_valid(self) -> bool:
        return not self.used and self.expires_at > timezone.now()

    def mark_used(self) -> None:
        self.used = True
        self.save(update_fields=["used"])


# --- Signal Handlers for Automatic Profile Management ---


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_user_profile(sender, instance, created: bool, **kwargs) -> None:
    """
    Automatically create a user profile when a new user is created.

    Args:
        sender: The User model class
        instance: The actual User instance that was saved
        created: Boolean indicating if this is a new instance
        **kwargs: Additional signal arguments
    """
    if created:
        Profile.objects.get_or_create(user=instance)
