"""
E-Learning Application Configuration

Django application configuration for EduSync. The app bundles the users,
courses and assessments packages under the single app label ``elearning``.

Author: EduSync Development Team
Version: 1.0.0
"""

from django.apps import AppConfig


class ElearningConfig(AppConfig):
    """
    Configuration of the ``elearning`` app.

    Attributes:
        default_auto_field: Primary key type for models without an explicit id
            (Profile, PasswordResetToken); courses, assessments and results use UUIDs
        name: Application name for Django registration
        verbose_name: Name shown in the admin
    """

    default_auto_field: str = "django.db.models.BigAutoField"
    name: str = "elearning"
    verbose_name: str = "EduSync E-Learning"

    def ready(self) -> None:
        """Register the signal handler that creates a Profile for every new user."""
        super().ready()
        from .users import models  # noqa: F401
