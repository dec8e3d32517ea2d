"""
Email Service für die EduSync E-Learning Platform

Dünner Wrapper um Djangos Mail-Framework. Der Versand ist "fire-and-forget":
Fehler beim Versand werden geloggt, aber nie an den Aufrufer weitergegeben,
damit Registrierung und Passwort-Reset nicht an einem Mailserver scheitern.

Author: EduSync Development Team
Version: 1.0.0
"""

import logging
from typing import Optional
from urllib.parse import quote

from django.conf import settings
from django.core.mail import send_mail

logger = logging.getLogger(__name__)


class EmailService:
    """
    Service für den Versand von System-E-Mails.

    Alle öffentlichen Methoden geben True zurück, wenn die Mail an das
    konfigurierte Backend übergeben wurde, sonst False.
    """

    def __init__(self, from_email: Optional[str] = None):
        self.logger = logger
        self.from_email = from_email or settings.DEFAULT_FROM_EMAIL

    def _send(self, subject: str, message: str, recipient: str) -> bool:
        try:
            send_mail(
                subject,
                message,
                self.from_email,
                [recipient],
                fail_silently=False,
            )
        except Exception as e:
            self.logger.error(f"E-Mail an {recipient} konnte nicht gesendet werden: {e}")
            return False

        self.logger.info(f"E-Mail '{subject}' an {recipient} gesendet")
        return True

    def send_welcome_email(self, email: str, name: str, role: str) -> bool:
        """
        Sendet die Willkommens-E-Mail nach einer erfolgreichen Registrierung.

        Args:
            email: Empfängeradresse
            name: Anzeigename des neuen Users
            role: Rolle, mit der sich der User registriert hat
        """
        subject = "Welcome to EduSync"
        message = (
            f"Hello {name},\n\n"
            f"your EduSync account has been created. You are registered as {role}.\n"
            f"Sign in at {settings.FRONTEND_URL} to get started.\n\n"
            "The EduSync Team"
        )
        return self._send(subject, message, email)

    def build_reset_link(self, token: str) -> str:
        return f"{settings.FRONTEND_URL}/reset-password?token={quote(token, safe='')}"

    def send_password_reset_email(self, email: str, name: str, token: str) -> bool:
        """
        Sendet den Link zum Zurücksetzen des Passworts.

        Args:
            email: Empfängeradresse
            name: Anzeigename des Users
            token: Reset-Token, wird in den Link eingebettet
        """
        subject = "Reset your EduSync password"
        message = (
            f"Hello {name},\n\n"
            "we received a request to reset your password. Use the link below, "
            f"it is valid for {settings.PASSWORD_RESET_TOKEN_MINUTES} minutes:\n\n"
            f"{self.build_reset_link(token)}\n\n"
            "If you did not request a new password you can ignore this e-mail.\n\n"
            "The EduSync Team"
        )
        return self._send(subject, message, email)
