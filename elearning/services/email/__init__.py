"""
Email Services Package für die EduSync E-Learning Platform

Dieses Paket kapselt den Versand von System-E-Mails:
- Willkommens-E-Mail nach der Registrierung
- Link zum Zurücksetzen des Passworts

Author: EduSync Development Team
Version: 1.0.0
"""

from .email_service import EmailService

__all__ = ["EmailService"]
