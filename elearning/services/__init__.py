"""
E-Learning Services Package für die EduSync E-Learning Platform

Dieses Paket enthält die übergreifenden Services der Plattform:
- Email Services

Struktur:
└── email/                 # Versand von System-E-Mails

Author: EduSync Development Team
Version: 1.0.0
"""

from .email import EmailService

__all__ = ["EmailService"]
