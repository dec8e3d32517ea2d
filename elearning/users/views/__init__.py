"""
E-Learning Users Views Package - EduSync

Dieses Paket enthält alle Views für die Benutzerverwaltung im E-Learning-System.
Ermöglicht Registrierung, Authentifizierung und Passwortverwaltung.

Features:
- Registrierung als Student oder Instructor
- JWT-basierte Authentifizierung mit HTTP-only Cookies
- Passwort-Reset per E-Mail-Link
- Logout-Funktionalität mit Token-Invalidierung

Author: EduSync Development Team
Created: 10.07.2025
Version: 1.0.0
"""

from .auth_views import (
    CustomTokenObtainPairView,
    CustomTokenRefreshView,
    LogoutView,
    RegistrationView,
    ForgotPasswordView,
    ResetPasswordView,
)
from .user_self_info import CurrentUserView
