"""
E-Learning Users Package - EduSync

Dieses Paket enthält alle Module für die Benutzerverwaltung im E-Learning-System.
Ermöglicht Benutzerprofile mit Rollen, Authentifizierung und Passwort-Reset.

Features:
- Benutzerprofile mit Rolle (Student / Instructor)
- JWT-basierte Authentifizierung mit erweiterten Tokens
- Automatische Profilerstellung durch Django-Signale
- Passwort-Reset mit einmalig verwendbaren Tokens

Struktur:
- models.py: Benutzerprofile, Reset-Tokens und Signal-Handler
- serializers.py: API-Serialisierung für Benutzerdaten
- permissions.py: Rollenbasierte DRF-Permissions
- views/: Authentifizierungs-Views

Author: EduSync Development Team
Created: 10.07.2025
Version: 1.0.0
"""
