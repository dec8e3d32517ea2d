"""
E-Learning Package - EduSync

Dieses Paket enthält alle Module für das E-Learning-System.
Ermöglicht eine digitale Lernplattform mit Benutzerverwaltung,
Kursen, Einschreibungen und bewerteten Assessments.

Features:
- Registrierung und JWT-Authentifizierung mit Rollen (Student / Instructor)
- Kursverwaltung und Einschreibung
- Multiple-Choice-Assessments mit automatischer Bewertung
- Ergebnisübersicht für Studenten

Struktur:
- users/: Benutzerverwaltung und Authentifizierung
- courses/: Kurse und Einschreibungen
- assessments/: Prüfungssystem und Bewertung
- services/: Gemeinsame Services (E-Mail)
- management/: Django Management Commands

Author: EduSync Development Team
Created: 10.07.2025
Version: 1.0.0
"""
