"""
E-Learning Courses Views Package - EduSync

Dieses Paket enthält alle Views für die Kursverwaltung.

Features:
- Kurs-Views: Katalog, Detail, Anlegen, Bearbeiten, Löschen
- Einschreibungs-Views: Einschreiben, Status, eigene Kurse
- Rollenbasierte Zugriffskontrolle

Author: EduSync Development Team
Created: 10.07.2025
Version: 1.0.0
"""

from .course_views import *
from .enrollment_views import *
