"""
E-Learning Courses Package - EduSync

Dieses Paket enthält alle Module für die Kursverwaltung im E-Learning-System.
Instructors legen Kurse an und pflegen sie, Students schreiben sich ein.

Features:
- Kurs-CRUD mit Besitzer-Prüfung (nur der anlegende Instructor darf ändern)
- Einschreibung mit Schutz gegen doppelte Einschreibungen
- Übersicht der eigenen Kurse für Students

Struktur:
- models.py: Datenmodelle für Kurse und Einschreibungen
- serializers.py: API-Serialisierung für Kursdaten
- views/: Kurs- und Einschreibungs-Views

Author: EduSync Development Team
Created: 10.07.2025
Version: 1.0.0
"""
