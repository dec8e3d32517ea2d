"""
E-Learning Management Package - EduSync

Dieses Paket enthält Django Management Commands für das E-Learning-System.

Features:
- Testdaten für Entwicklung und Demo
- Bereinigung abgelaufener und verbrauchter Passwort-Reset-Tokens
- Logging und Fehlerbehandlung für Management-Commands

Author: EduSync Development Team
Created: 10.07.2025
Version: 1.0.0
"""
