"""
E-Learning Management Commands Package - EduSync

Features:
- seed_test_data: Setzt die Datenbank mit Testdaten neu auf
- cleanup_reset_tokens: Löscht verbrauchte und abgelaufene Passwort-Reset-Tokens

Author: EduSync Development Team
Created: 10.07.2025
Version: 1.0.0
"""
