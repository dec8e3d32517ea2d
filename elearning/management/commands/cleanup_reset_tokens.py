"""
Cleanup Reset Tokens Management Command - EduSync

Dieses Management Command bereinigt Passwort-Reset-Tokens, die nicht mehr
eingelöst werden können (bereits verwendet oder abgelaufen).

Features:
- Automatische Bereinigung per Cronjob möglich
- Optionaler Dry-Run ohne Löschung
- Detaillierte Ausgabe für Monitoring

Author: EduSync Development Team
Created: 10.07.2025
Version: 1.0.0
"""

from django.core.management.base import BaseCommand, CommandError
import logging

from elearning.users.models import PasswordResetToken

# Logger einrichten
logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """
    Django Management Command für die Bereinigung von Passwort-Reset-Tokens.

    Löscht alle Tokens, die bereits verwendet wurden oder deren Ablaufzeit
    (PASSWORD_RESET_TOKEN_MINUTES) überschritten ist.
    """

    help = "Löscht Passwort-Reset-Tokens, die bereits verwendet wurden oder abgelaufen sind."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Zeigt nur an, wie viele Tokens gelöscht würden.",
        )

    def handle(self, *args, **options):
        """
        Hauptausführungsmethode für das Management Command.

        Raises:
            CommandError: Bei Fehlern während der Ausführung
        """
        try:
            stale_tokens = PasswordResetToken.objects.stale()
            count = stale_tokens.count()

            if count == 0:
                self.stdout.write(self.style.SUCCESS("Keine abgelaufenen Tokens gefunden."))
                return

            if options["dry_run"]:
                self.stdout.write(f"{count} Tokens würden gelöscht werden (Dry-Run).")
                return

            deleted_count, _ = stale_tokens.delete()

            self.stdout.write(
                self.style.SUCCESS(f"{deleted_count} Tokens erfolgreich gelöscht.")
            )

        except Exception as e:
            logger.error(
                f"Fehler beim Ausführen von cleanup_reset_tokens: {e}", exc_info=True
            )
            raise CommandError(f"Ein Fehler ist aufgetreten: {e}")
