"""
Tests für Registrierung, Login per Cookie, Passwort-Reset, Logout und
das Bereinigen der Reset-Tokens.
"""

from datetime import timedelta
from io import StringIO
from unittest import mock

from django.contrib.auth.models import User
from django.core import mail
from django.core.cache import cache
from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from elearning.models import PasswordResetToken, UserRole, get_user_role
from elearning.services.email import EmailService
from elearning.tests.helpers import TEST_PASSWORD, create_user

REGISTER_URL = reverse("elearning:users:register")
TOKEN_URL = reverse("elearning:token_obtain_pair")
ME_URL = reverse("elearning:users:me")
LOGOUT_URL = reverse("elearning:users:logout")
FORGOT_URL = reverse("elearning:users:forgot_password")
RESET_URL = reverse("elearning:users:reset_password")


class RegistrationTests(APITestCase):
    def setUp(self):
        # Rate-Limiting nutzt den Cache
        cache.clear()

    def _payload(self, **overrides):
        payload = {
            "name": "Jane Doe",
            "email": "Jane@Example.com",
            "password": "sicheres-Passwort-42",
            "role": "Instructor",
        }
        payload.update(overrides)
        return payload

    def test_register_instructor(self):
        response = self.client.post(REGISTER_URL, self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["detail"], "Registration successful as Instructor!")

        user = User.objects.get(email="jane@example.com")
        self.assertEqual(user.username, "jane@example.com")
        self.assertEqual(user.first_name, "Jane Doe")
        self.assertEqual(get_user_role(user), UserRole.INSTRUCTOR)

        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ["jane@example.com"])

    def test_invalid_role(self):
        response = self.client.post(REGISTER_URL, self._payload(role="Admin"), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("role", response.data["errors"])

    def test_field_validation(self):
        response = self.client.post(
            REGISTER_URL,
            self._payload(name="Jo", email="kein-email", password="kurz"),
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        for field in ("name", "email", "password"):
            self.assertIn(field, response.data["errors"])
        self.assertEqual(response.data["title"], "Validation error")
        self.assertEqual(response.data["detail"], "One or more fields are invalid")

    def test_duplicate_email(self):
        create_user("jane@example.com")
        response = self.client.post(REGISTER_URL, self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("email", response.data["errors"])

    def test_failing_mail_server_does_not_fail_registration(self):
        with mock.patch(
            "elearning.services.email.email_service.send_mail",
            side_effect=ConnectionRefusedError("smtp down"),
        ):
            response = self.client.post(REGISTER_URL, self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(User.objects.filter(email="jane@example.com").exists())


class LoginTests(APITestCase):
    @classmethod
    def setUpTestData(cls):
        cls.user = create_user("max@test.com", first_name="Max")

    def setUp(self):
        cache.clear()

    def test_login_sets_cookies(self):
        response = self.client.post(
            TOKEN_URL, {"username": "max@test.com", "password": TEST_PASSWORD}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("access_token", response.cookies)
        self.assertIn("refresh_token", response.cookies)
        self.assertTrue(response.cookies["access_token"]["httponly"])
        self.assertNotIn("access", response.data)
        self.assertEqual(response.data["role"], UserRole.STUDENT)
        self.assertEqual(response.data["name"], "Max")

        # Folge-Requests authentifizieren sich über das Cookie
        me = self.client.get(ME_URL)
        self.assertEqual(me.status_code, status.HTTP_200_OK)
        self.assertEqual(me.data["email"], "max@test.com")
        self.assertEqual(me.data["role"], UserRole.STUDENT)

    def test_bearer_header(self):
        response = self.client.post(
            TOKEN_URL, {"username": "max@test.com", "password": TEST_PASSWORD}, format="json"
        )
        access = response.cookies["access_token"].value
        self.client.cookies.clear()
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        self.assertEqual(self.client.get(ME_URL).status_code, status.HTTP_200_OK)

    def test_wrong_password(self):
        response = self.client.post(
            TOKEN_URL, {"username": "max@test.com", "password": "falsch"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertNotIn("access_token", response.cookies)

    def test_me_requires_login(self):
        self.assertEqual(self.client.get(ME_URL).status_code, status.HTTP_401_UNAUTHORIZED)

    def test_logout_clears_cookies(self):
        self.client.post(
            TOKEN_URL, {"username": "max@test.com", "password": TEST_PASSWORD}, format="json"
        )
        response = self.client.post(LOGOUT_URL)
        self.assertEqual(response.status_code, status.HTTP_205_RESET_CONTENT)
        self.assertEqual(response.cookies["access_token"].value, "")
        self.assertEqual(response.cookies["refresh_token"].value, "")


class PasswordResetTests(APITestCase):
    @classmethod
    def setUpTestData(cls):
        cls.user = create_user("max@test.com")

    def setUp(self):
        cache.clear()

    def test_forgot_password_sends_link(self):
        response = self.client.post(FORGOT_URL, {"email": "MAX@test.com"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        token = PasswordResetToken.objects.get(user=self.user)
        self.assertTrue(token.is_valid)
        self.assertEqual(len(mail.outbox), 1)
        self.assertIn(f"/reset-password?token={token.token}", mail.outbox[0].body)

    def test_forgot_password_unknown_email(self):
        response = self.client.post(FORGOT_URL, {"email": "niemand@test.com"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(mail.outbox), 0)
        self.assertFalse(PasswordResetToken.objects.exists())

    def test_reset_password(self):
        token = PasswordResetToken.objects.create(user=self.user)
        response = self.client.post(
            RESET_URL, {"token": token.token, "new_password": "neues-Passwort-99"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("neues-Passwort-99"))
        token.refresh_from_db()
        self.assertTrue(token.used)

        # Token ist nur einmal gültig
        response = self.client.post(
            RESET_URL, {"token": token.token, "new_password": "anderes-Passwort-77"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("token", response.data["errors"])

    def test_expired_token(self):
        token = PasswordResetToken.objects.create(
            user=self.user, expires_at=timezone.now() - timedelta(minutes=1)
        )
        response = self.client.post(
            RESET_URL, {"token": token.token, "new_password": "neues-Passwort-99"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_short_password(self):
        token = PasswordResetToken.objects.create(user=self.user)
        response = self.client.post(
            RESET_URL, {"token": token.token, "new_password": "kurz"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("new_password", response.data["errors"])

    def test_reset_link(self):
        with self.settings(FRONTEND_URL="https://edusync.example"):
            link = EmailService().build_reset_link("abc-123")
        self.assertEqual(link, "https://edusync.example/reset-password?token=abc-123")


class CleanupResetTokensCommandTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        user = create_user("max@test.com")
        cls.valid = PasswordResetToken.objects.create(user=user)
        PasswordResetToken.objects.create(user=user, used=True)
        PasswordResetToken.objects.create(
            user=user, expires_at=timezone.now() - timedelta(minutes=5)
        )

    def test_dry_run_keeps_tokens(self):
        out = StringIO()
        call_command("cleanup_reset_tokens", "--dry-run", stdout=out)
        self.assertIn("2", out.getvalue())
        self.assertEqual(PasswordResetToken.objects.count(), 3)

    def test_deletes_stale_tokens(self):
        call_command("cleanup_reset_tokens", stdout=StringIO())
        self.assertEqual(list(PasswordResetToken.objects.all()), [self.valid])
