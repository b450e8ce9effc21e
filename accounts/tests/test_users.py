from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from accounts.models import User


class UserRoleTests(SimpleTestCase):
    def test_editor_is_not_admin(self) -> None:
        self.assertFalse(User(username="ed", role=User.EDITOR).is_admin)

    def test_admin_role_or_superuser_is_admin(self) -> None:
        self.assertTrue(User(username="ad", role=User.ADMIN).is_admin)
        self.assertTrue(User(username="root", role=User.EDITOR, is_superuser=True).is_admin)


class UserApiTests(TestCase):
    def setUp(self) -> None:
        self.client = APIClient()
        self.staff = User.objects.create_user(
            username="boss", password="secret", role=User.ADMIN, is_staff=True
        )
        self.editor = User.objects.create_user(username="editor", password="secret")

    def test_me_returns_current_user(self) -> None:
        self.client.force_authenticate(self.editor)
        response = self.client.get(reverse("user-me"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["username"], "editor")
        self.assertNotIn("password", response.json())

    def test_list_requires_staff(self) -> None:
        self.client.force_authenticate(self.editor)
        self.assertEqual(self.client.get(reverse("user-list")).status_code, 403)

        self.client.force_authenticate(self.staff)
        self.assertEqual(self.client.get(reverse("user-list")).status_code, 200)

    def test_create_hashes_password(self) -> None:
        self.client.force_authenticate(self.staff)
        response = self.client.post(
            reverse("user-list"),
            {"username": "writer", "password": "pa55word", "role": User.EDITOR},
            format="json",
        )
        self.assertEqual(response.status_code, 201)
        created = User.objects.get(username="writer")
        self.assertTrue(created.check_password("pa55word"))

    def test_editor_cannot_read_other_user(self) -> None:
        self.client.force_authenticate(self.editor)
        response = self.client.get(reverse("user-detail", args=[self.staff.pk]))
        self.assertEqual(response.status_code, 403)

    def test_admin_can_read_any_user(self) -> None:
        self.client.force_authenticate(self.staff)
        response = self.client.get(reverse("user-detail", args=[self.editor.pk]))
        self.assertEqual(response.status_code, 200)

    def test_editor_cannot_promote_self(self) -> None:
        self.client.force_authenticate(self.editor)
        response = self.client.patch(
            reverse("user-detail", args=[self.editor.pk]), {"role": User.ADMIN}, format="json"
        )
        self.assertEqual(response.status_code, 400)
        self.editor.refresh_from_db()
        self.assertEqual(self.editor.role, User.EDITOR)

    def test_admin_can_promote(self) -> None:
        self.client.force_authenticate(self.staff)
        response = self.client.patch(
            reverse("user-detail", args=[self.editor.pk]), {"role": User.ADMIN}, format="json"
        )
        self.assertEqual(response.status_code, 200)
        self.editor.refresh_from_db()
        self.assertTrue(self.editor.is_admin)
