from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from accounts.models import User
from appearance.models import FooterConfig, NavbarConfig


class NavbarConfigApiTests(TestCase):
    def setUp(self) -> None:
        self.client = APIClient()

    def test_get_creates_defaults_once(self) -> None:
        first = self.client.get(reverse("navbar-config"))
        second = self.client.get(reverse("navbar-config"))

        self.assertEqual(first.status_code, 200)
        self.assertEqual(first.json()["logo_text"], "resumeflex")
        self.assertEqual(first.json()["background_color"], "#141414")
        self.assertEqual(first.json()["id"], second.json()["id"])
        self.assertEqual(NavbarConfig.objects.count(), 1)

    def test_put_updates_only_supplied_fields(self) -> None:
        self.client.force_authenticate(User.objects.create_user(username="editor", password="secret"))
        response = self.client.put(
            reverse("navbar-config"), {"logo_text": "Jane Doe", "background_type": "gradient"}, format="json"
        )

        self.assertEqual(response.status_code, 200)
        config = NavbarConfig.load()
        self.assertEqual(config.logo_text, "Jane Doe")
        self.assertEqual(config.background_type, NavbarConfig.BackgroundType.GRADIENT)
        self.assertEqual(config.skills_label_fr, "Compétences")

    def test_invalid_color(self) -> None:
        self.client.force_authenticate(User.objects.create_user(username="editor", password="secret"))
        response = self.client.put(reverse("navbar-config"), {"gradient_to": "blue"}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertIn("gradient_to", response.json()["error"])

    def test_anonymous_cannot_update(self) -> None:
        response = self.client.put(reverse("navbar-config"), {"logo_text": "x"}, format="json")
        self.assertEqual(response.status_code, 403)


class FooterConfigApiTests(TestCase):
    def test_defaults_and_update(self) -> None:
        client = APIClient()
        self.assertTrue(client.get(reverse("footer-config")).json()["show_linkedin"])

        client.force_authenticate(User.objects.create_user(username="editor", password="secret"))
        response = client.put(
            reverse("footer-config"),
            {"show_linkedin": False, "linkedin_url": "https://linkedin.com/in/jane"},
            format="json",
        )

        self.assertEqual(response.status_code, 200)
        footer = FooterConfig.load()
        self.assertFalse(footer.show_linkedin)
        self.assertEqual(footer.copyright_text, "© 2025 resumeflex. All rights reserved.")
