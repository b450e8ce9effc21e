from datetime import datetime, timezone

from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from accounts.models import User
from experience.models import Company
from showcase.models import Contribution, Highlight, RecommendedBook
from showcase.serializers import LenientIntegerField


def utc(year, month=1, day=1):
    return datetime(year, month, day, tzinfo=timezone.utc)


def contribution(title, **extra):
    fields = {
        "title": title,
        "title_fr": title,
        "description": "Description",
        "description_fr": "Description",
    }
    fields.update(extra)
    return Contribution.objects.create(**fields)


class LenientIntegerFieldTests(SimpleTestCase):
    def test_parses_integers_and_numeric_strings(self) -> None:
        field = LenientIntegerField()
        self.assertEqual(field.run_validation(3), 3)
        self.assertEqual(field.run_validation("7"), 7)

    def test_garbage_becomes_zero(self) -> None:
        field = LenientIntegerField()
        self.assertEqual(field.run_validation("first"), 0)
        self.assertEqual(field.run_validation(""), 0)
        self.assertEqual(field.run_validation(None), 0)


class ContributionApiTests(TestCase):
    def setUp(self) -> None:
        self.client = APIClient()
        self.user = User.objects.create_user(username="editor", password="secret")

    def test_list_ordered_by_display_order(self) -> None:
        contribution("Second", display_order=2)
        contribution("First", display_order=1)
        response = self.client.get(reverse("contribution-list"))
        self.assertEqual([item["title"] for item in response.json()], ["First", "Second"])

    def test_filter_by_type(self) -> None:
        contribution("Library", type=Contribution.Type.OPEN_SOURCE)
        contribution("Talk", type=Contribution.Type.COMMUNITY)
        response = self.client.get(reverse("contribution-list"), {"type": "COMMUNITY"})
        self.assertEqual([item["title"] for item in response.json()], ["Talk"])

    def test_invalid_type_filter(self) -> None:
        response = self.client.get(reverse("contribution-list"), {"type": "HOBBY"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "Invalid contribution type")

    def test_limit(self) -> None:
        for order in range(3):
            contribution(f"Item {order}", display_order=order)
        response = self.client.get(reverse("contribution-list"), {"limit": "2"})
        self.assertEqual([item["title"] for item in response.json()], ["Item 0", "Item 1"])

    def test_non_numeric_limit(self) -> None:
        response = self.client.get(reverse("contribution-list"), {"limit": "many"})
        self.assertEqual(response.status_code, 400)

    def test_create_normalizes_display_order_and_current_end(self) -> None:
        self.client.force_authenticate(self.user)
        response = self.client.post(
            reverse("contribution-list"),
            {
                "title": "Library",
                "title_fr": "Bibliothèque",
                "description": "A library",
                "description_fr": "Une bibliothèque",
                "display_order": "soon",
                "is_current": True,
                "start_date": "2020-01-01T00:00:00Z",
                "end_date": "2021-01-01T00:00:00Z",
            },
            format="json",
        )
        self.assertEqual(response.status_code, 201, response.content)
        created = Contribution.objects.get()
        self.assertEqual(created.display_order, 0)
        self.assertIsNone(created.end_date)

    def test_create_rejects_unknown_type(self) -> None:
        self.client.force_authenticate(self.user)
        response = self.client.post(
            reverse("contribution-list"),
            {
                "title": "Library",
                "title_fr": "Bibliothèque",
                "description": "A library",
                "description_fr": "Une bibliothèque",
                "type": "HOBBY",
            },
            format="json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["type"], ["Invalid contribution type"])


class HighlightApiTests(TestCase):
    def setUp(self) -> None:
        self.client = APIClient()
        self.tech = Company.objects.create(name="Tech Corp", name_fr="Tech Corp")
        other = Company.objects.create(name="Other", name_fr="Other")
        Highlight.objects.create(company=self.tech, title="Launch", title_fr="Lancement", start_date=utc(2021))
        Highlight.objects.create(company=other, title="Migration", title_fr="Migration", start_date=utc(2019))

    def test_filter_by_company(self) -> None:
        response = self.client.get(reverse("highlight-list"), {"company": self.tech.pk})
        data = response.json()
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["company_name"], "Tech Corp")
        self.assertEqual(data[0]["media"], [])

    def test_french_title_required(self) -> None:
        self.client.force_authenticate(User.objects.create_user(username="editor", password="secret"))
        response = self.client.post(
            reverse("highlight-list"),
            {"company": self.tech.pk, "title": "Launch", "start_date": "2021-01-01T00:00:00Z"},
            format="json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("title_fr", response.json())


class RecommendedBookApiTests(TestCase):
    def test_ordered_by_priority_then_title(self) -> None:
        for title, priority in (("Zen", 1), ("Algorithms", 2), ("Clean Code", 1)):
            RecommendedBook.objects.create(
                title=title,
                title_fr=title,
                author="Author",
                recommended_reason="Reason",
                recommended_reason_fr="Raison",
                priority=priority,
            )
        response = APIClient().get(reverse("recommended-book-list"))
        self.assertEqual([item["title"] for item in response.json()], ["Clean Code", "Zen", "Algorithms"])
