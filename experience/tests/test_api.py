from datetime import datetime, timezone
from io import StringIO

from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from accounts.models import User
from experience.models import Company, Experience, ExperienceDateRange
from experience.services import ExperienceService


def utc(year, month=1, day=1):
    return datetime(year, month, day, tzinfo=timezone.utc)


class CompanyApiTests(TestCase):
    def setUp(self) -> None:
        self.client = APIClient()
        self.user = User.objects.create_user(username="editor", password="secret")

    def test_list_is_public(self) -> None:
        Company.objects.create(name="Tech Corp", name_fr="Tech Corp")
        response = self.client.get(reverse("company-list"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()[0]["name"], "Tech Corp")

    def test_create_requires_authentication(self) -> None:
        response = self.client.post(
            reverse("company-list"), {"name": "Tech Corp", "name_fr": "Tech Corp"}, format="json"
        )
        self.assertEqual(response.status_code, 403)

    def test_create_trims_names(self) -> None:
        self.client.force_authenticate(self.user)
        response = self.client.post(
            reverse("company-list"),
            {"name": "  Tech Corp ", "name_fr": " Tech Corp FR", "logo_url": ""},
            format="json",
        )
        self.assertEqual(response.status_code, 201)
        company = Company.objects.get()
        self.assertEqual(company.name, "Tech Corp")
        self.assertEqual(company.name_fr, "Tech Corp FR")
        self.assertIsNone(company.logo_url)

    def test_create_rejects_blank_french_name(self) -> None:
        self.client.force_authenticate(self.user)
        response = self.client.post(
            reverse("company-list"), {"name": "Tech Corp", "name_fr": "  "}, format="json"
        )
        self.assertEqual(response.status_code, 400)
        self.assertFalse(Company.objects.exists())

    def test_delete_refused_while_referenced(self) -> None:
        self.client.force_authenticate(self.user)
        company = Company.objects.create(name="Tech Corp", name_fr="Tech Corp")
        Experience.objects.create(company=company, title="Engineer", start_date=utc(2020))

        response = self.client.delete(reverse("company-detail", args=[company.pk]))

        self.assertEqual(response.status_code, 400)
        self.assertIn("1 experience(s)", response.json()["error"])
        self.assertTrue(Company.objects.filter(pk=company.pk).exists())

    def test_delete_unreferenced_company(self) -> None:
        self.client.force_authenticate(self.user)
        company = Company.objects.create(name="Tech Corp", name_fr="Tech Corp")
        response = self.client.delete(reverse("company-detail", args=[company.pk]))
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Company.objects.exists())


class ExperienceApiTests(TestCase):
    def setUp(self) -> None:
        self.client = APIClient()
        self.client.force_authenticate(User.objects.create_user(username="editor", password="secret"))
        self.company = Company.objects.create(name="Tech Corp", name_fr="Tech Corp")

    def test_create_with_date_ranges_mirrors_legacy_fields(self) -> None:
        response = self.client.post(
            reverse("experience-list"),
            {
                "company": self.company.pk,
                "title": "Engineer",
                "date_ranges": [
                    {"start_date": "2021-01-01T00:00:00Z", "end_date": None},
                    {"start_date": "2020-01-01T00:00:00Z", "end_date": "2020-12-31T00:00:00Z"},
                ],
            },
            format="json",
        )

        self.assertEqual(response.status_code, 201, response.content)
        experience = Experience.objects.get()
        self.assertEqual(experience.start_date, utc(2020))
        self.assertIsNone(experience.end_date)
        self.assertEqual(experience.date_ranges.count(), 2)

    def test_create_without_ranges_uses_legacy_fields(self) -> None:
        response = self.client.post(
            reverse("experience-list"),
            {
                "company": self.company.pk,
                "title": "Engineer",
                "start_date": "2018-03-01T00:00:00Z",
                "end_date": "2019-03-01T00:00:00Z",
            },
            format="json",
        )

        self.assertEqual(response.status_code, 201, response.content)
        date_range = ExperienceDateRange.objects.get()
        self.assertEqual(date_range.start_date, utc(2018, 3, 1))
        self.assertEqual(date_range.end_date, utc(2019, 3, 1))

    def test_create_rejects_range_ending_before_start(self) -> None:
        response = self.client.post(
            reverse("experience-list"),
            {
                "company": self.company.pk,
                "title": "Engineer",
                "date_ranges": [
                    {"start_date": "2020-01-01T00:00:00Z", "end_date": "2019-01-01T00:00:00Z"},
                ],
            },
            format="json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertFalse(Experience.objects.exists())

    def test_create_requires_some_start(self) -> None:
        response = self.client.post(
            reverse("experience-list"),
            {"company": self.company.pk, "title": "Engineer"},
            format="json",
        )
        self.assertEqual(response.status_code, 400)

    def test_update_replaces_date_ranges(self) -> None:
        experience = ExperienceService.create_experience(
            {"company": self.company, "title": "Engineer", "start_date": utc(2015), "end_date": utc(2016)}
        )

        response = self.client.patch(
            reverse("experience-detail", args=[experience.pk]),
            {"date_ranges": [{"start_date": "2017-01-01T00:00:00Z", "end_date": None}]},
            format="json",
        )

        self.assertEqual(response.status_code, 200, response.content)
        experience.refresh_from_db()
        self.assertEqual(experience.start_date, utc(2017))
        self.assertIsNone(experience.end_date)
        self.assertEqual(list(experience.date_ranges.values_list("start_date", flat=True)), [utc(2017)])

    def test_legacy_date_edit_refused_for_multi_period_experience(self) -> None:
        experience = ExperienceService.create_experience(
            {"company": self.company, "title": "Engineer"},
            [
                {"start_date": utc(2015), "end_date": utc(2016)},
                {"start_date": utc(2018), "end_date": utc(2019)},
            ],
        )

        response = self.client.patch(
            reverse("experience-detail", args=[experience.pk]),
            {"end_date": "2020-01-01T00:00:00Z"},
            format="json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("date_ranges", str(response.json()))
        experience.refresh_from_db()
        self.assertEqual(experience.end_date, utc(2019))
        self.assertEqual(experience.date_ranges.count(), 2)

    def test_legacy_date_edit_updates_single_range(self) -> None:
        experience = ExperienceService.create_experience(
            {"company": self.company, "title": "Engineer", "start_date": utc(2015), "end_date": utc(2016)}
        )

        response = self.client.patch(
            reverse("experience-detail", args=[experience.pk]),
            {"end_date": "2017-01-01T00:00:00Z"},
            format="json",
        )

        self.assertEqual(response.status_code, 200, response.content)
        date_range = experience.date_ranges.get()
        self.assertEqual((date_range.start_date, date_range.end_date), (utc(2015), utc(2017)))


class PortfolioExperienceApiTests(TestCase):
    def setUp(self) -> None:
        self.client = APIClient()
        tech = Company.objects.create(name="Tech Corp", name_fr="Tech Corp")
        old = Company.objects.create(name="Old Co", name_fr="Old Co")
        Company.objects.create(name="Unused", name_fr="Unused")

        ExperienceService.create_experience(
            {"company": tech, "title": "Engineer"},
            [{"start_date": utc(2020), "end_date": utc(2020, 12, 31)}],
        )
        ExperienceService.create_experience(
            {"company": tech, "title": "Senior Engineer"},
            [{"start_date": utc(2021), "end_date": None}],
        )
        ExperienceService.create_experience(
            {"company": old, "title": "Developer"},
            [{"start_date": utc(2015), "end_date": utc(2018)}],
        )

    def test_one_entry_per_company_with_experiences(self) -> None:
        response = self.client.get(reverse("portfolio-experiences"))

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual([item["company"]["name"] for item in data], ["Tech Corp", "Old Co"])

        tech = data[0]
        self.assertEqual(tech["title"], "Senior Engineer")
        self.assertEqual(tech["formatted_periods"], "2020 - 2021")
        self.assertTrue(tech["is_current_position"])
        self.assertIsNone(tech["latest_end_date"])
        self.assertEqual(len(tech["date_ranges"]), 2)

    def test_stats_envelope(self) -> None:
        response = self.client.get(reverse("portfolio-experiences"), {"stats": "true"})

        self.assertEqual(response.status_code, 200)
        stats = response.json()["stats"]
        self.assertEqual(stats["total_experiences"], 2)
        self.assertEqual(stats["current_positions"], 1)
        self.assertEqual(stats["multi_period_experiences"], 1)

    def test_sort_current_first(self) -> None:
        response = self.client.get(reverse("portfolio-experiences"), {"sort": "current_first"})
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()[0]["is_current_position"])

    def test_unknown_sort_is_rejected(self) -> None:
        response = self.client.get(reverse("portfolio-experiences"), {"sort": "alphabetical"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("latest_end", response.json()["error"])


class PortfolioExperiencePreviewApiTests(TestCase):
    def setUp(self) -> None:
        self.client = APIClient()
        self.client.force_authenticate(User.objects.create_user(username="editor", password="secret"))
        self.companies = [
            {
                "id": 1,
                "name": "Tech Corp",
                "experiences": [
                    {
                        "id": 10,
                        "title": "Senior Engineer",
                        "date_ranges": [{"start_date": "2021-01-01T00:00:00.000Z", "end_date": None}],
                    },
                    {
                        "id": 11,
                        "title": "Engineer",
                        "start_date": "2020-01-01",
                        "end_date": "2020-12-31",
                    },
                ],
            },
            {"id": 2, "name": "Empty Co", "experiences": []},
        ]

    def test_aggregates_json_payload(self) -> None:
        response = self.client.post(
            reverse("portfolio-experiences-preview"), {"companies": self.companies}, format="json"
        )

        self.assertEqual(response.status_code, 200, response.content)
        data = response.json()
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["title"], "Senior Engineer")
        self.assertEqual(data[0]["formatted_periods"], "2020 - 2021")
        self.assertTrue(data[0]["is_current_position"])
        self.assertFalse(Company.objects.exists())

    def test_stats_envelope(self) -> None:
        response = self.client.post(
            reverse("portfolio-experiences-preview"),
            {"companies": self.companies, "stats": True},
            format="json",
        )
        self.assertEqual(response.json()["stats"]["multi_period_experiences"], 1)

    def test_unparseable_date(self) -> None:
        self.companies[0]["experiences"][1]["start_date"] = "last spring"
        response = self.client.post(
            reverse("portfolio-experiences-preview"), {"companies": self.companies}, format="json"
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("start_date", response.json()["error"])

    def test_companies_must_be_a_list(self) -> None:
        response = self.client.post(
            reverse("portfolio-experiences-preview"), {"companies": "Tech Corp"}, format="json"
        )
        self.assertEqual(response.status_code, 400)

    def test_requires_authentication(self) -> None:
        response = APIClient().post(
            reverse("portfolio-experiences-preview"), {"companies": []}, format="json"
        )
        self.assertEqual(response.status_code, 403)


class BackfillDateRangesCommandTests(TestCase):
    def test_creates_one_range_per_legacy_experience(self) -> None:
        company = Company.objects.create(name="Tech Corp", name_fr="Tech Corp")
        legacy = Experience.objects.create(
            company=company, title="Engineer", start_date=utc(2016), end_date=utc(2018)
        )
        ExperienceService.create_experience(
            {"company": company, "title": "Lead"}, [{"start_date": utc(2019), "end_date": None}]
        )

        out = StringIO()
        call_command("migrate_experience_date_ranges", stdout=out)

        self.assertIn("1 experience(s) migrated", out.getvalue())
        date_range = legacy.date_ranges.get()
        self.assertEqual((date_range.start_date, date_range.end_date), (utc(2016), utc(2018)))
        self.assertEqual(ExperienceDateRange.objects.count(), 2)
