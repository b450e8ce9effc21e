from datetime import datetime, timezone
from unittest import mock

from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from accounts.models import User
from experience.models import Company
from experience.services import ExperienceService
from knowledge.models import Skill
from showcase.models import Highlight


def utc(year, month=1, day=1):
    return datetime(year, month, day, tzinfo=timezone.utc)


class PortfolioDataViewTests(TestCase):
    def setUp(self) -> None:
        self.client = APIClient()
        company = Company.objects.create(name="Tech Corp", name_fr="Tech Corp")
        ExperienceService.create_experience(
            {"company": company, "title": "Engineer"},
            [{"start_date": utc(2020), "end_date": None}],
        )
        Highlight.objects.create(company=company, title="Launch", title_fr="Lancement", start_date=utc(2021))
        Skill.objects.create(name="Python", category="Languages")

    def test_homepage_payload(self) -> None:
        response = self.client.get(reverse("portfolio-data"))

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(
            set(data),
            {"portfolio_experiences", "educations", "certifications", "skills", "highlights", "navbar_config"},
        )
        self.assertEqual(data["portfolio_experiences"][0]["formatted_periods"], "2020")
        self.assertEqual(data["highlights"][0]["company_name"], "Tech Corp")
        self.assertEqual(data["skills"][0]["name"], "Python")
        self.assertEqual(data["navbar_config"]["logo_text"], "resumeflex")

    @mock.patch("resumeflex.views.ExperienceService.get_portfolio_experiences", side_effect=RuntimeError("boom"))
    def test_unexpected_failure(self, mock_get) -> None:
        with self.assertLogs("resumeflex.views", level="ERROR"):
            response = self.client.get(reverse("portfolio-data"))
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["error"], "Failed to fetch data")


class DashboardViewTests(TestCase):
    def test_requires_login(self) -> None:
        self.assertEqual(APIClient().get(reverse("dashboard")).status_code, 403)

    def test_counts(self) -> None:
        Company.objects.create(name="Tech Corp", name_fr="Tech Corp")
        client = APIClient()
        client.force_authenticate(User.objects.create_user(username="editor", password="secret"))

        response = client.get(reverse("dashboard"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["companies"], 1)
        self.assertEqual(response.json()["experiences"], 0)
