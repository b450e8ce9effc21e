from django.core.exceptions import ValidationError
from django.test import SimpleTestCase

from seo.models import SEOMetaTag, default_robots_content
from seo.services import MetaTagService, RobotsService, SEOConfigService
from seo.sitemap import SitemapEntry, SitemapService, SitemapSettings
from seo.structured_data import StructuredDataValidator, check_json_ld, parse_json_ld


VALID_CONFIG = {
    "site_name": "resumeflex",
    "site_name_fr": "resumeflex",
    "default_title": "Portfolio",
    "default_title_fr": "Portfolio",
    "default_description": "Experience and skills",
    "default_description_fr": "Expérience et compétences",
    "canonical_url": "https://example.com",
}


class RobotsValidationTests(SimpleTestCase):
    def test_default_content_is_valid(self) -> None:
        content = default_robots_content("https://example.com")
        self.assertEqual(RobotsService.validate_robots(content), content)

    def test_comments_are_allowed(self) -> None:
        RobotsService.validate_robots("# crawl rules\nUser-agent: *\nCrawl-delay: 10")

    def test_empty_content(self) -> None:
        with self.assertRaisesMessage(ValidationError, "robots_content field is required"):
            RobotsService.validate_robots("")

    def test_user_agent_required(self) -> None:
        with self.assertRaisesMessage(ValidationError, "Must contain valid User-agent directives"):
            RobotsService.validate_robots("Disallow: /private")

    def test_unknown_directive(self) -> None:
        with self.assertRaisesMessage(ValidationError, "Must contain valid User-agent directives"):
            RobotsService.validate_robots("User-agent: *\nBlock: /private")

    def test_script_content_rejected(self) -> None:
        with self.assertRaisesMessage(ValidationError, "Invalid content detected in robots.txt"):
            RobotsService.validate_robots("User-agent: *\nDisallow: /<script>alert(1)</script>")


class SEOConfigValidationTests(SimpleTestCase):
    def test_valid_config(self) -> None:
        self.assertEqual(SEOConfigService.validate_config(dict(VALID_CONFIG)), VALID_CONFIG)

    def test_required_fields(self) -> None:
        data = dict(VALID_CONFIG, site_name_fr="")
        with self.assertRaisesMessage(ValidationError, "Required fields"):
            SEOConfigService.validate_config(data)

    def test_partial_update_skips_required_check(self) -> None:
        SEOConfigService.validate_config({"default_keywords": "python"}, partial=True)

    def test_title_length(self) -> None:
        with self.assertRaisesMessage(ValidationError, "Title should be under 60 characters for optimal SEO"):
            SEOConfigService.validate_config({"default_title_fr": "x" * 61}, partial=True)

    def test_description_length(self) -> None:
        with self.assertRaisesMessage(ValidationError, "Description should be under 160 characters"):
            SEOConfigService.validate_config({"default_description": "x" * 161}, partial=True)

    def test_canonical_url_format(self) -> None:
        with self.assertRaisesMessage(ValidationError, "Invalid canonical URL format"):
            SEOConfigService.validate_config({"canonical_url": "not a url"}, partial=True)


class MetaTagServiceTests(SimpleTestCase):
    def test_collects_every_problem(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            MetaTagService.validate_meta_tag({"page": "about", "title": "About"})
        self.assertIn("Page path must start with /", ctx.exception.messages)
        self.assertIn("title_fr is required", ctx.exception.messages)
        self.assertIn("description is required", ctx.exception.messages)

    def test_completeness_score(self) -> None:
        tag = SEOMetaTag(
            page="/",
            title="A title that is long enough to count",
            title_fr="Court",
            description="d" * 130,
            description_fr="",
            og_image="https://example.com/og.png",
        )
        # titles 2 + 1, descriptions 2 + 0, og image 2
        self.assertEqual(MetaTagService.completeness_score(tag), 70)


class JsonLdTests(SimpleTestCase):
    def test_parse_accepts_string(self) -> None:
        self.assertEqual(parse_json_ld('{"@type": "Person"}'), {"@type": "Person"})

    def test_parse_rejects_invalid_json(self) -> None:
        with self.assertRaisesMessage(ValidationError, "Invalid JSON format"):
            parse_json_ld("{not json")

    def test_parse_rejects_arrays(self) -> None:
        with self.assertRaisesMessage(ValidationError, "Structured data must be a JSON object"):
            parse_json_ld("[1, 2]")

    def test_check_requires_schema_org_context(self) -> None:
        with self.assertRaisesMessage(ValidationError, "@context must reference schema.org"):
            check_json_ld({"@context": "https://example.com", "@type": "Person"})

    def test_check_rejects_script(self) -> None:
        with self.assertRaisesMessage(ValidationError, "potentially malicious"):
            check_json_ld({"@context": "https://schema.org", "@type": "Person", "name": "<script>x</script>"})


class StructuredDataValidatorTests(SimpleTestCase):
    def test_valid_person(self) -> None:
        report = StructuredDataValidator({
            "@context": "https://schema.org",
            "@type": "Person",
            "name": "Jane Doe",
            "url": "https://example.com",
            "jobTitle": "Engineer",
        }).validate()

        self.assertTrue(report["is_valid"])
        self.assertEqual(report["details"]["detected_type"], "Person")
        self.assertTrue(report["details"]["has_job_title"])
        self.assertEqual(report["details"]["object_depth"], 1)

    def test_type_mismatch_is_a_warning(self) -> None:
        report = StructuredDataValidator(
            {"@context": "https://schema.org", "@type": "Person", "name": "Jane"}, expected_type="Organization"
        ).validate()
        self.assertTrue(report["is_valid"])
        self.assertIn("Type mismatch: expected Organization, got Person", report["warnings"])

    def test_breadcrumb_items_checked(self) -> None:
        report = StructuredDataValidator({
            "@context": "https://schema.org",
            "@type": "BreadcrumbList",
            "itemListElement": [{"@type": "ListItem", "name": "Home"}],
        }).validate()
        self.assertFalse(report["is_valid"])
        self.assertIn("Breadcrumb item 1 must have a position", report["errors"])

    def test_job_posting_requirements(self) -> None:
        report = StructuredDataValidator({"@context": "https://schema.org", "@type": "JobPosting"}).validate()
        self.assertIn("JobPosting requires a title property", report["errors"])
        self.assertIn("JobPosting should include datePosted", report["warnings"])

    def test_video_duration_format(self) -> None:
        report = StructuredDataValidator({
            "@context": "https://schema.org",
            "@type": "VideoObject",
            "name": "Demo",
            "contentUrl": "https://example.com/demo.mp4",
            "thumbnailUrl": "https://example.com/demo.jpg",
            "duration": "5 minutes",
        }).validate()
        self.assertTrue(report["is_valid"])
        self.assertIn("Duration should be in ISO 8601 format (e.g., PT5M30S)", report["warnings"])

    def test_missing_context_and_empty_fields(self) -> None:
        report = StructuredDataValidator({"@type": "Organization", "name": "Acme", "logo": ""}).validate()
        self.assertIn("Missing required @context property", report["errors"])
        self.assertIn("Empty fields detected: logo", report["warnings"])

    def test_script_content_is_an_error(self) -> None:
        report = StructuredDataValidator({
            "@context": "https://schema.org",
            "@type": "Thing",
            "description": "javascript:alert(1)",
        }).validate()
        self.assertIn("Potentially malicious content detected", report["errors"])


class SitemapRenderingTests(SimpleTestCase):
    def test_to_xml_formats_priority_and_escapes(self) -> None:
        xml = SitemapService.to_xml([
            {"loc": "https://example.com/?a=1&b=2", "lastmod": "2024-01-01", "changefreq": "weekly", "priority": 1},
        ])
        self.assertIn("<loc>https://example.com/?a=1&amp;b=2</loc>", xml)
        self.assertIn("<priority>1.0</priority>", xml)
        self.assertTrue(xml.startswith('<?xml version="1.0" encoding="UTF-8"?>'))

    def test_advanced_xml_namespaces_follow_settings(self) -> None:
        options = SitemapSettings(include_images=False, include_videos=False, include_alternates=True)
        entry = SitemapEntry(
            loc="https://example.com/",
            lastmod="2024-01-01",
            changefreq="weekly",
            priority=1.0,
            alternates=[{"hreflang": "fr", "href": "https://example.com/fr/"}],
        )
        xml = SitemapService.to_advanced_xml([entry], options)
        self.assertIn("xmlns:xhtml=", xml)
        self.assertNotIn("xmlns:image=", xml)
        self.assertIn('hreflang="fr"', xml)

    def test_settings_from_request(self) -> None:
        options = SitemapSettings.from_request({"max_urls": "10", "include_videos": False})
        self.assertEqual(options.max_urls, 10)
        self.assertFalse(options.include_videos)
        self.assertEqual(list(options.exclude_patterns), ["/boss/*", "/admin/*", "/api/*"])
