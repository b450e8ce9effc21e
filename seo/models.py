"""
SEO app models

SEOConfig holds the site-wide defaults (one row), SEOMetaTag overrides them per
page, and StructuredData stores JSON-LD blocks injected into pages.
"""
from django.conf import settings
from django.db import models


def default_robots_content(site_url: str) -> str:
    return f"User-agent: *\nAllow: /\nDisallow: /boss/\n\nSitemap: {site_url}/sitemap.xml"


class SEOConfig(models.Model):
    """Site-wide SEO defaults. Only the first row is used."""

    site_name = models.CharField(max_length=255)
    site_name_fr = models.CharField(max_length=255)
    default_title = models.CharField(max_length=255)
    default_title_fr = models.CharField(max_length=255)
    default_description = models.TextField()
    default_description_fr = models.TextField()
    default_keywords = models.TextField(blank=True)
    default_keywords_fr = models.TextField(blank=True)
    canonical_url = models.CharField(max_length=500)
    robots_content = models.TextField(blank=True, null=True)
    favicon_url = models.CharField(max_length=500, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.site_name

    @classmethod
    def defaults(cls) -> dict:
        site_url = settings.RESUMEFLEX_SITE_URL
        return {
            'site_name': 'resumeflex',
            'site_name_fr': 'resumeflex',
            'default_title': 'Professional Portfolio - resumeflex',
            'default_title_fr': 'Portfolio Professionnel - resumeflex',
            'default_description': 'Professional portfolio showcasing experience, skills, and achievements.',
            'default_description_fr': (
                "Portfolio professionnel présentant l'expérience, les compétences et les réalisations."
            ),
            'default_keywords': 'portfolio, professional, experience, skills, career',
            'default_keywords_fr': 'portfolio, professionnel, expérience, compétences, carrière',
            'canonical_url': site_url,
            'robots_content': default_robots_content(site_url),
        }

    @classmethod
    def load(cls) -> 'SEOConfig':
        """Return the configuration row, creating it with defaults on first use."""
        config = cls.objects.order_by('pk').first()
        if config is None:
            config = cls.objects.create(**cls.defaults())
        return config

    @classmethod
    def base_url(cls) -> str:
        config = cls.objects.order_by('pk').first()
        return (config.canonical_url if config else '') or settings.RESUMEFLEX_SITE_URL

    class Meta:
        verbose_name = 'SEO Configuration'
        verbose_name_plural = 'SEO Configuration'


class SEOMetaTag(models.Model):
    """Per-page title, description, Open Graph and Twitter overrides."""

    class TwitterCard(models.TextChoices):
        SUMMARY = 'summary', 'Summary'
        SUMMARY_LARGE_IMAGE = 'summary_large_image', 'Summary with large image'
        APP = 'app', 'App'
        PLAYER = 'player', 'Player'

    page = models.CharField(max_length=255, unique=True)
    title = models.CharField(max_length=255)
    title_fr = models.CharField(max_length=255)
    description = models.TextField()
    description_fr = models.TextField()
    keywords = models.TextField(blank=True, null=True)
    keywords_fr = models.TextField(blank=True, null=True)
    og_title = models.CharField(max_length=255, blank=True, null=True)
    og_title_fr = models.CharField(max_length=255, blank=True, null=True)
    og_description = models.TextField(blank=True, null=True)
    og_description_fr = models.TextField(blank=True, null=True)
    og_image = models.CharField(max_length=500, blank=True, null=True)
    og_type = models.CharField(max_length=50, default='website')
    twitter_card = models.CharField(
        max_length=30,
        choices=TwitterCard.choices,
        default=TwitterCard.SUMMARY_LARGE_IMAGE,
    )
    twitter_title = models.CharField(max_length=255, blank=True, null=True)
    twitter_title_fr = models.CharField(max_length=255, blank=True, null=True)
    twitter_description = models.TextField(blank=True, null=True)
    twitter_description_fr = models.TextField(blank=True, null=True)
    twitter_image = models.CharField(max_length=500, blank=True, null=True)
    canonical_url = models.CharField(max_length=500, blank=True, null=True)
    no_index = models.BooleanField(default=False)
    no_follow = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.page

    class Meta:
        verbose_name = 'SEO Meta Tag'
        verbose_name_plural = 'SEO Meta Tags'
        ordering = ['page']


class StructuredData(models.Model):
    """A JSON-LD block for one page."""

    type = models.CharField(max_length=100)
    page = models.CharField(max_length=255, db_index=True)
    json_data = models.JSONField()
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.type} on {self.page}"

    class Meta:
        verbose_name = 'Structured Data'
        verbose_name_plural = 'Structured Data'
        ordering = ['page', 'type']
