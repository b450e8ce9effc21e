"""
SEO Service Layer
Validation for the site configuration, per-page meta tags and robots.txt, plus
the analytics summary shown in the back-office.
"""
import logging
import re
from datetime import timedelta
from typing import Dict, List

from django.core.exceptions import ValidationError
from django.core.validators import URLValidator
from django.db.models import Count
from django.utils import timezone

from .models import SEOConfig, SEOMetaTag, StructuredData

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 60
MAX_DESCRIPTION_LENGTH = 160

STATIC_PAGES = (
    ('/', 1.0, 'weekly'),
    ('/experiences', 0.9, 'weekly'),
    ('/education', 0.8, 'monthly'),
    ('/skills', 0.8, 'monthly'),
    ('/certifications', 0.7, 'monthly'),
)


def is_valid_url(value: str) -> bool:
    try:
        URLValidator()(value)
    except ValidationError:
        return False
    return True


class SEOConfigService:
    """Validation for the site-wide SEO configuration."""

    REQUIRED_FIELDS = (
        'site_name',
        'site_name_fr',
        'default_title',
        'default_title_fr',
        'default_description',
        'default_description_fr',
        'canonical_url',
    )

    @staticmethod
    def validate_config(data: Dict, partial: bool = False) -> Dict:
        """
        Check required fields, title/description lengths and the canonical URL.

        Raises:
            ValidationError: On the first rule that fails
        """
        if not partial:
            missing = [f for f in SEOConfigService.REQUIRED_FIELDS if not data.get(f)]
            if missing:
                raise ValidationError(
                    'Required fields: site_name (EN/FR), default_title (EN/FR), '
                    'default_description (EN/FR), canonical_url'
                )

        for field in ('default_title', 'default_title_fr'):
            if data.get(field) and len(data[field]) > MAX_TITLE_LENGTH:
                raise ValidationError(f"Title should be under {MAX_TITLE_LENGTH} characters for optimal SEO")

        for field in ('default_description', 'default_description_fr'):
            if data.get(field) and len(data[field]) > MAX_DESCRIPTION_LENGTH:
                raise ValidationError(
                    f"Description should be under {MAX_DESCRIPTION_LENGTH} characters for optimal SEO"
                )

        if data.get('canonical_url') and not is_valid_url(data['canonical_url']):
            raise ValidationError("Invalid canonical URL format")
        return data


class MetaTagService:
    """Validation for per-page meta tags."""

    @staticmethod
    def validate_meta_tag(data: Dict, partial: bool = False) -> Dict:
        """
        Raises:
            ValidationError: With every problem found
        """
        errors = []
        for field in ('page', 'title', 'title_fr', 'description', 'description_fr'):
            if partial and field not in data:
                continue
            if not (data.get(field) or '').strip():
                errors.append(f"{field} is required")

        page = data.get('page')
        if page and not page.startswith('/'):
            errors.append("Page path must start with /")

        twitter_card = data.get('twitter_card')
        if twitter_card and twitter_card not in SEOMetaTag.TwitterCard.values:
            errors.append(f"twitter_card must be one of: {', '.join(SEOMetaTag.TwitterCard.values)}")

        if errors:
            raise ValidationError(errors)
        return data

    @staticmethod
    def completeness_score(tag: SEOMetaTag) -> int:
        """Score out of 100 for how well a page's tags follow length guidelines."""
        score = 0
        for title in (tag.title, tag.title_fr):
            if title and len(title) <= MAX_TITLE_LENGTH:
                score += 1
            if title and 30 <= len(title) <= MAX_TITLE_LENGTH:
                score += 1
        for description in (tag.description, tag.description_fr):
            if description and len(description) <= MAX_DESCRIPTION_LENGTH:
                score += 1
            if description and 120 <= len(description) <= MAX_DESCRIPTION_LENGTH:
                score += 1
        if tag.og_image:
            score += 2
        return round(score / 10 * 100)


class RobotsService:
    """Reading and validating robots.txt content."""

    VALID_DIRECTIVES = (
        'user-agent:',
        'disallow:',
        'allow:',
        'sitemap:',
        'crawl-delay:',
        'request-rate:',
        'visit-time:',
    )
    MALICIOUS_PATTERNS = [
        re.compile(pattern, re.IGNORECASE)
        for pattern in (
            r'<script',
            r'javascript:',
            r'data:',
            r'vbscript:',
            r'onload',
            r'onerror',
            r'onclick',
            r'<iframe',
            r'<object',
            r'<embed',
        )
    ]

    @staticmethod
    def get_robots() -> str:
        config = SEOConfig.objects.order_by('pk').first()
        if config and config.robots_content:
            return config.robots_content
        return SEOConfig.defaults()['robots_content']

    @staticmethod
    def validate_robots(content: str) -> str:
        """
        Raises:
            ValidationError: If the content is empty, lacks a User-agent,
                carries an unknown directive or looks malicious
        """
        if not content:
            raise ValidationError("robots_content field is required")

        lines = [line.strip() for line in content.split('\n') if line.strip()]
        if not any(line.lower().startswith('user-agent:') for line in lines):
            raise ValidationError("Invalid robots.txt format. Must contain valid User-agent directives.")
        for line in lines:
            if line.startswith('#'):
                continue
            if not line.lower().startswith(RobotsService.VALID_DIRECTIVES):
                raise ValidationError("Invalid robots.txt format. Must contain valid User-agent directives.")

        if any(pattern.search(content) for pattern in RobotsService.MALICIOUS_PATTERNS):
            raise ValidationError("Invalid content detected in robots.txt")
        return content

    @staticmethod
    def update_robots(content: str) -> SEOConfig:
        RobotsService.validate_robots(content)
        config = SEOConfig.load()
        config.robots_content = content
        config.save(update_fields=['robots_content', 'updated_at'])
        logger.info("robots.txt updated (%d bytes)", len(content))
        return config


class AnalyticsService:
    """Aggregate counts for the SEO dashboard."""

    @staticmethod
    def get_analytics() -> Dict:
        custom_meta_count = SEOMetaTag.objects.count()
        active = StructuredData.objects.filter(is_active=True)
        config = SEOConfig.objects.order_by('pk').first()
        since = timezone.now() - timedelta(days=30)

        by_type: List[Dict] = [
            {'type': row['type'], 'count': row['count']}
            for row in active.values('type').annotate(count=Count('id')).order_by('type')
        ]
        scores = [
            {
                'page': tag.page,
                'completeness': MetaTagService.completeness_score(tag),
                'last_updated': tag.updated_at,
            }
            for tag in SEOMetaTag.objects.order_by('-updated_at')
        ]

        return {
            'total_pages': len(STATIC_PAGES) + custom_meta_count,
            'pages_with_custom_meta': custom_meta_count,
            'pages_with_structured_data': active.order_by().values('page').distinct().count(),
            'robots_txt_last_update': config.updated_at if config else None,
            'structured_data_by_type': by_type,
            'seo_scores': scores,
            'recent_activity': {
                'meta_tag_updates': SEOMetaTag.objects.filter(updated_at__gte=since).count(),
                'structured_data_updates': StructuredData.objects.filter(updated_at__gte=since).count(),
                'period': '30 days',
            },
        }
