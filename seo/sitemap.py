"""
Sitemap generation

The basic sitemap lists the static pages plus every page with custom meta
tags and is cached in the Django cache. The advanced sitemap adds language
alternates, image/video entries and detail pages for experiences and
highlights. Page discovery lists every page the site serves with its SEO
coverage.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence
from xml.sax.saxutils import escape

from django.conf import settings
from django.core.cache import cache
from django.db.models import Q
from django.utils import timezone

from experience.models import Experience
from showcase.models import Highlight
from uploads.models import Media

from .models import SEOConfig, SEOMetaTag, StructuredData
from .services import STATIC_PAGES

logger = logging.getLogger(__name__)

SITEMAP_CACHE_KEY = 'seo:sitemap'
SITEMAP_NAMESPACE = 'http://www.sitemaps.org/schemas/sitemap/0.9'
IMAGE_NAMESPACE = 'http://www.google.com/schemas/sitemap-image/1.1'
VIDEO_NAMESPACE = 'http://www.google.com/schemas/sitemap-video/1.1'
XHTML_NAMESPACE = 'http://www.w3.org/1999/xhtml'

XML_ENTITIES = {"'": '&apos;', '"': '&quot;'}

STATIC_PAGE_TITLES = {
    '/': 'Homepage',
    '/experiences': 'Work Experience',
    '/education': 'Education',
    '/skills': 'Skills',
    '/certifications': 'Certifications',
}


def xml_escape(value: str) -> str:
    return escape(value, XML_ENTITIES)


@dataclass
class SitemapEntry:
    loc: str
    lastmod: str
    changefreq: str
    priority: float
    alternates: List[Dict[str, str]] = field(default_factory=list)
    images: List[Dict[str, str]] = field(default_factory=list)
    videos: List[Dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> Dict:
        data = {
            'loc': self.loc,
            'lastmod': self.lastmod,
            'changefreq': self.changefreq,
            'priority': self.priority,
        }
        for name in ('alternates', 'images', 'videos'):
            if getattr(self, name):
                data[name] = getattr(self, name)
        return data


@dataclass
class SitemapSettings:
    max_urls: int = 50000
    include_images: bool = True
    include_videos: bool = True
    include_alternates: bool = True
    exclude_patterns: Sequence[str] = ('/boss/*', '/admin/*', '/api/*')

    @classmethod
    def from_request(cls, data: Dict) -> 'SitemapSettings':
        defaults = cls()
        return cls(
            max_urls=int(data.get('max_urls') or defaults.max_urls),
            include_images=data.get('include_images', defaults.include_images),
            include_videos=data.get('include_videos', defaults.include_videos),
            include_alternates=data.get('include_alternates', defaults.include_alternates),
            exclude_patterns=data.get('exclude_patterns') or defaults.exclude_patterns,
        )

    def to_dict(self) -> Dict:
        return {
            'max_urls': self.max_urls,
            'include_images': self.include_images,
            'include_videos': self.include_videos,
            'include_alternates': self.include_alternates,
            'exclude_patterns': list(self.exclude_patterns),
        }


def _today() -> str:
    return timezone.now().date().isoformat()


def _negated_date(lastmod: str) -> int:
    """Sort key putting the most recent lastmod first."""
    return -int(lastmod.replace('-', ''))


def _sort_by_priority(entries: List[SitemapEntry]) -> List[SitemapEntry]:
    return sorted(entries, key=lambda e: (-e.priority, e.loc))


class SitemapService:
    """Builds, caches and renders sitemaps."""

    @staticmethod
    def build_entries(base_url: Optional[str] = None) -> List[SitemapEntry]:
        """Static pages plus meta-tag pages, by priority (desc) then loc."""
        base_url = base_url or SEOConfig.base_url()
        today = _today()
        static_paths = {path for path, _, _ in STATIC_PAGES}

        entries = [
            SitemapEntry(loc=f"{base_url}{path}", lastmod=today, changefreq=changefreq, priority=priority)
            for path, priority, changefreq in STATIC_PAGES
        ]
        for tag in SEOMetaTag.objects.only('page', 'updated_at'):
            if tag.page in static_paths:
                continue
            entries.append(SitemapEntry(
                loc=f"{base_url}{tag.page}",
                lastmod=tag.updated_at.date().isoformat(),
                changefreq='weekly',
                priority=0.6,
            ))
        return _sort_by_priority(entries)

    @staticmethod
    def get_sitemap(use_cache: bool = True) -> Dict:
        """Sitemap as {'urls': [...], 'generated_at': ...}, cached for SITEMAP_CACHE_SECONDS."""
        if use_cache:
            cached = cache.get(SITEMAP_CACHE_KEY)
            if cached is not None:
                return cached

        sitemap = {
            'urls': [entry.to_dict() for entry in SitemapService.build_entries()],
            'generated_at': timezone.now().isoformat(),
        }
        cache.set(SITEMAP_CACHE_KEY, sitemap, settings.SITEMAP_CACHE_SECONDS)
        return sitemap

    @staticmethod
    def clear_cache() -> None:
        cache.delete(SITEMAP_CACHE_KEY)

    @staticmethod
    def to_xml(urls: Sequence[Dict]) -> str:
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<urlset xmlns="{SITEMAP_NAMESPACE}">',
        ]
        for url in urls:
            lines.append('  <url>')
            lines.append(f"    <loc>{xml_escape(url['loc'])}</loc>")
            if url.get('lastmod'):
                lines.append(f"    <lastmod>{url['lastmod']}</lastmod>")
            if url.get('changefreq'):
                lines.append(f"    <changefreq>{url['changefreq']}</changefreq>")
            if url.get('priority') is not None:
                lines.append(f"    <priority>{url['priority']:.1f}</priority>")
            lines.append('  </url>')
        lines.append('</urlset>')
        return '\n'.join(lines)

    @staticmethod
    def _alternates(base_url: str, path: str) -> List[Dict[str, str]]:
        return [
            {'hreflang': 'en', 'href': f"{base_url}{path}"},
            {'hreflang': 'fr', 'href': f"{base_url}/fr{path}"},
        ]

    @staticmethod
    def _media_entries(base_url: str, media: Sequence[Media], options: SitemapSettings, title: str,
                       caption: str, description: str = ''):
        images, videos = [], []
        for item in media:
            loc = item.url if item.url.startswith('http') else f"{base_url}{item.url}"
            if item.type == Media.IMAGE and options.include_images:
                images.append({'loc': loc, 'title': title, 'caption': caption})
            elif item.type == Media.VIDEO and options.include_videos:
                videos.append({
                    'loc': loc,
                    'thumbnail_loc': re.sub(r'\.[^.]+$', '_thumb.jpg', loc),
                    'title': title,
                    'description': description[:200],
                })
        return images, videos

    @staticmethod
    def build_advanced_entries(options: SitemapSettings, base_url: Optional[str] = None) -> List[SitemapEntry]:
        """
        Static pages with homepage media, then one entry per experience and
        highlight, filtered by exclude patterns and capped at max_urls.
        """
        base_url = base_url or SEOConfig.base_url()
        today = _today()
        entries: List[SitemapEntry] = []

        homepage_media = Media.objects.filter(
            Q(experience_homepage__isnull=False) | Q(highlight_homepage__isnull=False)
        )
        for path, priority, changefreq in STATIC_PAGES:
            entry = SitemapEntry(loc=f"{base_url}{path}", lastmod=today, changefreq=changefreq, priority=priority)
            if options.include_alternates:
                entry.alternates = SitemapService._alternates(base_url, path)
            if path == '/':
                entry.images, entry.videos = SitemapService._media_entries(
                    base_url, homepage_media, options, 'Portfolio Image', 'Professional portfolio content'
                )
            entries.append(entry)

        experiences = Experience.objects.select_related('company').prefetch_related('media')
        for experience in experiences:
            path = f"/experiences/{experience.pk}"
            entry = SitemapEntry(loc=f"{base_url}{path}", lastmod=today, changefreq='monthly', priority=0.6)
            if options.include_alternates:
                entry.alternates = SitemapService._alternates(base_url, path)
            entry.images, entry.videos = SitemapService._media_entries(
                base_url,
                experience.media.all(),
                options,
                experience.title,
                f"{experience.title} at {experience.company.name}",
                experience.description,
            )
            entries.append(entry)

        highlights = Highlight.objects.select_related('company').prefetch_related('media')
        for highlight in highlights:
            path = f"/highlights/{highlight.pk}"
            entry = SitemapEntry(
                loc=f"{base_url}{path}",
                lastmod=highlight.created_at.date().isoformat(),
                changefreq='monthly',
                priority=0.5,
            )
            if options.include_alternates:
                entry.alternates = SitemapService._alternates(base_url, path)
            entry.images, _ = SitemapService._media_entries(
                base_url,
                highlight.media.all(),
                SitemapSettings(include_images=options.include_images, include_videos=False),
                highlight.title,
                f"{highlight.title} at {highlight.company.name}",
            )
            entries.append(entry)

        excludes = [re.compile(pattern.replace('*', '.*')) for pattern in options.exclude_patterns]
        entries = [
            entry for entry in entries
            if not any(regex.search(entry.loc[len(base_url):]) for regex in excludes)
        ]
        entries = entries[:options.max_urls]
        return sorted(entries, key=lambda e: (-e.priority, _negated_date(e.lastmod)))

    @staticmethod
    def to_advanced_xml(entries: Sequence[SitemapEntry], options: SitemapSettings) -> str:
        namespaces = [f'xmlns="{SITEMAP_NAMESPACE}"']
        if options.include_images:
            namespaces.append(f'xmlns:image="{IMAGE_NAMESPACE}"')
        if options.include_videos:
            namespaces.append(f'xmlns:video="{VIDEO_NAMESPACE}"')
        if options.include_alternates:
            namespaces.append(f'xmlns:xhtml="{XHTML_NAMESPACE}"')

        lines = ['<?xml version="1.0" encoding="UTF-8"?>', f"<urlset {' '.join(namespaces)}>"]
        for entry in entries:
            lines.append('  <url>')
            lines.append(f"    <loc>{xml_escape(entry.loc)}</loc>")
            lines.append(f"    <lastmod>{entry.lastmod}</lastmod>")
            lines.append(f"    <changefreq>{entry.changefreq}</changefreq>")
            lines.append(f"    <priority>{entry.priority:.1f}</priority>")
            for alternate in entry.alternates:
                lines.append(
                    f'    <xhtml:link rel="alternate" hreflang="{alternate["hreflang"]}" '
                    f'href="{xml_escape(alternate["href"])}" />'
                )
            for image in entry.images:
                lines.append('    <image:image>')
                lines.append(f"      <image:loc>{xml_escape(image['loc'])}</image:loc>")
                lines.append(f"      <image:title>{xml_escape(image['title'])}</image:title>")
                lines.append(f"      <image:caption>{xml_escape(image['caption'])}</image:caption>")
                lines.append('    </image:image>')
            for video in entry.videos:
                lines.append('    <video:video>')
                lines.append(f"      <video:content_loc>{xml_escape(video['loc'])}</video:content_loc>")
                lines.append(
                    f"      <video:thumbnail_loc>{xml_escape(video['thumbnail_loc'])}</video:thumbnail_loc>"
                )
                lines.append(f"      <video:title>{xml_escape(video['title'])}</video:title>")
                lines.append(f"      <video:description>{xml_escape(video['description'])}</video:description>")
                lines.append('    </video:video>')
            lines.append('  </url>')
        lines.append('</urlset>')
        return '\n'.join(lines)

    @staticmethod
    def generate_advanced(options: SitemapSettings) -> Dict:
        entries = SitemapService.build_advanced_entries(options)
        logger.info("Generated advanced sitemap with %d url(s)", len(entries))
        return {
            'success': True,
            'sitemap': SitemapService.to_advanced_xml(entries, options),
            'stats': {
                'total_urls': len(entries),
                'with_images': sum(1 for e in entries if e.images),
                'with_videos': sum(1 for e in entries if e.videos),
                'with_alternates': sum(1 for e in entries if e.alternates),
                'generated_at': timezone.now().isoformat(),
            },
            'settings': options.to_dict(),
        }

    @staticmethod
    def _page(base_url: str, path: str, page_type: str, title: str, priority: float, last_modified,
              custom_meta_pages, structured_pages, **extra) -> Dict:
        page = {
            'path': path,
            'url': f"{base_url}{path}",
            'type': page_type,
            'title': title,
            'priority': priority,
            'last_modified': last_modified,
            'has_custom_meta': path in custom_meta_pages,
            'has_structured_data': path in structured_pages,
        }
        page.update(extra)
        return page

    @staticmethod
    def discover_pages(include_media: bool = False, include_stats: bool = False) -> Dict:
        """
        List every page the site serves: static pages, experience and
        highlight detail pages, and any other page with custom meta tags.

        Pages are ordered by priority (desc) then last modification (desc).
        With include_media each page carries a media_count; with
        include_stats the response adds per-type and SEO coverage counts.
        """
        base_url = SEOConfig.base_url()
        now = timezone.now()
        meta_tags = {tag.page: tag for tag in SEOMetaTag.objects.only('page', 'title', 'updated_at')}
        structured_pages = set(
            StructuredData.objects.filter(is_active=True).values_list('page', flat=True)
        )
        page_args = (meta_tags, structured_pages)
        pages: List[Dict] = []

        homepage_media_count = None
        if include_media:
            homepage_media_count = Media.objects.filter(
                Q(experience_homepage__isnull=False) | Q(highlight_homepage__isnull=False)
            ).count()

        for path, priority, _ in STATIC_PAGES:
            page = SitemapService._page(
                base_url, path, 'static', STATIC_PAGE_TITLES[path], priority, now, *page_args
            )
            if include_media:
                page['media_count'] = homepage_media_count if path == '/' else 0
            pages.append(page)

        experiences = Experience.objects.select_related('company').order_by('-start_date')
        if include_media:
            experiences = experiences.prefetch_related('media')
        for experience in experiences:
            page = SitemapService._page(
                base_url, f"/experiences/{experience.pk}", 'dynamic',
                f"{experience.title} at {experience.company.name}", 0.6, now, *page_args,
                entity_type='experience', entity_id=experience.pk,
            )
            if include_media:
                page['media_count'] = len(experience.media.all())
            pages.append(page)

        highlights = Highlight.objects.select_related('company').order_by('-created_at')
        if include_media:
            highlights = highlights.prefetch_related('media')
        for highlight in highlights:
            page = SitemapService._page(
                base_url, f"/highlights/{highlight.pk}", 'dynamic',
                f"{highlight.title} at {highlight.company.name}", 0.5, highlight.created_at, *page_args,
                entity_type='highlight', entity_id=highlight.pk,
            )
            if include_media:
                page['media_count'] = len(highlight.media.all())
            pages.append(page)

        known_paths = {page['path'] for page in pages}
        for path, tag in meta_tags.items():
            if path in known_paths:
                continue
            page = SitemapService._page(base_url, path, 'custom', tag.title, 0.4, tag.updated_at, *page_args)
            if include_media:
                page['media_count'] = 0
            pages.append(page)

        pages.sort(key=lambda p: (-p['priority'], -p['last_modified'].timestamp()))

        result = {'pages': pages, 'total_pages': len(pages), 'base_url': base_url}
        if include_stats:
            result['statistics'] = {
                'by_type': {
                    page_type: sum(1 for p in pages if p['type'] == page_type)
                    for page_type in ('static', 'dynamic', 'custom')
                },
                'by_entity_type': {
                    entity: sum(1 for p in pages if p.get('entity_type') == entity)
                    for entity in ('experience', 'highlight')
                },
                'seo_optimization': {
                    'with_custom_meta': sum(1 for p in pages if p['has_custom_meta']),
                    'with_structured_data': sum(1 for p in pages if p['has_structured_data']),
                    'with_media': sum(1 for p in pages if p.get('media_count')),
                },
            }
        return result
