"""
Background tasks for the SEO app using Django-Q.
"""
import logging
from pathlib import Path
from typing import Dict, Optional

from django.conf import settings

from .sitemap import SitemapService, SitemapSettings

logger = logging.getLogger(__name__)


def publish_sitemap(options: Optional[Dict] = None) -> str:
    """
    Generate the advanced sitemap and write it to the public directory.

    Can be called directly or queued via Django-Q's async_task().
    Returns the path written.
    """
    sitemap_settings = SitemapSettings.from_request(options or {})
    entries = SitemapService.build_advanced_entries(sitemap_settings)
    xml = SitemapService.to_advanced_xml(entries, sitemap_settings)

    public_dir = Path(settings.RESUMEFLEX_PUBLIC_DIR)
    public_dir.mkdir(parents=True, exist_ok=True)
    target = public_dir / 'sitemap.xml'
    target.write_text(xml, encoding='utf-8')

    SitemapService.clear_cache()
    logger.info("Published sitemap with %d url(s) to %s", len(entries), target)
    return str(target)
