"""
SEO app

Site-wide SEO configuration, per-page meta tags, JSON-LD structured data,
sitemap and robots.txt generation, and AI-crawler (AIO) configuration.
"""
