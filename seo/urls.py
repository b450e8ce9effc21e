"""
SEO app URLs
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import (
    RobotsView,
    SEOAnalyticsView,
    SEOConfigView,
    SEOMetaTagViewSet,
    SitemapGenerateView,
    SitemapPagesView,
    SitemapView,
    StructuredDataViewSet,
)

router = DefaultRouter()
router.register(r'meta-tags', SEOMetaTagViewSet, basename='seo-meta-tag')
router.register(r'structured-data', StructuredDataViewSet, basename='seo-structured-data')

urlpatterns = [
    path('config/', SEOConfigView.as_view(), name='seo-config'),
    path('robots/', RobotsView.as_view(), name='seo-robots'),
    path('sitemap/', SitemapView.as_view(), name='seo-sitemap'),
    path('sitemap/generate/', SitemapGenerateView.as_view(), name='seo-sitemap-generate'),
    path('sitemap/pages/', SitemapPagesView.as_view(), name='seo-sitemap-pages'),
    path('analytics/', SEOAnalyticsView.as_view(), name='seo-analytics'),
    path('', include(router.urls)),
]
