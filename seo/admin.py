from django.contrib import admin
from .models import SEOConfig, SEOMetaTag, StructuredData


@admin.register(SEOConfig)
class SEOConfigAdmin(admin.ModelAdmin):
    list_display = ['site_name', 'canonical_url', 'updated_at']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(SEOMetaTag)
class SEOMetaTagAdmin(admin.ModelAdmin):
    """Admin interface for per-page meta tags."""

    list_display = ['page', 'title', 'twitter_card', 'no_index', 'updated_at']
    list_filter = ['twitter_card', 'no_index', 'no_follow']
    search_fields = ['page', 'title', 'title_fr']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(StructuredData)
class StructuredDataAdmin(admin.ModelAdmin):
    list_display = ['page', 'type', 'is_active', 'updated_at']
    list_filter = ['type', 'is_active']
    search_fields = ['page', 'type']
    readonly_fields = ['created_at', 'updated_at']
