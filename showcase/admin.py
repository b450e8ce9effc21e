from django.contrib import admin
from .models import Contribution, Highlight, RecommendedBook


@admin.register(Highlight)
class HighlightAdmin(admin.ModelAdmin):
    """Admin interface for Highlight."""

    list_display = ['title', 'company', 'start_date']
    list_filter = ['company']
    search_fields = ['title', 'title_fr', 'company__name']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(Contribution)
class ContributionAdmin(admin.ModelAdmin):
    list_display = ['title', 'type', 'organization', 'display_order', 'is_current']
    list_filter = ['type', 'is_current']
    list_editable = ['display_order']
    search_fields = ['title', 'title_fr', 'organization']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(RecommendedBook)
class RecommendedBookAdmin(admin.ModelAdmin):
    list_display = ['title', 'author', 'priority']
    list_editable = ['priority']
    search_fields = ['title', 'author']
    readonly_fields = ['created_at', 'updated_at']
