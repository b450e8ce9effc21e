from django.contrib import admin
from .models import Media


@admin.register(Media)
class MediaAdmin(admin.ModelAdmin):
    """Admin interface for uploaded media."""

    list_display = ['url', 'type', 'experience', 'highlight', 'knowledge', 'created_at']
    list_filter = ['type', 'created_at']
    search_fields = ['url']
    readonly_fields = ['created_at']
