from django.contrib import admin
from .models import FooterConfig, NavbarConfig


@admin.register(NavbarConfig)
class NavbarConfigAdmin(admin.ModelAdmin):
    list_display = ['logo_text', 'background_type', 'font_family', 'updated_at']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(FooterConfig)
class FooterConfigAdmin(admin.ModelAdmin):
    list_display = ['logo_text', 'copyright_text', 'show_linkedin', 'updated_at']
    readonly_fields = ['created_at', 'updated_at']
