from django.contrib import admin
from .models import Company, Experience, ExperienceDateRange


class ExperienceDateRangeInline(admin.TabularInline):
    model = ExperienceDateRange
    extra = 0


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    """Admin interface for Company."""

    list_display = ['name', 'name_fr', 'updated_at']
    search_fields = ['name', 'name_fr']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(Experience)
class ExperienceAdmin(admin.ModelAdmin):
    """Admin interface for Experience."""

    list_display = ['title', 'company', 'start_date', 'end_date', 'updated_at']
    list_filter = ['company', 'start_date']
    search_fields = ['title', 'title_fr', 'company__name', 'description']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [ExperienceDateRangeInline]
