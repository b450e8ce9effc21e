from django.contrib import admin
from .models import Certification, Education, Knowledge, Skill


@admin.register(Education)
class EducationAdmin(admin.ModelAdmin):
    list_display = ['degree', 'institution', 'start_date', 'end_date']
    search_fields = ['degree', 'institution', 'field']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(Certification)
class CertificationAdmin(admin.ModelAdmin):
    list_display = ['name', 'issuer', 'issue_date']
    search_fields = ['name', 'issuer']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(Skill)
class SkillAdmin(admin.ModelAdmin):
    list_display = ['name', 'category']
    list_filter = ['category']
    search_fields = ['name', 'name_fr']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(Knowledge)
class KnowledgeAdmin(admin.ModelAdmin):
    """Admin interface for unified knowledge entries."""

    list_display = ['title', 'kind', 'issuer', 'competency_level', 'start_date', 'is_current']
    list_filter = ['kind', 'competency_level', 'is_current']
    search_fields = ['title', 'title_fr', 'issuer', 'category']
    readonly_fields = ['created_at', 'updated_at']
