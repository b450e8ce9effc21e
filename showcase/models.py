"""
Showcase app models

Career highlights tied to a company, open-source and professional
contributions, and the recommended reading list.
"""
from django.db import models


class Highlight(models.Model):
    """A notable piece of work at a company, shown in the career series."""

    company = models.ForeignKey(
        'experience.Company',
        on_delete=models.CASCADE,
        related_name='highlights',
    )
    title = models.CharField(max_length=255)
    title_fr = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    description_fr = models.TextField(blank=True)
    start_date = models.DateTimeField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.title

    class Meta:
        verbose_name = 'Highlight'
        verbose_name_plural = 'Highlights'
        ordering = ['-start_date']


class Contribution(models.Model):
    """Open-source, corporate, community or research contribution."""

    class Type(models.TextChoices):
        OPEN_SOURCE = 'OPEN_SOURCE', 'Open Source'
        CORPORATE = 'CORPORATE', 'Corporate'
        COMMUNITY = 'COMMUNITY', 'Community'
        RESEARCH = 'RESEARCH', 'Research'
        THOUGHT_LEADERSHIP = 'THOUGHT_LEADERSHIP', 'Thought Leadership'

    title = models.CharField(max_length=255)
    title_fr = models.CharField(max_length=255)
    type = models.CharField(max_length=30, choices=Type.choices, default=Type.OPEN_SOURCE)
    organization = models.CharField(max_length=255, blank=True, null=True)
    organization_fr = models.CharField(max_length=255, blank=True, null=True)
    role = models.CharField(max_length=255, blank=True, null=True)
    role_fr = models.CharField(max_length=255, blank=True, null=True)
    description = models.TextField()
    description_fr = models.TextField()
    impact = models.TextField(blank=True, null=True)
    impact_fr = models.TextField(blank=True, null=True)
    start_date = models.DateTimeField(null=True, blank=True)
    end_date = models.DateTimeField(null=True, blank=True)
    is_current = models.BooleanField(default=False)
    url = models.CharField(max_length=500, blank=True, null=True)
    download_url = models.CharField(max_length=500, blank=True, null=True)
    thumbnail_url = models.CharField(max_length=500, blank=True, null=True)
    display_order = models.IntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.title} ({self.get_type_display()})"

    class Meta:
        verbose_name = 'Contribution'
        verbose_name_plural = 'Contributions'
        ordering = ['display_order', '-start_date', '-created_at']


class RecommendedBook(models.Model):
    """A book on the reading list; lower priority shows first."""

    title = models.CharField(max_length=255)
    title_fr = models.CharField(max_length=255)
    author = models.CharField(max_length=255)
    author_fr = models.CharField(max_length=255, blank=True, null=True)
    recommended_reason = models.TextField()
    recommended_reason_fr = models.TextField()
    summary = models.TextField(blank=True, null=True)
    summary_fr = models.TextField(blank=True, null=True)
    purchase_url = models.CharField(max_length=500, blank=True, null=True)
    cover_image_url = models.CharField(max_length=500, blank=True, null=True)
    priority = models.IntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.title} by {self.author}"

    class Meta:
        verbose_name = 'Recommended Book'
        verbose_name_plural = 'Recommended Books'
        ordering = ['priority', 'title']
