"""
Experience app models

Companies own experiences; each experience owns one or more date ranges so a
role that was left and resumed can be shown as a single tenure.

start_date/end_date on Experience are the legacy single-period fields. They
are still written (mirroring the earliest range) so older readers keep
working, but ExperienceDateRange is the source of truth.
"""
from django.db import models


class Company(models.Model):
    """Employer shown on the portfolio, with bilingual name and optional logo."""

    name = models.CharField(max_length=255, unique=True)
    name_fr = models.CharField(max_length=255, blank=True)
    logo_url = models.CharField(max_length=500, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    class Meta:
        verbose_name = 'Company'
        verbose_name_plural = 'Companies'
        ordering = ['name']


class Experience(models.Model):
    company = models.ForeignKey(
        Company,
        on_delete=models.PROTECT,
        related_name='experiences',
    )
    title = models.CharField(max_length=255)
    title_fr = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    description_fr = models.TextField(blank=True)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.title} at {self.company.name}"

    class Meta:
        verbose_name = 'Experience'
        verbose_name_plural = 'Experiences'
        ordering = ['-start_date']


class ExperienceDateRange(models.Model):
    """One period of work. A null end_date means the period is ongoing."""

    experience = models.ForeignKey(
        Experience,
        on_delete=models.CASCADE,
        related_name='date_ranges',
    )
    start_date = models.DateTimeField()
    end_date = models.DateTimeField(null=True, blank=True)

    def __str__(self):
        end = self.end_date.date() if self.end_date else 'present'
        return f"{self.start_date.date()} - {end}"

    class Meta:
        verbose_name = 'Experience Date Range'
        verbose_name_plural = 'Experience Date Ranges'
        ordering = ['start_date']
