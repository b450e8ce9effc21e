"""
Knowledge app models

Education, Certification and Skill are the original per-section tables.
Knowledge is the unified model that groups every kind of learning entry
(education, certification, skill, course, award) behind one admin screen.
"""
from django.db import models


class Education(models.Model):
    institution = models.CharField(max_length=255)
    institution_fr = models.CharField(max_length=255, blank=True)
    degree = models.CharField(max_length=255)
    degree_fr = models.CharField(max_length=255, blank=True)
    field = models.CharField(max_length=255, blank=True)
    field_fr = models.CharField(max_length=255, blank=True)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField(null=True, blank=True)
    image_url = models.CharField(max_length=500, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.degree} at {self.institution}"

    class Meta:
        verbose_name = 'Education'
        verbose_name_plural = 'Education'
        ordering = ['-start_date']


class Certification(models.Model):
    name = models.CharField(max_length=255)
    name_fr = models.CharField(max_length=255, blank=True)
    issuer = models.CharField(max_length=255)
    issue_date = models.DateTimeField()
    image_url = models.CharField(max_length=500, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.name} ({self.issuer})"

    class Meta:
        verbose_name = 'Certification'
        verbose_name_plural = 'Certifications'
        ordering = ['-issue_date']


class Skill(models.Model):
    name = models.CharField(max_length=255)
    name_fr = models.CharField(max_length=255, blank=True)
    category = models.CharField(max_length=255, blank=True)
    category_fr = models.CharField(max_length=255, blank=True)
    image_url = models.CharField(max_length=500, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    class Meta:
        verbose_name = 'Skill'
        verbose_name_plural = 'Skills'
        ordering = ['category', 'name']


class Knowledge(models.Model):
    """
    Unified learning entry.

    kind decides which section of the portfolio the entry appears in;
    competency_level only applies to skills.
    """

    class Kind(models.TextChoices):
        EDUCATION = 'EDUCATION', 'Education'
        CERTIFICATION = 'CERTIFICATION', 'Certification'
        SKILL = 'SKILL', 'Skill'
        COURSE = 'COURSE', 'Course'
        AWARD = 'AWARD', 'Award'

    class Level(models.TextChoices):
        BEGINNER = 'BEGINNER', 'Beginner'
        INTERMEDIATE = 'INTERMEDIATE', 'Intermediate'
        ADVANCED = 'ADVANCED', 'Advanced'
        EXPERT = 'EXPERT', 'Expert'

    kind = models.CharField(max_length=20, choices=Kind.choices)
    title = models.CharField(max_length=255)
    title_fr = models.CharField(max_length=255, blank=True, null=True)
    issuer = models.CharField(max_length=255, blank=True, null=True)
    issuer_fr = models.CharField(max_length=255, blank=True, null=True)
    category = models.CharField(max_length=255, blank=True, null=True)
    category_fr = models.CharField(max_length=255, blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    description_fr = models.TextField(blank=True, null=True)
    competency_level = models.CharField(max_length=20, choices=Level.choices, blank=True, null=True)
    start_date = models.DateTimeField(null=True, blank=True)
    end_date = models.DateTimeField(null=True, blank=True)
    valid_until = models.DateTimeField(null=True, blank=True)
    is_current = models.BooleanField(default=False)
    url = models.URLField(max_length=500, blank=True, null=True)
    location = models.CharField(max_length=255, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.get_kind_display()}: {self.title}"

    class Meta:
        verbose_name = 'Knowledge Entry'
        verbose_name_plural = 'Knowledge Entries'
        ordering = ['-start_date', '-created_at']
        indexes = [
            models.Index(fields=['kind', 'start_date'], name='knowledge_kind_start_idx'),
        ]
