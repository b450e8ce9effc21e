"""
Appearance app models

Navbar and footer settings for the public site. Each model keeps a single
row, created with the defaults below on first read.
"""
from django.db import models


class SingletonConfig(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    @classmethod
    def load(cls):
        """Return the configuration row, creating it with defaults on first use."""
        config = cls.objects.order_by('pk').first()
        if config is None:
            config = cls.objects.create()
        return config

    class Meta:
        abstract = True


class NavbarConfig(SingletonConfig):
    """Logo, section labels and background of the top navigation bar."""

    class BackgroundType(models.TextChoices):
        COLOR = 'color', 'Color'
        GRADIENT = 'gradient', 'Gradient'
        IMAGE = 'image', 'Image'

    logo_text = models.CharField(max_length=100, default='resumeflex')
    logo_image_url = models.CharField(max_length=500, blank=True, null=True)
    use_image_logo = models.BooleanField(default=False)
    work_experience_label = models.CharField(max_length=100, default='Work Experience')
    work_experience_label_fr = models.CharField(max_length=100, default='Expérience professionnelle')
    career_series_label = models.CharField(max_length=100, default='Career Series')
    career_series_label_fr = models.CharField(max_length=100, default='Série carrière')
    education_label = models.CharField(max_length=100, default='Education')
    education_label_fr = models.CharField(max_length=100, default='Formation')
    certifications_label = models.CharField(max_length=100, default='Certifications')
    certifications_label_fr = models.CharField(max_length=100, default='Certifications')
    skills_label = models.CharField(max_length=100, default='Skills')
    skills_label_fr = models.CharField(max_length=100, default='Compétences')
    background_color = models.CharField(max_length=20, default='#141414')
    background_type = models.CharField(max_length=20, choices=BackgroundType.choices, default=BackgroundType.COLOR)
    background_image_url = models.CharField(max_length=500, blank=True, null=True)
    gradient_from = models.CharField(max_length=20, default='#141414')
    gradient_to = models.CharField(max_length=20, default='#1a1a1a')
    font_family = models.CharField(max_length=100, default='Inter')

    def __str__(self):
        return f"Navbar ({self.logo_text})"

    class Meta:
        verbose_name = 'Navbar Configuration'
        verbose_name_plural = 'Navbar Configuration'


class FooterConfig(SingletonConfig):
    """Logo, copyright line, LinkedIn link and colors of the footer."""

    logo_text = models.CharField(max_length=100, default='resumeflex')
    logo_image_url = models.CharField(max_length=500, blank=True, null=True)
    use_image_logo = models.BooleanField(default=False)
    copyright_text = models.CharField(max_length=255, default='© 2025 resumeflex. All rights reserved.')
    linkedin_url = models.CharField(max_length=500, blank=True, null=True)
    show_linkedin = models.BooleanField(default=True)
    background_color = models.CharField(max_length=20, default='#0a0a0a')
    text_color = models.CharField(max_length=20, default='#ffffff')

    def __str__(self):
        return f"Footer ({self.logo_text})"

    class Meta:
        verbose_name = 'Footer Configuration'
        verbose_name_plural = 'Footer Configuration'
