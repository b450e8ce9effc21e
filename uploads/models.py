"""
Uploads app models

Media rows point at files written under MEDIA_ROOT. A media row belongs to at
most one display slot of one entity: the legacy gallery, the homepage card or
the detail card of an experience or highlight, or the gallery of a knowledge
entry, contribution or recommended book.
"""
from django.db import models


class Media(models.Model):
    """Uploaded image or video referenced by URL."""

    IMAGE = 'image'
    VIDEO = 'video'

    TYPE_CHOICES = [
        (IMAGE, 'Image'),
        (VIDEO, 'Video'),
    ]

    url = models.CharField(max_length=500)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default=IMAGE)

    experience = models.ForeignKey(
        'experience.Experience',
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name='media',
    )
    experience_homepage = models.ForeignKey(
        'experience.Experience',
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name='homepage_media',
    )
    experience_card = models.ForeignKey(
        'experience.Experience',
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name='card_media',
    )
    knowledge = models.ForeignKey(
        'knowledge.Knowledge',
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name='media',
    )
    highlight = models.ForeignKey(
        'showcase.Highlight',
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name='media',
    )
    highlight_homepage = models.ForeignKey(
        'showcase.Highlight',
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name='homepage_media',
    )
    highlight_card = models.ForeignKey(
        'showcase.Highlight',
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name='card_media',
    )
    contribution = models.ForeignKey(
        'showcase.Contribution',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='media',
    )
    recommended_book = models.ForeignKey(
        'showcase.RecommendedBook',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='media',
    )

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.url

    @property
    def is_local(self) -> bool:
        return self.url.startswith('/')

    class Meta:
        verbose_name = 'Media'
        verbose_name_plural = 'Media'
        ordering = ['created_at']
