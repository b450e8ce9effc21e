"""
Uploads app serializers

Serializers for Media rows.
"""
from rest_framework import serializers
from .models import Media


class MediaSerializer(serializers.ModelSerializer):
    """
    Serializer for Media.

    Owner foreign keys are writable so the back-office can attach an existing
    upload to another slot.
    """

    class Meta:
        model = Media
        fields = [
            'id',
            'url',
            'type',
            'experience',
            'experience_homepage',
            'experience_card',
            'knowledge',
            'highlight',
            'highlight_homepage',
            'highlight_card',
            'contribution',
            'recommended_book',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']


class MediaSummarySerializer(serializers.ModelSerializer):
    """Compact media representation nested inside other resources."""

    class Meta:
        model = Media
        fields = ['id', 'url', 'type', 'created_at']
        read_only_fields = fields
