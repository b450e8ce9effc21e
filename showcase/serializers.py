"""
Showcase app serializers

Serializers for highlights, contributions and recommended books.
"""
from rest_framework import serializers

from experience.models import Company
from uploads.serializers import MediaSummarySerializer

from .models import Contribution, Highlight, RecommendedBook


class LenientIntegerField(serializers.Field):
    """Integer field that stores 0 for blank or unparseable input."""

    def to_representation(self, value):
        return value

    def validate_empty_values(self, data):
        if data is None:
            return (True, 0)
        return super().validate_empty_values(data)

    def to_internal_value(self, data):
        try:
            return int(data)
        except (TypeError, ValueError):
            return 0


class HighlightSerializer(serializers.ModelSerializer):
    """
    Serializer for Highlight.

    Title EN/FR, company and start date are required. Media slots are read
    only; files are attached through the upload endpoint.
    """

    company = serializers.PrimaryKeyRelatedField(queryset=Company.objects.all())
    company_name = serializers.CharField(source='company.name', read_only=True)
    media = MediaSummarySerializer(many=True, read_only=True)
    homepage_media = MediaSummarySerializer(many=True, read_only=True)
    card_media = MediaSummarySerializer(many=True, read_only=True)

    class Meta:
        model = Highlight
        fields = [
            'id',
            'company',
            'company_name',
            'title',
            'title_fr',
            'description',
            'description_fr',
            'start_date',
            'media',
            'homepage_media',
            'card_media',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'title_fr': {'required': True, 'allow_blank': False},
        }


class ContributionSerializer(serializers.ModelSerializer):
    display_order = LenientIntegerField(required=False, default=0)
    media = MediaSummarySerializer(many=True, read_only=True)

    class Meta:
        model = Contribution
        fields = [
            'id',
            'title',
            'title_fr',
            'type',
            'organization',
            'organization_fr',
            'role',
            'role_fr',
            'description',
            'description_fr',
            'impact',
            'impact_fr',
            'start_date',
            'end_date',
            'is_current',
            'url',
            'download_url',
            'thumbnail_url',
            'display_order',
            'media',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'type': {'error_messages': {'invalid_choice': 'Invalid contribution type'}},
        }

    def validate(self, attrs):
        if attrs.get('is_current'):
            attrs['end_date'] = None
        start = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end = attrs.get('end_date', getattr(self.instance, 'end_date', None))
        if start and end and end < start:
            raise serializers.ValidationError('end_date must be after start_date')
        return attrs


class RecommendedBookSerializer(serializers.ModelSerializer):
    priority = LenientIntegerField(required=False, default=0)
    media = MediaSummarySerializer(many=True, read_only=True)

    class Meta:
        model = RecommendedBook
        fields = [
            'id',
            'title',
            'title_fr',
            'author',
            'author_fr',
            'recommended_reason',
            'recommended_reason_fr',
            'summary',
            'summary_fr',
            'purchase_url',
            'cover_image_url',
            'priority',
            'media',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
