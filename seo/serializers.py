"""
SEO app serializers
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from .models import SEOConfig, SEOMetaTag, StructuredData
from .services import MetaTagService, SEOConfigService
from .structured_data import check_json_ld, parse_json_ld


class SEOConfigSerializer(serializers.ModelSerializer):
    class Meta:
        model = SEOConfig
        fields = [
            'id',
            'site_name',
            'site_name_fr',
            'default_title',
            'default_title_fr',
            'default_description',
            'default_description_fr',
            'default_keywords',
            'default_keywords_fr',
            'canonical_url',
            'robots_content',
            'favicon_url',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate(self, attrs):
        try:
            return SEOConfigService.validate_config(attrs, partial=self.partial)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages)


class SEOMetaTagSerializer(serializers.ModelSerializer):
    """
    Serializer for per-page meta tags.

    Duplicate pages are reported by the view as 409, so the model's unique
    validator is not applied here.
    """

    class Meta:
        model = SEOMetaTag
        fields = [
            'id',
            'page',
            'title',
            'title_fr',
            'description',
            'description_fr',
            'keywords',
            'keywords_fr',
            'og_title',
            'og_title_fr',
            'og_description',
            'og_description_fr',
            'og_image',
            'og_type',
            'twitter_card',
            'twitter_title',
            'twitter_title_fr',
            'twitter_description',
            'twitter_description_fr',
            'twitter_image',
            'canonical_url',
            'no_index',
            'no_follow',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'page': {'validators': []},
        }

    def validate(self, attrs):
        try:
            return MetaTagService.validate_meta_tag(attrs, partial=self.partial)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages)


class StructuredDataSerializer(serializers.ModelSerializer):
    """json_data accepts a JSON object or a string holding one."""

    json_data = serializers.JSONField()

    class Meta:
        model = StructuredData
        fields = ['id', 'type', 'page', 'json_data', 'is_active', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_json_data(self, value):
        try:
            return check_json_ld(parse_json_ld(value))
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages)

    def validate_page(self, value):
        if not value.startswith('/'):
            raise serializers.ValidationError("Page path must start with /")
        return value
