"""
Experience app serializers

Serializers for companies, experiences with their date ranges, and the
derived multi-period timeline aggregate.
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from uploads.serializers import MediaSummarySerializer

from .models import Company, Experience, ExperienceDateRange
from .services import CompanyService, ExperienceService


def _as_drf_error(exc: DjangoValidationError) -> serializers.ValidationError:
    return serializers.ValidationError(exc.messages)


class CompanySerializer(serializers.ModelSerializer):
    """
    Serializer for Company.

    Both names are required and trimmed; an empty logo URL is stored as null.
    """

    experience_count = serializers.IntegerField(source='experiences.count', read_only=True)

    class Meta:
        model = Company
        fields = [
            'id',
            'name',
            'name_fr',
            'logo_url',
            'experience_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'name': {'validators': []},
            'name_fr': {'required': True, 'allow_blank': True},
        }

    def validate(self, attrs):
        try:
            cleaned = CompanyService.validate_company(attrs, partial=self.partial)
        except DjangoValidationError as exc:
            raise _as_drf_error(exc)

        name = cleaned.get('name')
        if name:
            duplicates = Company.objects.filter(name=name)
            if self.instance:
                duplicates = duplicates.exclude(pk=self.instance.pk)
            if duplicates.exists():
                raise serializers.ValidationError('A company with this name already exists')
        return cleaned


class ExperienceDateRangeSerializer(serializers.ModelSerializer):
    class Meta:
        model = ExperienceDateRange
        fields = ['id', 'start_date', 'end_date']
        read_only_fields = ['id']
        extra_kwargs = {'end_date': {'required': False, 'allow_null': True}}


class ExperienceSerializer(serializers.ModelSerializer):
    """
    Serializer for Experience.

    Accepts an optional list of date ranges. Without one, the legacy
    start_date/end_date pair becomes the single range. On update, supplied
    ranges replace the stored ones.
    """

    company_name = serializers.CharField(source='company.name', read_only=True)
    date_ranges = ExperienceDateRangeSerializer(many=True, required=False)
    media = MediaSummarySerializer(many=True, read_only=True)
    homepage_media = MediaSummarySerializer(many=True, read_only=True)
    card_media = MediaSummarySerializer(many=True, read_only=True)

    class Meta:
        model = Experience
        fields = [
            'id',
            'company',
            'company_name',
            'title',
            'title_fr',
            'description',
            'description_fr',
            'start_date',
            'end_date',
            'date_ranges',
            'media',
            'homepage_media',
            'card_media',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'start_date': {'required': False},
            'end_date': {'required': False, 'allow_null': True},
        }

    def validate(self, attrs):
        ranges = attrs.get('date_ranges')
        if ranges is None and not self.instance and not attrs.get('start_date'):
            raise serializers.ValidationError('start_date or date_ranges is required')

        start = attrs.get('start_date')
        end = attrs.get('end_date')
        if start and end and end < start:
            raise serializers.ValidationError('end_date must be after start_date')
        return attrs

    def create(self, validated_data):
        date_ranges = validated_data.pop('date_ranges', None)
        try:
            return ExperienceService.create_experience(validated_data, date_ranges)
        except DjangoValidationError as exc:
            raise _as_drf_error(exc)

    def update(self, instance, validated_data):
        date_ranges = validated_data.pop('date_ranges', None)
        try:
            return ExperienceService.update_experience(instance, validated_data, date_ranges)
        except DjangoValidationError as exc:
            raise _as_drf_error(exc)


class TimelineMediaSerializer(serializers.Serializer):
    id = serializers.ReadOnlyField()
    url = serializers.CharField()
    type = serializers.CharField()


class TimelineDateRangeSerializer(serializers.Serializer):
    id = serializers.ReadOnlyField()
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField(allow_null=True)


class TimelineCompanySerializer(serializers.Serializer):
    id = serializers.ReadOnlyField()
    name = serializers.CharField()
    name_fr = serializers.CharField()
    logo_url = serializers.CharField(allow_null=True)


class MultiPeriodExperienceSerializer(serializers.Serializer):
    """
    Read-only serializer for the MultiPeriodExperience aggregate.

    Works directly on the frozen dataclasses from experience.timeline.
    """

    id = serializers.ReadOnlyField()
    company = TimelineCompanySerializer()
    title = serializers.CharField()
    title_fr = serializers.CharField()
    description = serializers.CharField()
    description_fr = serializers.CharField()
    media = TimelineMediaSerializer(many=True)
    homepage_media = TimelineMediaSerializer(many=True)
    card_media = TimelineMediaSerializer(many=True)
    date_ranges = TimelineDateRangeSerializer(many=True)
    is_current_position = serializers.BooleanField()
    earliest_start_date = serializers.DateTimeField()
    latest_end_date = serializers.DateTimeField(allow_null=True)
    formatted_periods = serializers.CharField()


class ExperienceStatsSerializer(serializers.Serializer):
    total_experiences = serializers.IntegerField()
    current_positions = serializers.IntegerField()
    multi_period_experiences = serializers.IntegerField()
    total_years_experience = serializers.FloatField()
    average_experience_length = serializers.FloatField()
