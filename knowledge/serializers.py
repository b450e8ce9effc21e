"""
Knowledge app serializers

Serializers for Education, Certification, Skill and the unified Knowledge
entries.
"""
from rest_framework import serializers

from uploads.serializers import MediaSummarySerializer

from .models import Certification, Education, Knowledge, Skill


def _required_text(attrs, fields, partial):
    """Reject blank values for fields the back-office must always fill in."""
    errors = {}
    for field in fields:
        if partial and field not in attrs:
            continue
        value = attrs.get(field)
        if value is None or not str(value).strip():
            errors[field] = 'This field is required.'
        else:
            attrs[field] = str(value).strip()
    if errors:
        raise serializers.ValidationError(errors)
    return attrs


class EducationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Education
        fields = [
            'id',
            'institution',
            'institution_fr',
            'degree',
            'degree_fr',
            'field',
            'field_fr',
            'start_date',
            'end_date',
            'image_url',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {'end_date': {'required': False, 'allow_null': True}}

    def validate(self, attrs):
        attrs = _required_text(attrs, ['institution', 'degree'], self.partial)
        start = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end = attrs.get('end_date', getattr(self.instance, 'end_date', None))
        if start and end and end < start:
            raise serializers.ValidationError('end_date must be after start_date')
        return attrs


class CertificationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Certification
        fields = [
            'id',
            'name',
            'name_fr',
            'issuer',
            'issue_date',
            'image_url',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate(self, attrs):
        return _required_text(attrs, ['name', 'issuer'], self.partial)


class SkillSerializer(serializers.ModelSerializer):
    class Meta:
        model = Skill
        fields = [
            'id',
            'name',
            'name_fr',
            'category',
            'category_fr',
            'image_url',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate(self, attrs):
        return _required_text(attrs, ['name'], self.partial)


class KnowledgeSerializer(serializers.ModelSerializer):
    """
    Serializer for unified knowledge entries.

    competency_level is only kept for skills; other kinds store null.
    """

    media = MediaSummarySerializer(many=True, read_only=True)

    class Meta:
        model = Knowledge
        fields = [
            'id',
            'kind',
            'title',
            'title_fr',
            'issuer',
            'issuer_fr',
            'category',
            'category_fr',
            'description',
            'description_fr',
            'competency_level',
            'start_date',
            'end_date',
            'valid_until',
            'is_current',
            'url',
            'location',
            'media',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate(self, attrs):
        attrs = _required_text(attrs, ['title'], self.partial)

        kind = attrs.get('kind', getattr(self.instance, 'kind', None))
        if kind != Knowledge.Kind.SKILL:
            attrs['competency_level'] = None

        if attrs.get('is_current'):
            attrs['end_date'] = None

        start = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end = attrs.get('end_date', getattr(self.instance, 'end_date', None))
        if start and end and end < start:
            raise serializers.ValidationError('end_date must be after start_date')
        return attrs
