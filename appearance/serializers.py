"""
Appearance app serializers
"""
import re

from rest_framework import serializers

from .models import FooterConfig, NavbarConfig

HEX_COLOR = re.compile(r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def validate_hex_color(value):
    if not HEX_COLOR.match(value or ''):
        raise serializers.ValidationError("Colors must be hex values like #141414")
    return value


class NavbarConfigSerializer(serializers.ModelSerializer):
    class Meta:
        model = NavbarConfig
        exclude = ['created_at']
        read_only_fields = ['id', 'updated_at']
        extra_kwargs = {
            'background_color': {'validators': [validate_hex_color]},
            'gradient_from': {'validators': [validate_hex_color]},
            'gradient_to': {'validators': [validate_hex_color]},
        }


class FooterConfigSerializer(serializers.ModelSerializer):
    class Meta:
        model = FooterConfig
        exclude = ['created_at']
        read_only_fields = ['id', 'updated_at']
        extra_kwargs = {
            'background_color': {'validators': [validate_hex_color]},
            'text_color': {'validators': [validate_hex_color]},
        }
