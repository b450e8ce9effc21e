"""
Accounts app serializers

Serializers for User model and authentication.
"""
from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for User model.

    Exposes user details including role.
    Password is write-only for security.
    """

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'first_name',
            'last_name',
            'role',
            'last_login',
            'password',
        ]
        read_only_fields = ['id', 'last_login']
        extra_kwargs = {
            'password': {'write_only': True, 'required': False},
        }

    def validate_role(self, value):
        """Only admins may hand out the admin role."""
        if self.instance is not None and value == self.instance.role:
            return value
        request = self.context.get('request')
        if value == User.ADMIN and not getattr(getattr(request, 'user', None), 'is_admin', False):
            raise serializers.ValidationError("Only admins can grant the admin role")
        return value

    def create(self, validated_data):
        """Create user with hashed password."""
        password = validated_data.pop('password', None)
        user = User(**validated_data)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save()
        return user

    def update(self, instance, validated_data):
        """Update user, handling password properly."""
        password = validated_data.pop('password', None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if password:
            instance.set_password(password)
        instance.save()
        return instance
