from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for custom User model."""

    list_display = [
        'username',
        'email',
        'role',
        'is_staff',
        'last_login',
    ]
    list_filter = ['role', 'is_staff', 'is_superuser']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Back-office', {'fields': ('role',)}),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Back-office', {'fields': ('role',)}),
    )
