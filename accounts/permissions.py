"""
Accounts app permissions

Custom permissions for the public site and the back-office.
"""
from rest_framework import permissions


class IsAdminOrReadOnly(permissions.BasePermission):
    """
    Permission that allows:
    - Anyone to read (the public portfolio)
    - Authenticated back-office users to write
    """

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return bool(request.user and request.user.is_authenticated)


class IsAdminOrSelf(permissions.BasePermission):
    """
    Permission that allows:
    - Admins to access any user
    - Users to access only their own data
    """

    def has_object_permission(self, request, view, obj):
        # Admin users can access anything
        if getattr(request.user, 'is_admin', False):
            return True

        # Users can only access their own data
        return obj == request.user
