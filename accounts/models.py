"""
Accounts app models

Custom User model extending AbstractUser with a back-office role.
"""
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Back-office user.

    Extends Django's AbstractUser to add:
    - role: ADMIN manages users and everything else, EDITOR manages content
    """

    ADMIN = 'ADMIN'
    EDITOR = 'EDITOR'

    ROLE_CHOICES = [
        (ADMIN, 'Admin'),
        (EDITOR, 'Editor'),
    ]

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=EDITOR,
    )

    def __str__(self):
        return f"{self.username} ({self.role})"

    @property
    def is_admin(self) -> bool:
        return self.role == self.ADMIN or self.is_superuser

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
