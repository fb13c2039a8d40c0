"""
User account models.
"""
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Custom User model extending Django's AbstractUser.
    A user acts in the marketplace as a homeowner or a service provider;
    admins edit content pages.
    """
    class Role(models.TextChoices):
        HOMEOWNER = 'homeowner', 'Homeowner'
        PROVIDER = 'provider', 'Service Provider'
        ADMIN = 'admin', 'Admin'

    email = models.EmailField(unique=True)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.HOMEOWNER)
    phone = models.CharField(max_length=32, blank=True)

    # Provider profile
    business_name = models.CharField(max_length=255, blank=True)
    contact_name = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    class Meta:
        db_table = 'users'
        ordering = ['-created_at']

    def __str__(self):
        return self.email

    @property
    def is_provider(self):
        return self.role == self.Role.PROVIDER

    @property
    def is_content_admin(self):
        return self.role == self.Role.ADMIN or self.is_staff

    @property
    def display_name(self):
        """Business name for providers, otherwise the person's full name."""
        if self.is_provider and self.business_name:
            return self.business_name
        full_name = self.get_full_name()
        return full_name or self.email
