"""
Custom permissions for content editing.
"""
from rest_framework import permissions


class IsContentAdmin(permissions.BasePermission):
    """
    Only admins (role 'admin' or Django staff) may edit content pages.
    """
    message = 'Only content administrators can edit pages.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_content_admin)
