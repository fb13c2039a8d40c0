"""
API URL routing for homeswerv.
All API endpoints are prefixed with /api/v1/
"""
from django.urls import path, include

from .views import health_check

urlpatterns = [
    # Health check (no auth) - GET /api/v1/health/
    path('health/', health_check, name='health'),
    # Dashboard authentication
    path('auth/', include('accounts.urls')),
    # Homeowner project kanban board
    path('projects/', include('projects.urls')),
    # Satisfaction guarantee claims
    path('guarantees/', include('guarantees.urls')),
    # Content pages: metadata editor
    path('content/', include('content.api_urls')),
]
