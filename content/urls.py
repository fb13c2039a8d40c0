"""
HTML routes for the admin page preview.
"""
from django.urls import path

from .views import page_preview

urlpatterns = [
    path('preview/<int:page_id>/', page_preview, name='page-preview'),
]
