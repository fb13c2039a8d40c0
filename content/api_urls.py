"""
API routing for content pages.
"""
from django.urls import path

from .views import page_metadata

urlpatterns = [
    path('pages/<int:page_id>/metadata/', page_metadata, name='page-metadata'),
]
