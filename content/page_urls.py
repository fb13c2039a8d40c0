"""
Public routes for published content pages.
"""
from django.urls import path

from .views import content_page

urlpatterns = [
    path('<slug:slug>/', content_page, name='content-page'),
]
