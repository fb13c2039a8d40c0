"""
URL routing for the public marketing pages.
"""
from django.urls import path

from . import views

urlpatterns = [
    path('', views.home, name='home'),
    path('pricing/', views.pricing, name='pricing'),
    path('features/', views.features, name='features'),
    path('features/providers/', views.provider_features, name='provider-features'),
    path('features/testimonials/', views.testimonials, name='testimonials'),
    path('sitemap/', views.sitemap, name='sitemap'),
]
