"""
URL routing for guarantees app.
"""
from django.urls import path

from .views import claims

urlpatterns = [
    path('claims/', claims, name='guarantee-claims'),
]
