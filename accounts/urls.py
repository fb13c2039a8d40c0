"""
URL routing for accounts app.
"""
from django.urls import path

from .auth import login, me, register

urlpatterns = [
    path('login/', login, name='login'),
    path('register/', register, name='register'),
    path('me/', me, name='me'),
]
