"""
URL routing for projects app.
"""
from django.urls import path

from .views import kanban_board, kanban_move

urlpatterns = [
    path('kanban/', kanban_board, name='kanban-board'),
    path('kanban/move/', kanban_move, name='kanban-move'),
]
