"""
Serializers for kanban drag-and-drop requests.
"""
from rest_framework import serializers


class DragLocationSerializer(serializers.Serializer):
    droppableId = serializers.CharField()
    index = serializers.IntegerField(min_value=0)


class DragResultSerializer(serializers.Serializer):
    """Shape of a drag-end event posted by the board."""
    draggableId = serializers.CharField(required=False)
    source = DragLocationSerializer()
    destination = DragLocationSerializer(required=False, allow_null=True)
