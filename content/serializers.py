"""
Serializers for content page metadata.
"""
from rest_framework import serializers

from .editor import METADATA_FIELD_NAMES, editor_fields, validate_metadata
from .models import Page


class PageMetadataSerializer(serializers.ModelSerializer):
    """The four SEO fields edited by the metadata editor."""
    fields_meta = serializers.SerializerMethodField()

    class Meta:
        model = Page
        fields = ('id', 'title', 'slug') + METADATA_FIELD_NAMES + ('fields_meta',)
        read_only_fields = ('id', 'title', 'slug')

    def get_fields_meta(self, obj):
        return editor_fields({name: getattr(obj, name) for name in ('title',) + METADATA_FIELD_NAMES})

    def validate(self, attrs):
        result = validate_metadata(attrs)
        if not result.is_valid:
            raise serializers.ValidationError(result.errors)
        return attrs
