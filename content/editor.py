"""
SEO metadata editor.

The editor is a controlled form over a plain page mapping: every input change
produces a new mapping with one field replaced, which the caller keeps.
"""
from dataclasses import dataclass

from common.validation import is_valid_url, validate_form


@dataclass(frozen=True)
class MetadataField:
    name: str
    label: str
    widget: str
    help_text: str
    placeholder: str = ''
    rows: int = 0


METADATA_FIELDS = (
    MetadataField(
        name='meta_title',
        label='Meta Title',
        widget='input',
        help_text='Appears in browser tabs and search engine results. Recommended length: 50-60 characters.',
    ),
    MetadataField(
        name='meta_description',
        label='Meta Description',
        widget='textarea',
        rows=3,
        placeholder='Brief description of this page for search engines and social media...',
        help_text='Appears in search engine results. Recommended length: 150-160 characters.',
    ),
    MetadataField(
        name='meta_keywords',
        label='Meta Keywords',
        widget='input',
        placeholder='keyword1, keyword2, keyword3',
        help_text='Comma-separated keywords related to the page content.',
    ),
    MetadataField(
        name='og_image',
        label='Social Media Image URL',
        widget='input',
        placeholder='https://example.com/image.jpg',
        help_text='Image that appears when sharing on social media. Recommended size: 1200x630 pixels.',
    ),
)

METADATA_FIELD_NAMES = tuple(f.name for f in METADATA_FIELDS)

RECOMMENDED_LENGTHS = {
    'meta_title': (50, 60),
    'meta_description': (150, 160),
}

METADATA_RULES = {
    'meta_title': {'maxLength': 255},
    'meta_keywords': {'maxLength': 500},
    'og_image': {
        'maxLength': 1000,
        'validate': lambda value, data: None if is_valid_url(value) else 'Enter a valid image URL',
    },
}


def apply_metadata_change(page, name, value):
    """Return a copy of ``page`` with metadata field ``name`` set to ``value``."""
    if name not in METADATA_FIELD_NAMES:
        raise ValueError(f"Not a metadata field: {name}")
    return {**page, name: value}


def length_hint(name, value):
    """'short', 'ok' or 'long' against the recommended range, None when there is no range."""
    bounds = RECOMMENDED_LENGTHS.get(name)
    if not bounds or not value:
        return None
    low, high = bounds
    if len(value) < low:
        return 'short'
    if len(value) > high:
        return 'long'
    return 'ok'


def editor_fields(page):
    """Field descriptors with current values; empty values render as ''."""
    fields = []
    for f in METADATA_FIELDS:
        value = page.get(f.name) or ''
        placeholder = page.get('title', '') if f.name == 'meta_title' else f.placeholder
        fields.append({
            'name': f.name,
            'label': f.label,
            'widget': f.widget,
            'rows': f.rows or None,
            'value': value,
            'placeholder': placeholder,
            'help_text': f.help_text,
            'length': len(value),
            'length_hint': length_hint(f.name, value),
        })
    return fields


def validate_metadata(changes):
    return validate_form(changes, {name: rule for name, rule in METADATA_RULES.items() if name in changes})
