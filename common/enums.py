"""
Helpers for lookup tables keyed by a choices enum.
"""
from django.core.exceptions import ImproperlyConfigured


def ensure_exhaustive(mapping, choices, name):
    """
    Fail at import time when ``mapping`` does not cover every member of
    ``choices`` exactly, so adding a status without its display entry
    cannot ship.
    """
    expected = {member.value for member in choices}
    actual = {getattr(key, 'value', key) for key in mapping}
    missing = expected - actual
    extra = actual - expected
    if missing or extra:
        raise ImproperlyConfigured(
            f"{name} must cover {choices.__name__} exactly "
            f"(missing: {sorted(missing)}, unexpected: {sorted(extra)})"
        )
    return mapping
