"""
Field validators and a rule-driven form validator.

The predicates are plain functions over strings; ``validate_form`` collects
one message per failing field and never raises for expected failures.
"""
import re
from dataclasses import dataclass, field
from urllib.parse import urlparse

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
PHONE_RE = re.compile(r'^\+?[0-9]{10,15}$')
PHONE_STRIP_RE = re.compile(r'[\s()-]')
LETTER_RE = re.compile(r'[a-zA-Z]')
DIGIT_RE = re.compile(r'\d')

PASSWORD_MIN_LENGTH = 8

REQUIRED_MESSAGE = 'This field is required'
PATTERN_MESSAGE = 'Invalid format'


def is_valid_email(email):
    return bool(email) and EMAIL_RE.match(email) is not None


def is_valid_password(password):
    """At least 8 characters with one letter and one digit."""
    if not password or len(password) < PASSWORD_MIN_LENGTH:
        return False
    return bool(LETTER_RE.search(password)) and bool(DIGIT_RE.search(password))


def is_valid_phone(phone):
    """10-15 digits, optional leading +; spaces, dashes and parentheses are ignored."""
    if not phone:
        return False
    return PHONE_RE.match(PHONE_STRIP_RE.sub('', phone)) is not None


def is_valid_url(url):
    if not url or not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    if not parsed.scheme or not re.match(r'^[a-zA-Z][a-zA-Z0-9+.-]*$', parsed.scheme):
        return False
    if parsed.scheme in ('http', 'https', 'ftp', 'ws', 'wss'):
        return bool(parsed.netloc)
    return bool(parsed.netloc or parsed.path)


@dataclass
class ValidationResult:
    is_valid: bool
    errors: dict = field(default_factory=dict)

    def as_dict(self):
        return {'isValid': self.is_valid, 'errors': dict(self.errors)}


def _rule(rules, camel, snake, default=None):
    # Rules arrive from JSON payloads (camelCase) as well as Python callers
    if camel in rules:
        return rules[camel]
    return rules.get(snake, default)


def _is_blank(value):
    return not value or (isinstance(value, str) and not value.strip())


def _length(value):
    # Length rules only apply to values that have one (strings, lists)
    return len(value) if hasattr(value, '__len__') else None


def _check_field(value, rules, data):
    required = _rule(rules, 'required', 'required', False)
    if required and _is_blank(value):
        return _rule(rules, 'requiredMessage', 'required_message') or REQUIRED_MESSAGE

    if not value and not required:
        return None

    length = _length(value)
    min_length = _rule(rules, 'minLength', 'min_length')
    if min_length and length is not None and length < min_length:
        return f'Must be at least {min_length} characters'

    max_length = _rule(rules, 'maxLength', 'max_length')
    if max_length and length is not None and length > max_length:
        return f'Must be no more than {max_length} characters'

    pattern = _rule(rules, 'pattern', 'pattern')
    if pattern:
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        if not compiled.search(str(value)):
            return _rule(rules, 'patternMessage', 'pattern_message') or PATTERN_MESSAGE

    validate = _rule(rules, 'validate', 'validate')
    if validate:
        custom_error = validate(value, data)
        if custom_error:
            return custom_error

    return None


def validate_form(data, validation_rules):
    """
    Validate ``data`` against ``validation_rules``.

    Each field's rules are applied in order: required, minLength, maxLength,
    pattern, then the custom ``validate(value, data)`` callable. The first
    failing rule supplies the field's message.

    >>> validate_form({'name': ''}, {'name': {'required': True}}).as_dict()
    {'isValid': False, 'errors': {'name': 'This field is required'}}
    """
    errors = {}
    for name, rules in validation_rules.items():
        message = _check_field(data.get(name), rules or {}, data)
        if message:
            errors[name] = message
    return ValidationResult(is_valid=not errors, errors=errors)
