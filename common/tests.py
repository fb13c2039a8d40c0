"""
Tests for common helpers - validation, error formatting and display formatting.
"""
import logging
import re
from datetime import date, datetime
from decimal import Decimal

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.db import models

from common.enums import ensure_exhaustive
from common.errors import create_error_response, format_error_message, handle_api_error, log_error
from common.formatting import format_currency, format_date
from common.validation import (
    is_valid_email, is_valid_password, is_valid_phone, is_valid_url, validate_form,
)


class TestValidators:

    def test_password(self):
        assert is_valid_password('abc') is False
        assert is_valid_password('abcdefg1') is True
        assert is_valid_password('abcdefgh') is False
        assert is_valid_password('12345678') is False
        assert is_valid_password('') is False
        assert is_valid_password(None) is False

    def test_email(self):
        assert is_valid_email('a@b.com') is True
        assert is_valid_email('not-an-email') is False
        assert is_valid_email('a b@c.com') is False
        assert is_valid_email('') is False

    def test_phone_ignores_punctuation(self):
        assert is_valid_phone('(555) 123-4567') is True
        assert is_valid_phone('+44 20 7946 0958') is True
        assert is_valid_phone('555-1234') is False
        assert is_valid_phone('555-123-456a') is False

    def test_url(self):
        assert is_valid_url('https://example.com/og.jpg') is True
        assert is_valid_url('mailto:hello@example.com') is True
        assert is_valid_url('https://') is False
        assert is_valid_url('example.com') is False
        assert is_valid_url('') is False


class TestValidateForm:

    def test_required(self):
        result = validate_form({'name': ''}, {'name': {'required': True}})
        assert result.as_dict() == {'isValid': False, 'errors': {'name': 'This field is required'}}

    def test_whitespace_counts_as_missing(self):
        result = validate_form({'name': '   '}, {'name': {'required': True, 'requiredMessage': 'Name please'}})
        assert result.errors == {'name': 'Name please'}

    def test_optional_empty_field_skips_other_rules(self):
        result = validate_form({'bio': ''}, {'bio': {'minLength': 10}})
        assert result.is_valid

    def test_length_bounds(self):
        rules = {'code': {'minLength': 3, 'maxLength': 5}}
        assert validate_form({'code': 'ab'}, rules).errors == {'code': 'Must be at least 3 characters'}
        assert validate_form({'code': 'abcdef'}, rules).errors == {'code': 'Must be no more than 5 characters'}
        assert validate_form({'code': 'abcd'}, rules).is_valid

    def test_pattern(self):
        rules = {'zip': {'pattern': re.compile(r'^\d{5}$'), 'patternMessage': 'Enter a 5-digit ZIP'}}
        assert validate_form({'zip': '9721'}, rules).errors == {'zip': 'Enter a 5-digit ZIP'}
        assert validate_form({'zip': 'abc'}, {'zip': {'pattern': r'^\d+$'}}).errors == {'zip': 'Invalid format'}

    def test_custom_validator_sees_all_data(self):
        rules = {'confirm': {'validate': lambda value, data: None if value == data['password'] else 'Passwords do not match'}}
        assert validate_form({'password': 'a', 'confirm': 'b'}, rules).errors == {'confirm': 'Passwords do not match'}
        assert validate_form({'password': 'a', 'confirm': 'a'}, rules).is_valid

    def test_first_failing_rule_wins(self):
        rules = {'name': {'minLength': 5, 'pattern': r'^\d+$'}}
        assert validate_form({'name': 'ab'}, rules).errors == {'name': 'Must be at least 5 characters'}

    def test_snake_case_rule_keys(self):
        result = validate_form({'name': 'abc'}, {'name': {'min_length': 4}})
        assert result.errors == {'name': 'Must be at least 4 characters'}

    def test_fields_without_rules_are_ignored(self):
        assert validate_form({'extra': ''}, {}).is_valid

    def test_required_zero_counts_as_missing(self):
        result = validate_form({'qty': 0}, {'qty': {'required': True}})
        assert result.as_dict() == {'isValid': False, 'errors': {'qty': 'This field is required'}}

    def test_length_rules_skip_values_without_length(self):
        assert validate_form({'age': 5}, {'age': {'minLength': 2, 'maxLength': 1}}).is_valid
        assert validate_form({'amount': Decimal('150')}, {'amount': {'required': True, 'minLength': 5}}).is_valid
        assert validate_form({'tags': ['a']}, {'tags': {'minLength': 2}}).errors == {'tags': 'Must be at least 2 characters'}


class TestErrors:

    def test_format_error_message(self):
        assert format_error_message(None) == 'An unknown error occurred'
        assert format_error_message('Nope') == 'Nope'
        assert format_error_message(ValueError('Bad value')) == 'Bad value'
        assert format_error_message({'error_description': 'Token expired'}) == 'Token expired'
        assert format_error_message(42) == 'An unexpected error occurred. Please try again.'

    def test_handle_api_error_logs(self, caplog):
        with caplog.at_level(logging.ERROR, logger='common.errors'):
            message = handle_api_error(RuntimeError('Timed out'))
        assert message == 'Timed out'
        assert 'Error in API request: Timed out' in caplog.text

    def test_log_error_location(self, caplog):
        with caplog.at_level(logging.ERROR, logger='common.errors'):
            log_error('boom', location='claims fetch', user_id=3)
        assert 'Error in claims fetch: boom' in caplog.text

    def test_error_response_hides_details_outside_debug(self, settings):
        settings.DEBUG = False
        payload = create_error_response(ValueError('Bad value'))
        assert payload['status'] == 'error'
        assert payload['message'] == 'Bad value'
        assert 'timestamp' in payload
        assert 'error' not in payload

    def test_error_response_includes_details_in_debug(self, settings):
        settings.DEBUG = True
        payload = create_error_response(ValueError('Bad value'), status='fail')
        assert payload['status'] == 'fail'
        assert payload['error'] == "ValueError('Bad value')"


class TestFormatting:

    def test_format_date(self):
        assert format_date('2025-03-04') == 'Mar 4, 2025'
        assert format_date(date(2025, 3, 4), with_year=False) == 'Mar 4'
        assert format_date(datetime(2024, 11, 20, 8, 0)) == 'Nov 20, 2024'
        assert format_date('2025-03-04T10:15:00Z') == 'Mar 4, 2025'

    def test_format_date_missing(self):
        assert format_date(None) == 'Not set'
        assert format_date('soon', empty='') == ''

    def test_format_currency(self):
        assert format_currency(Decimal('1250.5')) == '$1,250.50'
        assert format_currency('12500', cents=False) == '$12,500'
        assert format_currency(-3) == '-$3.00'
        assert format_currency(None) == ''
        assert format_currency('abc') == ''
        assert format_currency(0, blank_zero=True) == ''
        assert format_currency(0) == '$0.00'


class _Size(models.TextChoices):
    SMALL = 'small', 'Small'
    LARGE = 'large', 'Large'


class TestEnsureExhaustive:

    def test_complete_mapping_is_returned(self):
        mapping = {_Size.SMALL: 's', _Size.LARGE: 'l'}
        assert ensure_exhaustive(mapping, _Size, 'SIZES') is mapping

    def test_missing_member_fails(self):
        with pytest.raises(ImproperlyConfigured, match='missing'):
            ensure_exhaustive({_Size.SMALL: 's'}, _Size, 'SIZES')

    def test_extra_key_fails(self):
        with pytest.raises(ImproperlyConfigured):
            ensure_exhaustive({_Size.SMALL: 's', _Size.LARGE: 'l', 'huge': 'h'}, _Size, 'SIZES')
