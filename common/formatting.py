"""
Display formatting for dashboard cards.
"""
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from django.utils.dateparse import parse_date, parse_datetime

NOT_SET = 'Not set'


def _to_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        parsed = parse_datetime(value)
        if parsed:
            return parsed.date()
        return parse_date(value[:10])
    return None


def format_date(value, with_year=True, empty=NOT_SET):
    """
    'Mar 4, 2025' (or 'Mar 4' without the year).
    Missing or unparseable values return ``empty``.
    """
    day = _to_date(value) if value else None
    if day is None:
        return empty
    text = f"{day.strftime('%b')} {day.day}"
    if with_year:
        text += f", {day.year}"
    return text


def format_currency(amount, cents=True, blank_zero=False):
    """
    USD with thousands separators. Missing amounts format as '', as do zero
    amounts when ``blank_zero`` is set.
    """
    if amount in (None, ''):
        return ''
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        return ''
    if blank_zero and not value:
        return ''
    sign = '-' if value < 0 else ''
    value = abs(value)
    if cents:
        return f"{sign}${value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):,.2f}"
    return f"{sign}${value.quantize(Decimal('1'), rounding=ROUND_HALF_UP):,.0f}"
