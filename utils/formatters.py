import math
import re
from datetime import date, datetime
from email.utils import parsedate_to_datetime

ACTIVITY_ICONS = {
    'registration': 'fa-user-plus',
    'payment': 'fa-money-bill-wave',
    'complaint': 'fa-comments',
    'room': 'fa-bed',
}

_NON_NUMERIC = re.compile(r'[^0-9.]')
_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')
_LEADING_FLOAT = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def format_inr(value):
    """Format an amount as rupees with two decimals.

    Separators and symbols are stripped before parsing, so "1,500.50" gives
    "₹1500.50". Anything that still does not parse comes back unchanged
    behind the rupee sign.
    """
    if value is None:
        return '₹0.00'
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if not math.isfinite(value):
            return f'₹{value}'
        return f'₹{float(value):.2f}'
    cleaned = _NON_NUMERIC.sub('', str(value).strip())
    try:
        amount = float(cleaned)
    except ValueError:
        try:
            amount = float(value)
        except (TypeError, ValueError):
            return f'₹{value}'
    if amount != amount or amount in (float('inf'), float('-inf')):
        return f'₹{value}'
    return f'₹{amount:.2f}'


def format_date(value):
    """Render a backend date as e.g. "Jan 5, 2024"."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return '-'
    parsed = _to_date(value)
    if parsed is None:
        return str(value)
    return f'{parsed:%b} {parsed.day}, {parsed.year}'


def _to_date(value):
    if isinstance(value, (datetime, date)):
        return value
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text.replace('Z', '+00:00'))
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None


def activity_icon(activity_type):
    return ACTIVITY_ICONS.get(activity_type, 'fa-bell')


def parse_int(value):
    """Leading-integer coercion for form input; None when there is no number."""
    match = _LEADING_INT.match(str(value)) if value is not None else None
    return int(match.group(1)) if match else None


def parse_float(value):
    match = _LEADING_FLOAT.match(str(value)) if value is not None else None
    if not match:
        return None
    number = float(match.group(1))
    return number if math.isfinite(number) else None


def or_dash(value):
    if value is None or (isinstance(value, str) and not value.strip()):
        return '-'
    return value
