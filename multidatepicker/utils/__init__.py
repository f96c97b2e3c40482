"""Utility modules for multidatepicker."""

from .date_utils import (
    to_date, is_same_day, first_of_month, days_in_month, add_months,
    weekday_ordinal, is_weekend, month_title, short_day_names, month_choices,
    year_choices, parse_date, parse_month_year, day_str
)
from .format_utils import format_day_cell, format_date_value, percent
from .file_utils import write_report_csv, markdown_heading, write_markdown

__all__ = [
    'to_date', 'is_same_day', 'first_of_month', 'days_in_month', 'add_months',
    'weekday_ordinal', 'is_weekend', 'month_title', 'short_day_names', 'month_choices',
    'year_choices', 'parse_date', 'parse_month_year', 'day_str',
    'format_day_cell', 'format_date_value', 'percent',
    'write_report_csv', 'markdown_heading', 'write_markdown'
]
