"""Date utility functions for multidatepicker."""
from datetime import datetime, date
from typing import List, Optional
import calendar

# Years offered by the month/year jump picker.
MIN_YEAR = 1970
MAX_YEAR = 2099

def to_date(value) -> Optional[date]:
    """Reduce a date or datetime to its calendar day.
    
    Args:
        value: date, datetime or None
        
    Returns:
        The calendar date, or None if value is None
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    return value

def is_same_day(date1, date2) -> bool:
    """Compare two dates on year, month and day only.
    
    Args:
        date1: First date (date, datetime or None)
        date2: Second date (date, datetime or None)
        
    Returns:
        True if both are present and fall on the same calendar day
    """
    d1, d2 = to_date(date1), to_date(date2)
    if d1 is None or d2 is None:
        return False
    return (d1.year, d1.month, d1.day) == (d2.year, d2.month, d2.day)

def first_of_month(target_date: date) -> date:
    """Return the first day of the month containing target_date."""
    return date(target_date.year, target_date.month, 1)

def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""
    return calendar.monthrange(year, month)[1]

def add_months(target_date: date, months: int) -> date:
    """Move a date by whole calendar months.
    
    The day of month is kept where it exists in the target month and
    clamped to the last day otherwise (Jan 31 + 1 month -> Feb 28/29).
    
    Args:
        target_date: Date to move
        months: Number of months, may be negative
        
    Returns:
        The shifted date
    """
    index = target_date.year * 12 + (target_date.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(target_date.day, days_in_month(year, month))
    return date(year, month, day)

def weekday_ordinal(target_date: date, first_weekday: int = 0) -> int:
    """Position of target_date's weekday within the week, 1-based.
    
    Args:
        target_date: Date to inspect
        first_weekday: Weekday that starts the week (0=Monday, 6=Sunday)
        
    Returns:
        1 for the first weekday of the week through 7 for the last
    """
    return (target_date.weekday() - first_weekday) % 7 + 1

def is_weekend(target_date: date) -> bool:
    """True for Saturday and Sunday."""
    return target_date.weekday() >= 5

def month_title(year: int, month: int) -> str:
    """Localized "Month Year" title, e.g. "November 2020"."""
    return f"{calendar.month_name[month]} {year:04d}"

def short_day_names(first_weekday: int = 0) -> List[str]:
    """Localized abbreviated weekday names starting at first_weekday."""
    return [calendar.day_abbr[(first_weekday + i) % 7] for i in range(7)]

def month_choices() -> List[tuple]:
    """(month number, localized month name) pairs for the jump picker."""
    return [(m, calendar.month_name[m]) for m in range(1, 13)]

def year_choices() -> List[int]:
    """Years offered by the jump picker."""
    return list(range(MIN_YEAR, MAX_YEAR + 1))

def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD string.
    
    Raises:
        ValueError: If the string is not a valid date
    """
    return datetime.strptime(value.strip(), "%Y-%m-%d").date()

def parse_month_year(value: str) -> (int, int):
    """Parse an MM/YYYY string into (month, year).
    
    Raises:
        ValueError: If the string is malformed
    """
    month_str, sep, year_str = value.strip().partition("/")
    if not sep:
        raise ValueError(f"Expected MM/YYYY, got '{value}'")
    return int(month_str), int(year_str)

def day_str(dt: date) -> str:
    """Format a date as a string with day of week.
    
    Args:
        dt: Date to format
        
    Returns:
        Formatted date string
    """
    return f"({['Mo','Tue','Wed','Thu','Fri','Sat','Sun'][dt.weekday()]}){dt}"
