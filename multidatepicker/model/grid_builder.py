"""Builds the 42-cell day grid and title for a month."""
from datetime import date
from typing import List, Optional, Tuple

from .choices import DateSelectionChoices
from .day_of_month import DayOfMonth
from ..utils.date_utils import (
    to_date, is_same_day, first_of_month, days_in_month, weekday_ordinal,
    is_weekend, month_title,
)

# 7 columns x 6 weeks, enough for any month and any first weekday.
GRID_SIZE = 42

def is_eligible(target_date: Optional[date],
                include_days: DateSelectionChoices = DateSelectionChoices.ALL_DAYS,
                min_date: Optional[date] = None,
                max_date: Optional[date] = None) -> bool:
    """Decide whether a day may be selected.
    
    Bounds take precedence: when min_date or max_date is given the
    weekday/weekend choice is not consulted at all. Both bounds are
    inclusive.
    
    Args:
        target_date: Day to check; None (a blank cell) is never eligible
        include_days: Weekday/weekend restriction
        min_date: Earliest selectable day (optional)
        max_date: Latest selectable day (optional)
        
    Returns:
        True if the day is selectable
    """
    target_date = to_date(target_date)
    if target_date is None:
        return False
    min_date, max_date = to_date(min_date), to_date(max_date)
    
    if min_date is not None and max_date is not None:
        return min_date <= target_date <= max_date
    elif min_date is not None:
        return target_date >= min_date
    elif max_date is not None:
        return target_date <= max_date
    
    if include_days == DateSelectionChoices.WEEKENDS_ONLY:
        return is_weekend(target_date)
    elif include_days == DateSelectionChoices.WEEKDAYS_ONLY:
        return not is_weekend(target_date)
    return True

def build_days(reference_date: date,
               today: Optional[date] = None,
               include_days: DateSelectionChoices = DateSelectionChoices.ALL_DAYS,
               min_date: Optional[date] = None,
               max_date: Optional[date] = None,
               first_weekday: int = 0) -> Tuple[List[DayOfMonth], str]:
    """Build the grid for the month containing reference_date.
    
    Leading blank cells fill the columns before the 1st, then every day of
    the month follows, then trailing blanks pad the grid to 42 cells.
    The result depends only on the arguments, so rebuilding is always safe.
    
    Args:
        reference_date: Any date in the month to show
        today: The current day, used to flag is_today (defaults to date.today())
        include_days: Weekday/weekend restriction
        min_date: Earliest selectable day (optional)
        max_date: Latest selectable day (optional)
        first_weekday: Weekday in column 0 (0=Monday, 6=Sunday)
        
    Returns:
        Tuple of (list of 42 DayOfMonth, "Month Year" title)
    """
    first = first_of_month(to_date(reference_date))
    today = to_date(today) or date.today()
    num_days = days_in_month(first.year, first.month)
    ordinal = weekday_ordinal(first, first_weekday)
    
    days = []
    for _ in range(ordinal - 1):
        days.append(DayOfMonth(index=len(days)))
    
    for day in range(1, num_days + 1):
        real_date = first.replace(day=day)
        days.append(DayOfMonth(
            index=len(days),
            day=day,
            date=real_date,
            is_selectable=is_eligible(real_date, include_days, min_date, max_date),
            is_today=is_same_day(today, real_date),
        ))
    
    remainder = GRID_SIZE - len(days)
    assert remainder >= 0, f"{len(days)} cells for {first:%Y-%m} exceed the {GRID_SIZE}-cell grid"
    for _ in range(remainder):
        days.append(DayOfMonth(index=len(days)))
    
    return days, month_title(first.year, first.month)
