"""Formatting utility functions for multidatepicker."""
from datetime import date

def format_day_cell(day: int, selected: bool = False, selectable: bool = True, today: bool = False) -> str:
    """Format one grid cell for a text table.
    
    Args:
        day: Day of month, 0 for a blank cell
        selected: Cell is part of the selection
        selectable: Cell may be selected
        today: Cell is the current day
        
    Returns:
        e.g. "[15]" for selected, "(15)" for not selectable, "15*" for today,
        or "" for a blank cell
    """
    if not day:
        return ""
    text = str(day)
    if selected:
        text = f"[{text}]"
    elif not selectable:
        text = f"({text})"
    if today:
        text += "*"
    return text

def format_date_value(value) -> str:
    """Format an external selection value for display.
    
    Args:
        value: A date, a list of dates, a (lower, upper) tuple or None
        
    Returns:
        Human readable string
    """
    if value is None:
        return "none"
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, tuple):
        lower, upper = value
        return f"{lower.isoformat()} → {upper.isoformat()}"
    if not value:
        return "none"
    return ", ".join(d.isoformat() for d in value)

def percent(val: int, total: int) -> str:
    """Calculate percentage and format as string.
    
    Args:
        val: Value
        total: Total
        
    Returns:
        Formatted percentage string
    """
    return f"{(val / total * 100):.0f}" if total else "0"
