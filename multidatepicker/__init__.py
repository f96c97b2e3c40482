"""
multidatepicker: the calendar model behind a multi-date picker widget.

- Builds the 42-cell grid for any month, with eligibility and today flags
- Selects a single day, any number of days, or a closed date range
- Limits selection to weekdays, weekends, or a min/max window
- Ships a CLI (via `python -m multidatepicker` or `multidatepicker` if installed)
  that renders the month as a table and exports to CSV and Markdown
"""

from .model import PickerModel, PickerType, DateSelectionChoices, DayOfMonth, build_days

__version__ = "0.1.0"
