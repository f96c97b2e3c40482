"""Picker type and day-eligibility choices."""
from enum import Enum

class PickerType(Enum):
    """How taps change the selection. Fixed when the model is created."""
    SINGLE_DAY = "single"
    ANY_DAYS = "any"
    DATE_RANGE = "range"

class DateSelectionChoices(Enum):
    """Which days may be selected when no min/max bound is given."""
    ALL_DAYS = "all"
    WEEKDAYS_ONLY = "weekdays"
    WEEKENDS_ONLY = "weekends"
