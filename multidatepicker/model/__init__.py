"""Calendar model modules for multidatepicker."""

from .choices import PickerType, DateSelectionChoices
from .day_of_month import DayOfMonth
from .grid_builder import build_days, is_eligible, GRID_SIZE
from .picker_model import PickerModel

__all__ = [
    'PickerType', 'DateSelectionChoices', 'DayOfMonth',
    'build_days', 'is_eligible', 'GRID_SIZE', 'PickerModel'
]
