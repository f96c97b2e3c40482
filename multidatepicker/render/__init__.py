"""Text rendering modules for multidatepicker."""

from .month_renderer import MonthRenderer

__all__ = ['MonthRenderer']
