"""PickerModel: the state behind a multi-date picker.

The model owns the grid of the month being shown, the selected dates and
the eligibility configuration. A host reads ``days``, ``title`` and
``is_selected()`` to draw each cell and calls ``select_day()`` when a cell
is tapped. Which constructor is used decides the picker type for the
lifetime of the model:

- ``for_single_day``: exactly one date is always selected; a tap replaces it.
- ``for_any_days``: a tap toggles a date; the selection is kept sorted.
- ``for_date_range``: the first tap starts a range, the second closes it,
  a third starts a new one.

Committed selections are pushed to the ``binding`` callback as the
external value (a date, a sorted list of dates, or a ``(lower, upper)``
tuple / ``None``). Observers registered with ``add_observer`` are called
with the model after every change, including month navigation.
"""
from datetime import date
from typing import Callable, List, Optional, Tuple
import calendar

from .choices import PickerType, DateSelectionChoices
from .day_of_month import DayOfMonth
from .grid_builder import build_days
from ..utils.date_utils import to_date, is_same_day, add_months, short_day_names, MIN_YEAR, MAX_YEAR

class PickerModel:
    """Grid and selection state for one picker instance."""
    
    def __init__(self, picker_type: PickerType, selections: List[date],
                 reference_date: Optional[date] = None,
                 include_days: DateSelectionChoices = DateSelectionChoices.ALL_DAYS,
                 min_date: Optional[date] = None, max_date: Optional[date] = None,
                 binding: Optional[Callable] = None, first_weekday: Optional[int] = None,
                 today: Optional[date] = None):
        """Initialize a PickerModel. Prefer the for_* constructors.
        
        Args:
            picker_type: Selection behaviour, fixed for the model's lifetime
            selections: Initially selected dates
            reference_date: Date whose month is shown (defaults to today)
            include_days: Weekday/weekend restriction
            min_date: Earliest selectable day (optional)
            max_date: Latest selectable day (optional)
            binding: Called with the external value after each selection
            first_weekday: Weekday in grid column 0 (0=Monday, 6=Sunday);
                defaults to calendar.firstweekday()
            today: Fixed "today" for the is_today flag (defaults to the real date)
        """
        self._picker_type = picker_type
        self._include_days = include_days
        self._min_date = to_date(min_date)
        self._max_date = to_date(max_date)
        self._binding = binding
        self._first_weekday = calendar.firstweekday() if first_weekday is None else first_weekday % 7
        self._today = to_date(today)
        self._observers = []
        
        self.selections = [to_date(d) for d in selections if d is not None]
        self.days: List[DayOfMonth] = []
        self.title = ""
        self.num_days = 0
        self._reference_date = to_date(reference_date) or self.today
        self._build_days()
    
    # --- Construction ---
    @classmethod
    def for_single_day(cls, single_day: Optional[date],
                       include_days: DateSelectionChoices = DateSelectionChoices.ALL_DAYS,
                       min_date: Optional[date] = None, max_date: Optional[date] = None,
                       binding: Optional[Callable] = None, **kwargs) -> "PickerModel":
        """Create a model where exactly one day is selected.
        
        A missing single_day falls back to today.
        """
        single_day = to_date(single_day) or to_date(kwargs.get("today")) or date.today()
        return cls(PickerType.SINGLE_DAY, [single_day], single_day,
                   include_days, min_date, max_date, binding, **kwargs)
    
    @classmethod
    def for_any_days(cls, any_days: Optional[List[date]],
                     include_days: DateSelectionChoices = DateSelectionChoices.ALL_DAYS,
                     min_date: Optional[date] = None, max_date: Optional[date] = None,
                     binding: Optional[Callable] = None, **kwargs) -> "PickerModel":
        """Create a model where any number of days can be toggled.
        
        The initial list is taken in the caller's order; the month of its
        first entry is shown, or today's month if it is empty.
        """
        any_days = list(any_days or [])
        reference = any_days[0] if any_days else None
        return cls(PickerType.ANY_DAYS, any_days, reference,
                   include_days, min_date, max_date, binding, **kwargs)
    
    @classmethod
    def for_date_range(cls, date_range: Optional[Tuple[date, date]],
                       include_days: DateSelectionChoices = DateSelectionChoices.ALL_DAYS,
                       min_date: Optional[date] = None, max_date: Optional[date] = None,
                       binding: Optional[Callable] = None, **kwargs) -> "PickerModel":
        """Create a model that selects a closed range of days.
        
        Args:
            date_range: (lower, upper) tuple or None for no range yet
        """
        selections = []
        reference = None
        if date_range is not None:
            selections = sorted(to_date(d) for d in date_range)
            reference = selections[0]
        return cls(PickerType.DATE_RANGE, selections, reference,
                   include_days, min_date, max_date, binding, **kwargs)
    
    # --- Properties ---
    @property
    def picker_type(self) -> PickerType:
        return self._picker_type
    
    @property
    def include_days(self) -> DateSelectionChoices:
        return self._include_days
    
    @property
    def min_date(self) -> Optional[date]:
        return self._min_date
    
    @property
    def max_date(self) -> Optional[date]:
        return self._max_date
    
    @property
    def first_weekday(self) -> int:
        return self._first_weekday
    
    @property
    def today(self) -> date:
        return self._today or date.today()
    
    @property
    def day_names(self) -> List[str]:
        """Localized short weekday names in grid column order."""
        return short_day_names(self._first_weekday)
    
    @property
    def reference_date(self) -> date:
        """The date whose month is shown. Setting it rebuilds the grid."""
        return self._reference_date
    
    @reference_date.setter
    def reference_date(self, value: Optional[date]):
        self._reference_date = to_date(value) or self.today
        self._build_days()
    
    @property
    def value(self):
        """The external selection value as pushed to the binding.
        
        Returns:
            A date for single-day pickers, a sorted list for any-days
            pickers, and a (lower, upper) tuple or None for range pickers
        """
        if self._picker_type == PickerType.SINGLE_DAY:
            return self.selections[0] if self.selections else None
        if self._picker_type == PickerType.ANY_DAYS:
            return list(self.selections)
        if len(self.selections) == 2:
            return (self.selections[0], self.selections[1])
        return None
    
    # --- Observers ---
    def add_observer(self, callback: Callable) -> None:
        """Register a callback invoked with the model after every change."""
        if callback not in self._observers:
            self._observers.append(callback)
    
    def remove_observer(self, callback: Callable) -> None:
        if callback in self._observers:
            self._observers.remove(callback)
    
    def _notify(self) -> None:
        for callback in list(self._observers):
            callback(self)
    
    # --- Queries ---
    def day_of_month(self, by_day: int) -> Optional[DayOfMonth]:
        """Return the cell showing the given day of month, if any.
        
        Args:
            by_day: Day of month (1..31)
            
        Returns:
            The matching DayOfMonth, or None if the day is out of range or
            not part of the month shown
        """
        if not 1 <= by_day <= 31:
            return None
        for dom in self.days:
            if dom.day == by_day:
                return dom
        return None
    
    def is_selected(self, day: DayOfMonth) -> bool:
        """Whether a cell should be drawn as selected.
        
        Cells that are blank or not selectable are never selected. For
        range pickers every day between the two ends is selected.
        """
        if day.is_blank or day.date is None or not day.is_selectable:
            return False
        
        if self._picker_type in (PickerType.SINGLE_DAY, PickerType.ANY_DAYS):
            return any(is_same_day(test, day.date) for test in self.selections)
        
        if len(self.selections) == 0:
            return False
        elif len(self.selections) == 1:
            return is_same_day(self.selections[0], day.date)
        return self.selections[0] <= to_date(day.date) <= self.selections[1]
    
    # --- Mutations ---
    def select_day(self, day: DayOfMonth) -> bool:
        """Apply a tap on a cell.
        
        Taps on blank or non-selectable cells are ignored.
        
        Args:
            day: The tapped cell
            
        Returns:
            True if the selection changed and the binding was notified
        """
        if day.is_blank or day.date is None or not day.is_selectable:
            return False
        tapped = to_date(day.date)
        
        if self._picker_type == PickerType.SINGLE_DAY:
            self.selections = [tapped]
        
        elif self._picker_type == PickerType.ANY_DAYS:
            pos = next((i for i, d in enumerate(self.selections) if is_same_day(d, tapped)), None)
            if pos is not None:
                self.selections.pop(pos)
            else:
                self.selections.append(tapped)
            self.selections.sort()
        
        else:
            # a tap after a complete (or empty) range starts a new one
            if len(self.selections) != 1:
                self.selections = [tapped]
            else:
                self.selections.append(tapped)
            self.selections.sort()
        
        if self._binding is not None:
            self._binding(self.value)
        self._notify()
        return True
    
    def incr_month(self) -> None:
        """Show the next month, keeping the day of month where it exists."""
        self._move_months(1)
    
    def decr_month(self) -> None:
        """Show the previous month, keeping the day of month where it exists."""
        self._move_months(-1)
    
    def _move_months(self, months: int) -> None:
        # no month exists past date.max or before date.min; stay put
        try:
            new_date = add_months(self._reference_date, months)
        except (ValueError, OverflowError):
            return
        self.reference_date = new_date
    
    def show(self, month: int, year: int) -> None:
        """Jump to the first day of the given month and year.
        
        Months outside 1..12 and years outside the picker's range are ignored.
        """
        if not 1 <= month <= 12 or not MIN_YEAR <= year <= MAX_YEAR:
            return
        self.reference_date = date(year, month, 1)
    
    # --- Grid ---
    def _build_days(self) -> None:
        days, title = build_days(self._reference_date, self.today, self._include_days,
                                 self._min_date, self._max_date, self._first_weekday)
        self.days = days
        self.title = title
        self.num_days = sum(1 for d in days if not d.is_blank)
        self._notify()
