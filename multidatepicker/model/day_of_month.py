"""DayOfMonth class representing one cell of the 42-cell month grid."""
from datetime import date
from typing import Optional

class DayOfMonth:
    """One of the 42 positions (7 columns x 6 weeks) of a month grid.
    
    A day of 0 marks a blank filler cell that has no date and can never be
    selected. Otherwise day is the real day of the month and date the
    calendar date it stands for.
    """
    
    def __init__(self, index: int = 0, day: int = 0, date: Optional[date] = None,
                 is_selectable: bool = False, is_today: bool = False):
        """Initialize a DayOfMonth.
        
        Args:
            index: Position in the grid (0..41, row-major)
            day: Day of month (1..31), or 0 for a blank cell
            date: The calendar date, None for a blank cell
            is_selectable: Whether the eligibility rule allows selecting it
            is_today: Whether it is the current real-world day
        """
        self.index = index
        self.day = day
        self.date = date
        self.is_selectable = is_selectable
        self.is_today = is_today
    
    @property
    def is_blank(self) -> bool:
        """True for filler cells before the 1st and after the last day."""
        return self.day == 0
    
    def _key(self):
        return (self.index, self.day, self.date, self.is_selectable, self.is_today)
    
    def __eq__(self, other):
        if not isinstance(other, DayOfMonth):
            return NotImplemented
        return self._key() == other._key()
    
    def __hash__(self):
        return hash(self._key())
    
    def __repr__(self):
        return (f"DayOfMonth(index={self.index}, day={self.day}, date={self.date!r}, "
                f"is_selectable={self.is_selectable}, is_today={self.is_today})")
