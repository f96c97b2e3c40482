"""Main module for the multidatepicker package."""
import os
import sys
import argparse
from datetime import date
from typing import List, Optional
from dotenv import load_dotenv

from .model.choices import PickerType, DateSelectionChoices
from .model.picker_model import PickerModel
from .render.month_renderer import MonthRenderer
from .utils.date_utils import parse_date, parse_month_year, day_str
from .utils.format_utils import format_date_value
from .utils.file_utils import write_markdown

# --- Environment Setup ---
def load_environment():
    """Load defaults from the multidatepicker.env file if there is one."""
    env_file = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'multidatepicker.env')
    if os.path.exists(env_file):
        load_dotenv(env_file)

def get_env_var(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get an environment variable, falling back to a default.
    
    Args:
        key: Environment variable name
        default: Value used when the variable is unset or empty
        
    Returns:
        Environment variable value or default
    """
    return os.getenv(key) or default

def parse_date_arg(value: Optional[str], name: str) -> Optional[date]:
    """Parse a YYYY-MM-DD option value or exit.
    
    Args:
        value: Option value (may be None)
        name: Option name used in the error message
        
    Returns:
        Parsed date, or None if value is empty
        
    Raises:
        SystemExit: If the value is not a valid date
    """
    if not value:
        return None
    try:
        return parse_date(value)
    except ValueError:
        print(f"[ERROR] Invalid {name} '{value}', expected YYYY-MM-DD.")
        sys.exit(1)

# --- CLI Logic ---
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.
    
    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Show a month calendar and select a single day, any days, or a date range.",
        epilog="""
Examples:
    # Show the month of 2020-11-03 with that day selected
  multidatepicker --mode single --start 2020-11-03
    ---
    # Toggle three weekdays, the second tap on 2020-11-04 removes it again
  multidatepicker --mode any --include weekdays --select 2020-11-03 2020-11-04 2020-11-05 2020-11-04
    ---
    # Select a range limited by min/max and export the tables to CSV files with prefix 'nov'
  multidatepicker --mode range --min 2020-11-02 --max 2020-11-27 --select 2020-11-20 2020-11-09 --csv nov
    ---
    # Jump to March 2021 and move one month ahead
  multidatepicker --show 03/2021 --next 1

""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="multidatepicker"
    )
    parser.add_argument('--mode', choices=[t.value for t in PickerType], default=PickerType.SINGLE_DAY.value, help='Picker type: single (default), any (toggle days), range (closed date range)')
    parser.add_argument('--start', help='Reference date (YYYY-MM-DD); the initial day for single mode')
    parser.add_argument('--select', nargs='*', default=[], metavar='DATE', help='Dates to tap, in order (YYYY-MM-DD)')
    parser.add_argument('--include', choices=[c.value for c in DateSelectionChoices], default=None, help='Selectable days when no min/max is given (default: all)')
    parser.add_argument('--min', dest='min_date', help='Earliest selectable date (YYYY-MM-DD)')
    parser.add_argument('--max', dest='max_date', help='Latest selectable date (YYYY-MM-DD)')
    parser.add_argument('--next', type=int, default=0, help='Move the view this many months ahead')
    parser.add_argument('--prev', type=int, default=0, help='Move the view this many months back')
    parser.add_argument('--show', help='Jump to a month (MM/YYYY) before moving with --next/--prev')
    parser.add_argument('--weekstart', type=int, choices=range(0, 7), default=None, help='First column of the week: 0=Mon, 6=Sun (default: MDP_WEEK_START or the calendar module setting)')
    parser.add_argument('--csv', help='Export tables to CSV (provide filename prefix)')
    parser.add_argument('--md', help='Export output as markdown to the given file path')
    parser.add_argument('--overwrite', action='store_true', help='Explicitly overwrite the markdown file if it exists (DANGEROUS)')
    return parser.parse_args(argv)

def create_model(mode: str, start_date: Optional[date], include_days: DateSelectionChoices,
                 min_date: Optional[date], max_date: Optional[date],
                 week_start: Optional[int]) -> PickerModel:
    """Create a picker model whose binding reports each committed value.
    
    Args:
        mode: Picker type value (single, any, range)
        start_date: Reference date, and the initial day for single mode
        include_days: Weekday/weekend restriction
        min_date: Earliest selectable day (optional)
        max_date: Latest selectable day (optional)
        week_start: First weekday of the grid (optional)
        
    Returns:
        The new PickerModel
    """
    def binding(value):
        print(f"[INFO] Selection is now: {format_date_value(value)}")
    
    picker_type = PickerType(mode)
    options = dict(include_days=include_days, min_date=min_date, max_date=max_date,
                   binding=binding, first_weekday=week_start)
    if picker_type == PickerType.SINGLE_DAY:
        return PickerModel.for_single_day(start_date, **options)
    elif picker_type == PickerType.ANY_DAYS:
        model = PickerModel.for_any_days([], **options)
    else:
        model = PickerModel.for_date_range(None, **options)
    if start_date:
        model.reference_date = start_date
    return model

def tap_dates(model: PickerModel, dates: List[date]) -> None:
    """Tap each date in turn, showing its month first like a user would.
    
    Args:
        model: Picker model
        dates: Dates to tap, in order
    """
    for d in dates:
        model.reference_date = d
        dom = model.day_of_month(d.day)
        if dom is None or not model.select_day(dom):
            print(f"[WARN] {day_str(d)} is not selectable. Ignored.")

def picker_interface(mode: str = "single", start_str: Optional[str] = None, select: Optional[List[str]] = None,
                     include: Optional[str] = None, min_str: Optional[str] = None, max_str: Optional[str] = None,
                     next_months: int = 0, prev_months: int = 0, show_str: Optional[str] = None,
                     week_start: Optional[int] = None, csv_prefix: Optional[str] = None,
                     md_path: Optional[str] = None, overwrite: bool = False) -> PickerModel:
    """Main interface: build a model, apply taps and navigation, print the month.
    
    Options left unset fall back to the MDP_* environment variables.
    
    Args:
        mode: Picker type (single, any, range)
        start_str: Reference date string (YYYY-MM-DD)
        select: Date strings to tap (YYYY-MM-DD)
        include: Selectable days (all, weekdays, weekends)
        min_str: Earliest selectable date string
        max_str: Latest selectable date string
        next_months: Months to move ahead after tapping
        prev_months: Months to move back after tapping
        show_str: Month to jump to (MM/YYYY)
        week_start: First weekday of the grid (0=Monday, 6=Sunday)
        csv_prefix: Prefix for CSV files
        md_path: Path to export markdown
        overwrite: Whether to overwrite existing markdown file
        
    Returns:
        The PickerModel after all operations
    """
    include = include or get_env_var("MDP_INCLUDE_DAYS", DateSelectionChoices.ALL_DAYS.value)
    try:
        include_days = DateSelectionChoices(include)
    except ValueError:
        print(f"[ERROR] Invalid MDP_INCLUDE_DAYS '{include}', expected one of: all, weekdays, weekends.")
        sys.exit(1)
    
    if week_start is None:
        env_week_start = get_env_var("MDP_WEEK_START")
        if env_week_start is not None:
            try:
                week_start = int(env_week_start) % 7
            except ValueError:
                print(f"[ERROR] Invalid MDP_WEEK_START '{env_week_start}', expected 0-6.")
                sys.exit(1)
    
    start_date = parse_date_arg(start_str, "start date")
    min_date = parse_date_arg(min_str or get_env_var("MDP_MIN_DATE"), "min date")
    max_date = parse_date_arg(max_str or get_env_var("MDP_MAX_DATE"), "max date")
    taps = [parse_date_arg(s, "selection date") for s in (select or [])]
    
    if min_date and max_date and min_date > max_date:
        print(f"[WARN] Min date {min_date} is after max date {max_date}; no day will be selectable.")
    
    model = create_model(mode, start_date, include_days, min_date, max_date, week_start)
    tap_dates(model, taps)
    
    if show_str:
        try:
            month, year = parse_month_year(show_str)
        except ValueError:
            print(f"[ERROR] Invalid month '{show_str}', expected MM/YYYY.")
            sys.exit(1)
        model.show(month, year)
    elif taps and start_date:
        model.reference_date = start_date
    
    for _ in range(max(next_months, 0)):
        model.incr_month()
    for _ in range(max(prev_months, 0)):
        model.decr_month()
    
    print(f"📅 {model.title}")
    
    renderer = MonthRenderer(model)
    report = renderer.generate_report(csv_prefix)
    
    if md_path:
        write_markdown(md_path, report, model, overwrite)
        print(f"[SUCCESS] Markdown output written to '{md_path}'")
    else:
        print(report)
    return model

def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    # Load environment variables
    load_environment()
    
    # Parse command line arguments
    args = parse_args(argv)
    
    picker_interface(
        args.mode, args.start, args.select, args.include, args.min_date, args.max_date,
        args.next, args.prev, args.show, args.weekstart, args.csv, args.md, args.overwrite
    )

if __name__ == "__main__":
    main()
