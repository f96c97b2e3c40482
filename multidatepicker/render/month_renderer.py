"""MonthRenderer class for drawing a PickerModel as text tables."""
from typing import List, Optional
from tabulate import tabulate
from io import StringIO

from ..model.picker_model import PickerModel
from ..utils.date_utils import day_str
from ..utils.format_utils import format_day_cell, format_date_value, percent
from ..utils.file_utils import write_report_csv

class MonthRenderer:
    """Renders the month grid and the selection of a PickerModel.
    
    The renderer is a plain host: it only reads ``days``, ``title``,
    ``day_names`` and ``is_selected()`` from the model.
    """
    
    def __init__(self, model: PickerModel):
        """Initialize a MonthRenderer.
        
        Args:
            model: The picker model to draw
        """
        self.model = model
    
    def month_rows(self) -> List[List[str]]:
        """Return the grid as 6 rows of 7 formatted cells."""
        cells = [
            format_day_cell(dom.day, self.model.is_selected(dom), dom.is_selectable, dom.is_today)
            for dom in self.model.days
        ]
        return [cells[i:i + 7] for i in range(0, len(cells), 7)]
    
    def generate_report(self, csv_prefix: Optional[str] = None) -> str:
        """Generate the month and selection tables.
        
        Args:
            csv_prefix: Prefix for CSV files (optional)
            
        Returns:
            Report as a string
        """
        output = StringIO()
        self._generate_month_table(output, csv_prefix)
        self._generate_selection_table(output, csv_prefix)
        self._generate_totals_table(output, csv_prefix)
        return output.getvalue()
    
    def _generate_month_table(self, output: StringIO, csv_prefix: Optional[str] = None):
        """Generate the 6x7 month grid table.
        
        Args:
            output: StringIO to write to
            csv_prefix: Prefix for CSV files (optional)
        """
        headers = self.model.day_names
        rows = self.month_rows()
        print(f"\n### {self.model.title}:\n", file=output)
        print(tabulate(rows, headers=headers, tablefmt="github"), file=output)
        print("\n`[d]` selected, `(d)` not selectable, `d*` today", file=output)
        
        if csv_prefix:
            write_report_csv(csv_prefix, "month", headers, rows)
    
    def _generate_selection_table(self, output: StringIO, csv_prefix: Optional[str] = None):
        """Generate the table of selected dates.
        
        Args:
            output: StringIO to write to
            csv_prefix: Prefix for CSV files (optional)
        """
        selected = self.model.selections
        if not selected:
            return
        
        table = [[i + 1, day_str(d), "✓" if d.month == self.model.reference_date.month
                  and d.year == self.model.reference_date.year else ""]
                 for i, d in enumerate(selected)]
        headers = ["#", "Date", "In view"]
        print("\n### Selection:\n", file=output)
        print(tabulate(table, headers=headers, tablefmt="github"), file=output)
        
        if csv_prefix:
            write_report_csv(csv_prefix, "selection", headers, table)
    
    def _generate_totals_table(self, output: StringIO, csv_prefix: Optional[str] = None):
        """Generate the totals table.
        
        Args:
            output: StringIO to write to
            csv_prefix: Prefix for CSV files (optional)
        """
        selectable = sum(1 for dom in self.model.days if dom.is_selectable)
        in_view = sum(1 for dom in self.model.days if self.model.is_selected(dom))
        
        headers = ["Picker", "Value", "Selected in view", "Selectable", "%Selected of selectable"]
        table = [[
            self.model.picker_type.value,
            format_date_value(self.model.value),
            in_view,
            f"{selectable}/{self.model.num_days}",
            percent(in_view, selectable),
        ]]
        print(f"\n### Totals {self.model.title}:\n", file=output)
        print(tabulate(table, headers=headers, tablefmt="github"), file=output)
        
        if csv_prefix:
            write_report_csv(csv_prefix, "totals", headers, table)
