import sys
import os
import csv
import unittest
import tempfile
from datetime import date

# Add the parent directory to sys.path to import the multidatepicker package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from multidatepicker.model.choices import DateSelectionChoices
from multidatepicker.model.picker_model import PickerModel
from multidatepicker.render.month_renderer import MonthRenderer

class TestMonthRenderer(unittest.TestCase):
    """Test the text rendering of a picker model."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.model = PickerModel.for_any_days([], DateSelectionChoices.WEEKDAYS_ONLY,
                                              first_weekday=6, today=date(2020, 11, 25))
        self.model.select_day(self.model.day_of_month(3))
        self.model.select_day(self.model.day_of_month(4))
        self.renderer = MonthRenderer(self.model)
    
    def test_month_rows(self):
        """The grid is drawn as 6 weeks of 7 cells."""
        rows = self.renderer.month_rows()
        self.assertEqual(len(rows), 6)
        self.assertTrue(all(len(row) == 7 for row in rows))
        self.assertEqual(rows[0], ["(1)", "2", "[3]", "[4]", "5", "6", "(7)"])
        self.assertIn("25*", rows[3])
        self.assertEqual(rows[5], [""] * 7)
    
    def test_generate_report(self):
        output = self.renderer.generate_report()
        self.assertIn(f"### {self.model.title}:", output)
        self.assertIn("[3]", output)
        self.assertIn("(7)", output)
        self.assertIn("### Selection:", output)
        self.assertIn("(Tue)2020-11-03", output)
        self.assertIn("### Totals", output)
        self.assertIn("2020-11-03, 2020-11-04", output)
        self.assertIn("21/30", output)
    
    def test_no_selection_table_when_empty(self):
        model = PickerModel.for_date_range(None, today=date(2020, 11, 25))
        output = MonthRenderer(model).generate_report()
        self.assertNotIn("### Selection:", output)
        self.assertIn("none", output)
    
    def test_csv_export(self):
        with tempfile.TemporaryDirectory() as tmp:
            prefix = os.path.join(tmp, "nov")
            self.renderer.generate_report(csv_prefix=prefix)
            for suffix in ("month", "selection", "totals"):
                self.assertTrue(os.path.exists(f"{prefix}_{suffix}.csv"))
            with open(f"{prefix}_month.csv", newline='', encoding='utf-8') as f:
                rows = list(csv.reader(f))
            self.assertEqual(rows[0], self.model.day_names)
            self.assertEqual(len(rows), 7)
            with open(f"{prefix}_selection.csv", newline='', encoding='utf-8') as f:
                selection = list(csv.reader(f))
            self.assertEqual(selection[1], ["1", "(Tue)2020-11-03", "✓"])
    
    def test_totals_header(self):
        output = self.renderer.generate_report()
        self.assertIn("%Selected of selectable", output)
        self.assertIn("| any ", output)

if __name__ == '__main__':
    unittest.main()
