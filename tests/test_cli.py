import sys
import os
import unittest
import tempfile
from unittest.mock import patch
from datetime import date
from io import StringIO

# Add the parent directory to sys.path to import the multidatepicker package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from multidatepicker.__main__ import picker_interface, main
from multidatepicker.model.choices import PickerType, DateSelectionChoices

def _no_env(key, default=None):
    """Mock implementation of get_env_var ignoring the real environment."""
    return default

@patch('multidatepicker.__main__.get_env_var', side_effect=_no_env)
@patch('sys.stdout', new_callable=StringIO)
class TestPickerInterface(unittest.TestCase):
    """Test the CLI flows."""
    
    def test_single_mode(self, mock_stdout, mock_env):
        model = picker_interface("single", "2020-11-03", week_start=6)
        output = mock_stdout.getvalue()
        self.assertEqual(model.picker_type, PickerType.SINGLE_DAY)
        self.assertEqual(model.value, date(2020, 11, 3))
        self.assertIn("📅", output)
        self.assertIn("[3]", output)
    
    def test_any_mode_toggles(self, mock_stdout, mock_env):
        model = picker_interface("any", select=["2020-11-03", "2020-11-04", "2020-11-04"])
        output = mock_stdout.getvalue()
        self.assertEqual(model.selections, [date(2020, 11, 3)])
        self.assertIn("[INFO] Selection is now: 2020-11-03, 2020-11-04", output)
        self.assertIn("[INFO] Selection is now: 2020-11-03\n", output)
    
    def test_range_mode_with_bounds(self, mock_stdout, mock_env):
        model = picker_interface("range", select=["2020-11-20", "2020-11-09", "2020-11-30"],
                                 min_str="2020-11-02", max_str="2020-11-27")
        output = mock_stdout.getvalue()
        self.assertEqual(model.value, (date(2020, 11, 9), date(2020, 11, 20)))
        self.assertIn("[WARN] (Mo)2020-11-30 is not selectable. Ignored.", output)
        self.assertIn("[INFO] Selection is now: none", output)
        self.assertIn("2020-11-09 → 2020-11-20", output)
    
    def test_navigation(self, mock_stdout, mock_env):
        model = picker_interface("single", "2020-11-03", show_str="03/2021", next_months=1)
        self.assertEqual(model.reference_date, date(2021, 4, 1))
        model = picker_interface("single", "2021-01-31", prev_months=2)
        self.assertEqual(model.reference_date, date(2020, 11, 30))
    
    def test_reference_returns_to_start(self, mock_stdout, mock_env):
        model = picker_interface("any", "2020-11-03", select=["2020-12-24"])
        self.assertEqual(model.reference_date, date(2020, 11, 3))
        self.assertEqual(model.selections, [date(2020, 12, 24)])
    
    def test_invalid_dates_exit(self, mock_stdout, mock_env):
        test_cases = [
            dict(start_str="2020-13-01"),
            dict(select=["tomorrow"]),
            dict(min_str="2020/11/01"),
            dict(show_str="2021-03"),
        ]
        for kwargs in test_cases:
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(SystemExit) as ctx:
                    picker_interface("single", **kwargs)
                self.assertEqual(ctx.exception.code, 1)
        self.assertIn("[ERROR]", mock_stdout.getvalue())
    
    def test_markdown_export(self, mock_stdout, mock_env):
        with tempfile.TemporaryDirectory() as tmp:
            md_path = os.path.join(tmp, "calendar.md")
            model = picker_interface("single", "2020-11-03", md_path=md_path)
            with open(md_path, encoding='utf-8') as f:
                content = f.read()
        self.assertTrue(content.startswith(f"# {model.title} (single picker)"))
        self.assertIn("Selection: 2020-11-03", content)
        self.assertIn("[3]", content)
        self.assertIn("[SUCCESS] Markdown output written to", mock_stdout.getvalue())

@patch('sys.stdout', new_callable=StringIO)
class TestEnvironment(unittest.TestCase):
    """Test defaults read from the environment."""
    
    @patch.dict('os.environ', {'MDP_INCLUDE_DAYS': 'weekends', 'MDP_WEEK_START': '6',
                               'MDP_MIN_DATE': '', 'MDP_MAX_DATE': ''})
    def test_env_defaults(self, mock_stdout):
        model = picker_interface("any", "2020-11-01")
        self.assertEqual(model.include_days, DateSelectionChoices.WEEKENDS_ONLY)
        self.assertEqual(model.first_weekday, 6)
        self.assertTrue(model.day_of_month(1).is_selectable)
        self.assertFalse(model.day_of_month(2).is_selectable)
    
    @patch.dict('os.environ', {'MDP_INCLUDE_DAYS': 'sometimes'})
    def test_invalid_env_exits(self, mock_stdout):
        with self.assertRaises(SystemExit) as ctx:
            picker_interface("any")
        self.assertEqual(ctx.exception.code, 1)
    
    @patch('multidatepicker.__main__.load_environment')
    @patch.dict('os.environ', {'MDP_INCLUDE_DAYS': '', 'MDP_WEEK_START': '',
                               'MDP_MIN_DATE': '', 'MDP_MAX_DATE': ''})
    def test_main(self, mock_load_env, mock_stdout):
        main(["--mode", "range", "--start", "2020-11-01", "--select", "2020-11-02", "2020-11-05",
              "--weekstart", "0"])
        mock_load_env.assert_called_once()
        output = mock_stdout.getvalue()
        self.assertIn("2020-11-02 → 2020-11-05", output)
        self.assertIn("[5]", output)

if __name__ == '__main__':
    unittest.main()
