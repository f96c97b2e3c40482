"""Export of rendered calendar reports to CSV and Markdown."""
import os
import csv
import sys
import markdown

from .format_utils import format_date_value

def write_report_csv(csv_prefix: str, section: str, headers: list, rows: list) -> str:
    """Write one report section to ``<csv_prefix>_<section>.csv``.
    
    The file is UTF-8 so check marks and range arrows survive.
    
    Args:
        csv_prefix: Path prefix shared by all sections of one report
        section: Section name (month, selection, totals)
        headers: Column headers, e.g. the model's day names
        rows: Table rows as rendered
        
    Returns:
        Path of the written file
    """
    path = f"{csv_prefix}_{section}.csv"
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(headers)
        writer.writerows(rows)
    return path

def markdown_heading(model) -> str:
    """Heading for a calendar export: month, picker type and current value."""
    return (f"# {model.title} ({model.picker_type.value} picker)\n\n"
            f"Selection: {format_date_value(model.value)}\n\n")

def write_markdown(md_path: str, report: str, model, overwrite: bool = False):
    """Write a rendered calendar report to a Markdown file.
    
    A new (or overwritten) file starts with a heading built from the model;
    an existing file gets the report appended. The written file must render
    at least one table.
    
    Args:
        md_path: Output file path
        report: Report produced by MonthRenderer
        model: PickerModel the report was rendered from
        overwrite: Whether to overwrite the file if it exists
    """
    file_exists = os.path.exists(md_path)
    if file_exists and not overwrite:
        mode = 'a'
        print(f"[INFO] File '{md_path}' exists. Appending {model.title}.")
    elif file_exists and overwrite:
        mode = 'w'
        print(f"[INFO] File '{md_path}' exists. Overwriting with {model.title}.")
    else:
        mode = 'w'
        print(f"[INFO] Creating '{md_path}' for {model.title}.")
    
    try:
        with open(md_path, mode, encoding='utf-8') as f:
            if mode == 'w' or os.stat(md_path).st_size == 0:
                f.write(markdown_heading(model))
            f.write(f"\n{report}\n")
    except OSError as e:
        print(f"[ERROR] Failed to write to '{md_path}': {e}")
        sys.exit(2)
    
    with open(md_path, 'r', encoding='utf-8') as f:
        html = markdown.markdown(f.read(), extensions=['tables'])
    if '<table' not in html:
        print(f"[ERROR] Markdown validation failed for '{md_path}': no calendar table rendered.")
        sys.exit(3)
