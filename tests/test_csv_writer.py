"""Tests for the CSV report writer."""

import csv

from readme_survey.adapters.reports import CsvReportWriter
from readme_survey.core import Report


def test_write_reports(tmp_path) -> None:
    """Each report becomes one CSV file with a header row."""
    reports = [
        Report(name="tables", columns=["Owner", "Repository", "Stars"], rows=[["a", "b", "1"]]),
        Report(name="html", columns=["Owner", "Repository", "Stars"], rows=[]),
    ]
    destination = tmp_path / "nested" / "reports"

    paths = CsvReportWriter().write(reports, destination)

    assert paths == [destination / "tables.csv", destination / "html.csv"]
    assert (destination / "tables.csv").read_text(encoding="utf-8") == "Owner,Repository,Stars\na,b,1\n"
    assert (destination / "html.csv").read_text(encoding="utf-8") == "Owner,Repository,Stars\n"


def test_write_quotes_special_characters(tmp_path) -> None:
    """Commas and quotes in cells survive a round trip through csv."""
    cell = 'mailto:[redacted], "quoted"'
    report = Report(name="special_links", columns=["Link"], rows=[[cell]])

    (path,) = CsvReportWriter().write([report], tmp_path)

    with open(path, "r", encoding="utf-8", newline="") as f:
        assert list(csv.reader(f)) == [["Link"], [cell]]
