"""Report serialization adapters."""

from readme_survey.adapters.reports.csv_writer import CsvReportWriter

__all__ = ["CsvReportWriter"]
